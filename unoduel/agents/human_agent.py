"""Human agent - reads actions from terminal."""

from typing import Callable, List

from unoduel.engine import Action, PlayerView, can_follow
from unoduel.engine.rules import DrawCard, PlayCard


def describe_actions(player_view: PlayerView) -> List[Action]:
    """Legal plays in hand order, then DRAW."""
    actions: List[Action] = [
        PlayCard(card=card)
        for card in player_view.my_hand
        if can_follow(card, player_view.top_discard)
    ]
    actions.append(DrawCard())
    return actions


class HumanAgent:
    """Agent that prompts the human for input via terminal."""

    def __init__(
        self,
        name: str = "human",
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ):
        self._name = name
        self._read = read
        self._write = write

    @property
    def name(self) -> str:
        return self._name

    def get_action(self, player_view: PlayerView) -> Action:
        legal_actions = describe_actions(player_view)

        self._write("\n--- Your turn ---")
        self._write("Your hand: " + " ".join(str(c) for c in player_view.my_hand))
        self._write(f"Top discard: {player_view.top_discard or 'none'}")
        self._write(f"Opponent holds {player_view.opponent_hand_size} cards")
        self._write("\nLegal actions:")
        for i, a in enumerate(legal_actions):
            if isinstance(a, DrawCard):
                self._write(f"  {i}: DRAW")
            else:
                self._write(f"  {i}: PLAY {a.card}")

        while True:
            try:
                raw = self._read("Enter number: ").strip()
                idx = int(raw)
                if 0 <= idx < len(legal_actions):
                    return legal_actions[idx]
            except ValueError:
                pass
            self._write("Invalid. Try again.")
