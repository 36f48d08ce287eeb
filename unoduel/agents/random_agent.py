"""Random agent, used to stand in for the human in simulations."""

import random
from typing import Optional

from unoduel.engine import Action, DrawCard, PlayCard, PlayerView, can_follow


class RandomAgent:
    """Plays a random legal card, draws only when nothing fits."""

    def __init__(self, name: str = "random", seed: Optional[int] = None):
        self._name = name
        self._rng = random.Random(seed)

    @property
    def name(self) -> str:
        return self._name

    def get_action(self, player_view: PlayerView) -> Action:
        playable = [c for c in player_view.my_hand if can_follow(c, player_view.top_discard)]
        if playable:
            return PlayCard(card=self._rng.choice(playable))
        return DrawCard()
