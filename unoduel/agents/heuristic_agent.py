"""Heuristic opponent strategy.

Picks one action from the opponent's hand, the human's hand size and the
pile top. Tie-breaks between several legal cards, first match wins:

1. Aggression: when the opponent holds at least as many cards as the human
   and the human is down to 3 or fewer, play a Draw Two.
2. Endgame caution: with 2 or fewer cards left, avoid Draw Two.
3. Color balancing: play the scarcest color in hand, Classic before others.
4. Fallback: the first candidate in hand order.

The decision is a pure function of its inputs.
"""

from collections import Counter
from typing import List, Optional, Sequence

from unoduel.engine import Action, Card, Color, DrawCard, Kind, PlayCard, PlayerView, can_follow

AGGRESSION_HUMAN_MAX = 3
ENDGAME_HAND_MAX = 2


def legal_candidates(hand: Sequence[Card], top: Optional[Card]) -> List[Card]:
    """Cards in hand order that may follow top."""
    return [card for card in hand if can_follow(card, top)]


def color_balance(hand: Sequence[Card], candidates: Sequence[Card]) -> Optional[Card]:
    """Pick a candidate of the color the hand holds fewest of.

    Colors are ranked by count ascending, ties in Color order. Within the
    chosen color Classic cards come before special kinds.
    """
    counts = Counter(card.color for card in hand)
    ranked = sorted(Color, key=lambda color: counts[color])
    for color in ranked:
        of_color = [card for card in candidates if card.color is color]
        if of_color:
            classic = [card for card in of_color if card.is_classic]
            return (classic or of_color)[0]
    return None


def choose_card(hand: Sequence[Card], candidates: Sequence[Card], human_hand_size: int) -> Card:
    """Choose among several candidates using the tie-break heuristics."""
    pool = list(candidates)
    if len(pool) == 1:
        return pool[0]

    draw_twos = [card for card in pool if card.kind is Kind.DRAW_TWO]
    others = [card for card in pool if card.kind is not Kind.DRAW_TWO]
    if draw_twos and len(hand) >= human_hand_size and human_hand_size <= AGGRESSION_HUMAN_MAX:
        pool = draw_twos
    elif others and len(hand) <= ENDGAME_HAND_MAX:
        pool = others

    return color_balance(hand, pool) or pool[0]


def choose_action(hand: Sequence[Card], human_hand_size: int, top: Optional[Card]) -> Action:
    """Return exactly one action for the opponent."""
    if not hand:
        return DrawCard()
    candidates = list(hand) if top is None else legal_candidates(hand, top)
    if not candidates:
        return DrawCard()
    return PlayCard(card=choose_card(hand, candidates, human_hand_size))


class HeuristicAgent:
    """The automated opponent."""

    @property
    def name(self) -> str:
        return "heuristic"

    def get_action(self, player_view: PlayerView) -> Action:
        return choose_action(
            player_view.my_hand,
            player_view.opponent_hand_size,
            player_view.top_discard,
        )
