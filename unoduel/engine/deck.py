"""Deck creation, shuffling and drawing."""

import logging
import random
from typing import Iterator, List, Optional

from unoduel.engine.card import Card, Color, Kind
from unoduel.engine.pile import Pile

logger = logging.getLogger(__name__)

DECK_SIZE = 108

# Share of filler slots that become Draw Two cards
FILLER_DRAW_TWO_CHANCE = 0.25


def standard_cards(with_action_cards: bool = False) -> List[Card]:
    """Build the fixed part of the distribution.

    - 4 colors x (one 0, two each of 1-9, two Draw Two): 84 cards
    - with action cards, 4 colors x (two Skip, two Reverse): 16 more
    """
    cards: List[Card] = []
    for color in Color:
        cards.append(Card(color, Kind.CLASSIC, 0))
        for number in range(1, 10):
            cards.append(Card(color, Kind.CLASSIC, number))
            cards.append(Card(color, Kind.CLASSIC, number))
        kinds = [Kind.DRAW_TWO]
        if with_action_cards:
            kinds += [Kind.SKIP, Kind.REVERSE]
        for kind in kinds:
            cards.append(Card(color, kind))
            cards.append(Card(color, kind))
    return cards


def filler_card(rng: random.Random) -> Card:
    """A random Classic or Draw Two card used to pad the deck to full size."""
    color = rng.choice(list(Color))
    if rng.random() < FILLER_DRAW_TWO_CHANCE:
        return Card(color, Kind.DRAW_TWO)
    return Card(color, Kind.CLASSIC, rng.randrange(10))


class Deck:
    """The face-down draw pool. Top is the end of the sequence.

    When a pile is attached, an empty deck is restocked from the pile's
    buried cards so the number of cards in play never changes. Without a
    pile the deck recreates itself from scratch.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        pile: Optional[Pile] = None,
        with_action_cards: bool = False,
        size: int = DECK_SIZE,
    ):
        self._rng = rng or random.Random()
        self._pile = pile
        self._with_action_cards = with_action_cards
        self._size = size
        self._cards: List[Card] = []

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card: object) -> bool:
        return any(c is card for c in self._cards)

    @property
    def size(self) -> int:
        return self._size

    def create(self) -> None:
        """Reset the pool to a full, face-down, shuffled deck."""
        cards = standard_cards(self._with_action_cards)[: self._size]
        while len(cards) < self._size:
            cards.append(filler_card(self._rng))
        for card in cards:
            card.presentation.face_up = False
            card.presentation.target_rotation = self._rng.uniform(-180, 180)
        self._cards = cards
        self.shuffle()
        logger.debug("Created deck of %d cards", len(self._cards))

    def shuffle(self) -> None:
        """In-place Fisher-Yates shuffle."""
        cards = self._cards
        n = len(cards)
        while n > 1:
            n -= 1
            k = self._rng.randint(0, n)
            cards[k], cards[n] = cards[n], cards[k]

    def restock(self, cards: List[Card]) -> None:
        """Put cards back face-down under the current pool and reshuffle."""
        for card in cards:
            card.presentation.face_up = False
            card.presentation.zoom_requested = False
        self._cards = list(cards) + self._cards
        self.shuffle()

    def draw(self) -> Optional[Card]:
        """Remove and return the top card, refilling first if empty.

        Returns None only if an attached pile has nothing to give back.
        With both hands at the cap that is possible for decks of 41 cards
        or fewer, so callers must handle it.
        """
        if not self._cards:
            self._refill()
        if not self._cards:
            return None
        return self._cards.pop()

    def _refill(self) -> None:
        if self._pile is None:
            self.create()
            return
        buried = self._pile.take_all_but_top()
        logger.debug("Deck empty, restocking %d cards from the pile", len(buried))
        self.restock(buried)

    def count_by_color(self, color: Color) -> int:
        return sum(1 for card in self._cards if card.color is color)

    def count_by_kind(self, kind: Kind) -> int:
        return sum(1 for card in self._cards if card.kind is kind)
