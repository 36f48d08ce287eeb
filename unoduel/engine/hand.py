"""Cards held by one actor."""

from typing import Iterator, List

from unoduel.engine.card import Actor, Card, Color, Kind

MAX_HAND_SIZE = 20


class Hand:
    """Ordered collection of cards owned by one actor, capped at max_size."""

    def __init__(self, owner: Actor, max_size: int = MAX_HAND_SIZE):
        self.owner = owner
        self.max_size = max_size
        self._cards: List[Card] = []

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card: object) -> bool:
        return any(c is card for c in self._cards)

    @property
    def cards(self) -> List[Card]:
        """A copy of the held cards, in the order they were drawn."""
        return list(self._cards)

    @property
    def is_full(self) -> bool:
        return len(self._cards) >= self.max_size

    @property
    def is_empty(self) -> bool:
        return not self._cards

    def add(self, card: Card) -> bool:
        """Take a card. Returns False, leaving the hand untouched, when full."""
        if self.is_full:
            return False
        self._cards.append(card)
        return True

    def remove(self, card: Card) -> None:
        for i, held in enumerate(self._cards):
            if held is card:
                del self._cards[i]
                return
        raise ValueError(f"Card {card} not in {self.owner.value} hand")

    def count_by_color(self, color: Color) -> int:
        return sum(1 for card in self._cards if card.color is color)

    def count_by_kind(self, kind: Kind) -> int:
        return sum(1 for card in self._cards if card.kind is kind)
