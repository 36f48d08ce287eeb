"""Discard pile: played cards, top is last."""

from typing import Iterator, List, Optional

from unoduel.engine.card import Card


class Pile:
    """Face-up stack of played cards. Only the top is relevant to the rules."""

    def __init__(self) -> None:
        self._cards: List[Card] = []

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card: object) -> bool:
        return any(c is card for c in self._cards)

    def top(self) -> Optional[Card]:
        """Return the most recently played card, or None before the first play."""
        return self._cards[-1] if self._cards else None

    def push(self, card: Card) -> None:
        self._cards.append(card)

    def take_all_but_top(self) -> List[Card]:
        """Remove and return every card under the top one."""
        if len(self._cards) <= 1:
            return []
        under = self._cards[:-1]
        self._cards = self._cards[-1:]
        return under
