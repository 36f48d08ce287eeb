"""Shared helpers for building hand-crafted game states."""

import random
from typing import Iterable, List, Optional

import pytest

from unoduel.engine import Actor, Card, Color, Deck, GameResult, GameState, Hand, Kind, Pile


def classic(color: Color, number: int) -> Card:
    return Card(color, Kind.CLASSIC, number)


def draw_two(color: Color) -> Card:
    return Card(color, Kind.DRAW_TWO)


def build_state(
    human: Iterable[Card],
    opponent: Iterable[Card],
    pile: Iterable[Card] = (),
    deck: Optional[List[Card]] = None,
    seed: int = 0,
) -> GameState:
    """A GameState holding exactly the given cards.

    Without an explicit deck a full fresh deck is created.
    """
    rng = random.Random(seed)
    p = Pile()
    for card in pile:
        p.push(card)
    d = Deck(rng=rng, pile=p)
    if deck is None:
        d.create()
    else:
        d.restock(deck)
    hands = {actor: Hand(actor) for actor in Actor}
    for card in human:
        hands[Actor.HUMAN].add(card)
    for card in opponent:
        hands[Actor.OPPONENT].add(card)
    total = len(d) + len(p) + len(hands[Actor.HUMAN]) + len(hands[Actor.OPPONENT])
    return GameState(deck=d, pile=p, hands=hands, total_cards=total, rng=rng)


class FakeClock:
    """Stands in for asyncio.sleep; records every requested delay."""

    def __init__(self) -> None:
        self.sleeps: List[float] = []
        self.on_sleep = None

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        if self.on_sleep is not None:
            await self.on_sleep(seconds)


class RecordingPresenter:
    def __init__(self) -> None:
        self.refreshes = 0
        self.results: List[GameResult] = []

    def request_layout_refresh(self) -> None:
        self.refreshes += 1

    def notify_game_ended(self, result: GameResult) -> None:
        self.results.append(result)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()
