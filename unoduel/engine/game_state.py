"""Game state for UNO duel."""

from __future__ import annotations

import random
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Optional

from unoduel.engine.card import Actor, Card
from unoduel.engine.deck import Deck
from unoduel.engine.hand import Hand
from unoduel.engine.pile import Pile

if TYPE_CHECKING:
    from unoduel.config import GameConfig


class Phase(str, Enum):
    """Turn controller states."""

    HUMAN_TURN = "human_turn"
    OPPONENT_THINKING = "opponent_thinking"
    OPPONENT_TURN = "opponent_turn"
    GAME_OVER = "game_over"


class GameResult(str, Enum):
    """Outcome from the human's point of view."""

    WIN = "win"
    LOSE = "lose"


class InvariantViolation(AssertionError):
    """A card went missing, got duplicated, or sits in two containers."""


@dataclass(eq=False)
class GameState:
    """Mutable state of one duel: all four containers plus turn bookkeeping."""

    deck: Deck
    pile: Pile
    hands: Dict[Actor, Hand]
    total_cards: int
    rng: random.Random
    phase: Phase = Phase.HUMAN_TURN
    active: bool = True
    winner: Optional[Actor] = None
    history: List[str] = field(default_factory=list)  # Log of events
    _ended: bool = field(default=False, repr=False)
    _end_lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @classmethod
    def new_game(cls, config: Optional["GameConfig"] = None) -> "GameState":
        """Create a shuffled deck, empty pile, and deal both hands face-down.

        The human is dealt first and moves first.
        """
        from unoduel.config import GameConfig

        config = config or GameConfig()
        rng = random.Random(config.seed)
        pile = Pile()
        deck = Deck(rng=rng, pile=pile, with_action_cards=config.with_action_cards, size=config.deck_size)
        deck.create()
        hands = {actor: Hand(actor, config.max_hand_size) for actor in Actor}
        for _ in range(config.hand_size):
            for actor in Actor:
                card = deck.draw()
                if card is not None:
                    hands[actor].add(card)
        return cls(deck=deck, pile=pile, hands=hands, total_cards=config.deck_size, rng=rng)

    @property
    def turn_owner(self) -> Actor:
        """Actor whose turn it is.

        After game over this is the winner, the actor who made the last play.
        """
        if self.phase in (Phase.OPPONENT_THINKING, Phase.OPPONENT_TURN):
            return Actor.OPPONENT
        if self.phase is Phase.GAME_OVER and self.winner is not None:
            return self.winner
        return Actor.HUMAN

    @property
    def ended(self) -> bool:
        return self._ended

    def top_discard(self) -> Optional[Card]:
        """Return the top card on the discard pile."""
        return self.pile.top()

    def hand(self, actor: Actor) -> Hand:
        return self.hands[actor]

    def try_end(self, winner: Actor) -> bool:
        """Mark the game over. Only the first caller gets True."""
        with self._end_lock:
            if self._ended:
                return False
            self._ended = True
            self.winner = winner
            self.phase = Phase.GAME_OVER
            self.active = False
            return True

    def check_invariants(self) -> None:
        """Raise InvariantViolation unless every card sits in exactly one container."""
        containers = [self.deck, self.pile, self.hands[Actor.HUMAN], self.hands[Actor.OPPONENT]]
        seen: set[int] = set()
        count = 0
        for container in containers:
            for card in container:
                if id(card) in seen:
                    raise InvariantViolation(f"Card {card} found in two places")
                seen.add(id(card))
                count += 1
        if count != self.total_cards:
            raise InvariantViolation(f"Expected {self.total_cards} cards in play, found {count}")


@dataclass
class PlayerView:
    """Filtered game state visible to a single actor.

    Contains only that actor's hand and public info.
    """

    me: Actor
    my_hand: List[Card]
    top_discard: Optional[Card]
    opponent_hand_size: int
    deck_size: int
    phase: Phase
    history: List[str]  # Recent game events

    @classmethod
    def from_state(cls, state: GameState, actor: Actor) -> "PlayerView":
        """Create a view from full game state, hiding the other actor's hand."""
        return cls(
            me=actor,
            my_hand=state.hands[actor].cards,
            top_discard=state.top_discard(),
            opponent_hand_size=len(state.hands[actor.other]),
            deck_size=len(state.deck),
            phase=state.phase,
            history=list(state.history[-10:]),  # Last 10 events
        )
