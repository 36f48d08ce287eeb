"""Game engine for UNO duel."""

from unoduel.engine.card import Actor, Card, Color, Kind
from unoduel.engine.deck import DECK_SIZE, Deck
from unoduel.engine.game_state import (
    GameResult,
    GameState,
    InvariantViolation,
    Phase,
    PlayerView,
)
from unoduel.engine.hand import MAX_HAND_SIZE, Hand
from unoduel.engine.pile import Pile
from unoduel.engine.rules import (
    Action,
    PlayCard,
    DrawCard,
    Effect,
    can_follow,
    card_effect,
    get_legal_actions,
    playable_cards,
    register_effect,
)

__all__ = [
    "Actor",
    "Card",
    "Color",
    "Kind",
    "DECK_SIZE",
    "Deck",
    "GameResult",
    "GameState",
    "InvariantViolation",
    "Phase",
    "PlayerView",
    "MAX_HAND_SIZE",
    "Hand",
    "Pile",
    "Action",
    "PlayCard",
    "DrawCard",
    "Effect",
    "can_follow",
    "card_effect",
    "get_legal_actions",
    "playable_cards",
    "register_effect",
]
