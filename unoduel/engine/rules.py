"""UNO duel rules: legality, card effects and single-step state transitions."""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Union

from unoduel.engine.card import Actor, Card, Kind
from unoduel.engine.game_state import GameState

logger = logging.getLogger(__name__)


@dataclass
class PlayCard:
    """Action: play a card from hand."""

    card: Card


@dataclass
class DrawCard:
    """Action: draw a card (when no legal play or the actor chooses to draw)."""

    pass


Action = Union[PlayCard, DrawCard]


def can_follow(candidate: Card, top: Optional[Card]) -> bool:
    """Check if candidate may be played on top of the pile.

    Color always matches. Special kinds match the same kind, Classic cards
    match the same number. Anything goes on an empty pile.
    """
    if top is None:
        return True
    if candidate.color is top.color:
        return True
    if candidate.kind is not top.kind:
        return False
    if candidate.is_classic:
        return candidate.number == top.number
    return True


def playable_cards(state: GameState, actor: Actor) -> List[Card]:
    """Cards in actor's hand that can follow the pile top, in hand order."""
    top = state.top_discard()
    return [card for card in state.hands[actor] if can_follow(card, top)]


def get_legal_actions(state: GameState, actor: Actor) -> List[Action]:
    """Every play the actor could make now, plus drawing."""
    if state.ended:
        return []
    actions: List[Action] = [PlayCard(card=card) for card in playable_cards(state, actor)]
    actions.append(DrawCard())
    return actions


@dataclass(frozen=True)
class Effect:
    """What happens after a card lands on the pile."""

    draw_penalty: int = 0  # cards the other actor must draw
    extra_turn: bool = False  # the actor who played moves again


NO_EFFECT = Effect()

EffectHandler = Callable[[Card], Effect]

_EFFECTS: Dict[Kind, EffectHandler] = {}


def register_effect(kind: Kind) -> Callable[[EffectHandler], EffectHandler]:
    """Register the effect handler for a card kind."""

    def decorator(handler: EffectHandler) -> EffectHandler:
        _EFFECTS[kind] = handler
        return handler

    return decorator


@register_effect(Kind.DRAW_TWO)
def _draw_two(card: Card) -> Effect:
    return Effect(draw_penalty=2)


@register_effect(Kind.SKIP)
def _skip(card: Card) -> Effect:
    # With two players, skipping the other actor hands the turn straight back
    return Effect(extra_turn=True)


@register_effect(Kind.REVERSE)
def _reverse(card: Card) -> Effect:
    return Effect(extra_turn=True)


def card_effect(card: Card) -> Effect:
    handler = _EFFECTS.get(card.kind)
    return handler(card) if handler else NO_EFFECT


def draw_one(state: GameState, actor: Actor) -> Optional[Card]:
    """Move the deck's top card into actor's hand.

    Returns the card, or None when the hand is already at its cap or
    neither the deck nor the pile has a card to give. Check hand.is_full
    to tell the two apart.
    """
    hand = state.hands[actor]
    if hand.is_full:
        return None
    card = state.deck.draw()
    if card is None:
        return None
    hand.add(card)
    card.presentation.target_rotation = 0.0
    if actor is Actor.HUMAN:
        card.presentation.face_up = True
        card.presentation.zoom_requested = True
    logger.debug("%s drew %s (%d in hand)", actor.value, card, len(hand))
    return card


def play_card(state: GameState, actor: Actor, card: Card) -> Optional[Effect]:
    """Move card from actor's hand to the pile.

    Returns the card's effect, or None if the play was rejected (card not
    held, or it cannot follow the pile top). A rejected play changes nothing.
    """
    if state.ended:
        return None
    hand = state.hands[actor]
    if card not in hand or not can_follow(card, state.top_discard()):
        return None
    hand.remove(card)
    state.pile.push(card)
    card.presentation.face_up = True
    card.presentation.zoom_requested = False
    card.presentation.target_rotation = state.rng.uniform(-180, 180)
    state.history.append(f"{actor.value} played {card}")
    logger.debug("%s played %s (%d left)", actor.value, card, len(hand))
    return card_effect(card)


def find_winner(state: GameState) -> Optional[Actor]:
    """The actor whose hand is empty, if any."""
    for actor in Actor:
        if state.hands[actor].is_empty:
            return actor
    return None
