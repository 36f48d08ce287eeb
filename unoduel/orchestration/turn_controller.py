"""Turn controller: the state machine that runs one duel."""

from __future__ import annotations

import asyncio
import logging
import random
from typing import TYPE_CHECKING, List, Optional

from unoduel.config import GameConfig
from unoduel.engine import (
    Actor,
    Card,
    Color,
    DrawCard,
    Effect,
    GameResult,
    GameState,
    Kind,
    Phase,
    PlayCard,
    PlayerView,
    playable_cards,
)
from unoduel.engine.rules import draw_one, find_winner, play_card
from unoduel.orchestration.presenter import NullPresenter, Presenter
from unoduel.orchestration.scheduler import (
    CancellationToken,
    GameCancelled,
    PacingScheduler,
    Sleep,
)

if TYPE_CHECKING:
    from unoduel.agent.protocol import AgentProtocol

logger = logging.getLogger(__name__)


class TurnController:
    """Sequences human and opponent turns over a GameState.

    The human acts through submit_human_play / submit_human_draw. Each call
    resolves the human's action, its side effects, and the opponent's
    reply before returning, so turns never overlap. Calls made while it is
    not the human's turn are rejected.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        presenter: Optional[Presenter] = None,
        opponent: Optional["AgentProtocol"] = None,
        sleep: Sleep = asyncio.sleep,
    ):
        if opponent is None:
            from unoduel.agents.heuristic_agent import HeuristicAgent

            opponent = HeuristicAgent()
        self._config = config or GameConfig()
        self._presenter = presenter or NullPresenter()
        self._opponent = opponent
        pacing_seed = None if self._config.seed is None else self._config.seed + 1
        self._scheduler = PacingScheduler(self._config.pacing, random.Random(pacing_seed), sleep)
        self._token = CancellationToken()
        self.state = GameState.new_game(self._config)

    @property
    def scheduler(self) -> PacingScheduler:
        return self._scheduler

    def start(self) -> None:
        """Show the human their dealt hand and hand them the first turn."""
        if self.state.ended:
            logger.debug("Ignoring start of a finished game; use restart()")
            return
        for card in self.state.hands[Actor.HUMAN]:
            card.presentation.face_up = True
        self.state.phase = Phase.HUMAN_TURN
        self.state.active = True
        logger.info("Game started, %d cards each", len(self.state.hands[Actor.HUMAN]))
        self._presenter.request_layout_refresh()

    def restart(self, config: Optional[GameConfig] = None) -> None:
        """Discard the current game, including any pending continuation."""
        self._token.cancel()
        self._token = CancellationToken()
        if config is not None:
            self._config = config
        self.state = GameState.new_game(self._config)
        self.start()

    # Queries

    def view(self, actor: Actor = Actor.HUMAN) -> PlayerView:
        return PlayerView.from_state(self.state, actor)

    def playable_cards(self, actor: Actor = Actor.HUMAN) -> List[Card]:
        return playable_cards(self.state, actor)

    def card_count_by_color(self, color: Color) -> int:
        """Cards of color left in the deck."""
        return self.state.deck.count_by_color(color)

    def card_count_by_kind(self, kind: Kind) -> int:
        """Cards of kind left in the deck."""
        return self.state.deck.count_by_kind(kind)

    def current_turn_owner(self) -> Actor:
        """Actor to move; the winner once the game is over."""
        return self.state.turn_owner

    def is_game_over(self) -> bool:
        return self.state.ended

    def accepts_human_input(self) -> bool:
        state = self.state
        return state.phase is Phase.HUMAN_TURN and state.active and not state.ended

    # Human input

    async def submit_human_play(self, card: Card) -> bool:
        """Play card for the human. Returns False if the play was rejected."""
        if not self.accepts_human_input():
            logger.debug("Ignoring human play outside the human turn")
            return False
        state, token = self.state, self._token
        effect = play_card(state, Actor.HUMAN, card)
        if effect is None:
            logger.debug("Rejected illegal human play of %s", card)
            return False
        state.active = False
        try:
            self._presenter.request_layout_refresh()
            if self._check_end(state):
                return True
            if await self._apply_effect(state, Actor.HUMAN, effect, token):
                state.active = True
                return True
            await self._opponent_turn(state, token)
        except GameCancelled:
            return False
        return True

    async def submit_human_draw(self) -> bool:
        """Draw one card for the human and pass the turn."""
        if not self.accepts_human_input():
            logger.debug("Ignoring human draw outside the human turn")
            return False
        state, token = self.state, self._token
        state.active = False
        try:
            drawn = await self._draw(state, Actor.HUMAN, 1, token)
            state.history.append(_draw_note(state, Actor.HUMAN, drawn))
            await self._opponent_turn(state, token)
        except GameCancelled:
            return False
        return True

    # End detection

    def check_game_end(self) -> bool:
        """End the game if a hand is empty and report whether it is over.

        Safe to call any number of times; the presenter hears about the end once.
        """
        return self._check_end(self.state)

    def _check_end(self, state: GameState) -> bool:
        winner = find_winner(state)
        if winner is None or not state.try_end(winner):
            return state.ended
        result = GameResult.WIN if winner is Actor.HUMAN else GameResult.LOSE
        state.history.append(f"{winner.value} WON!")
        logger.info("Game over: human %s", result.value)
        if state is self.state:
            self._presenter.notify_game_ended(result)
        return True

    # Internals

    async def _draw(self, state: GameState, actor: Actor, count: int, token: CancellationToken) -> int:
        """Transfer up to count cards one at a time, pausing after each."""
        drawn = 0
        for _ in range(count):
            if state.hands[actor].is_full:
                logger.debug("%s hand is full, skipping remaining draws", actor.value)
                break
            if draw_one(state, actor) is None:
                logger.warning("Deck and pile are both exhausted, %s draws nothing", actor.value)
                break
            drawn += 1
            self._presenter.request_layout_refresh()
            await self._scheduler.after_draw(token)
        return drawn

    async def _apply_effect(
        self, state: GameState, actor: Actor, effect: Effect, token: CancellationToken
    ) -> bool:
        """Resolve a played card's effect. Returns True if actor moves again."""
        if effect.draw_penalty:
            victim = actor.other
            drawn = await self._draw(state, victim, effect.draw_penalty, token)
            noun = "card" if drawn == 1 else "cards"
            state.history.append(f"{victim.value} drew {drawn} {noun} (penalty)")
        return effect.extra_turn

    async def _opponent_turn(self, state: GameState, token: CancellationToken) -> None:
        while True:
            state.phase = Phase.OPPONENT_THINKING
            await self._scheduler.think(token)
            state.phase = Phase.OPPONENT_TURN

            action = self._opponent.get_action(PlayerView.from_state(state, Actor.OPPONENT))
            extra_turn = False
            if isinstance(action, PlayCard):
                effect = play_card(state, Actor.OPPONENT, action.card)
                if effect is None:
                    logger.warning("Opponent chose illegal play %s, drawing instead", action.card)
                    action = DrawCard()
                else:
                    self._presenter.request_layout_refresh()
                    if self._check_end(state):
                        return
                    extra_turn = await self._apply_effect(state, Actor.OPPONENT, effect, token)
            if isinstance(action, DrawCard):
                drawn = await self._draw(state, Actor.OPPONENT, 1, token)
                state.history.append(_draw_note(state, Actor.OPPONENT, drawn))
            if not extra_turn:
                break

        state.phase = Phase.HUMAN_TURN
        state.active = True
        logger.debug("Turn passes to human")


def _draw_note(state: GameState, actor: Actor, drawn: int) -> str:
    """History entry for a single-card draw."""
    if drawn:
        return f"{actor.value} drew a card"
    if state.hands[actor].is_full:
        return f"{actor.value} hand is full"
    return f"{actor.value} found no cards to draw"
