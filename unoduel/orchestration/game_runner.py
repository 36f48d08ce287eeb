"""Single game runner: feeds a human-side agent into a TurnController."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from unoduel.engine import Actor, DrawCard, PlayCard
from unoduel.orchestration.turn_controller import TurnController

if TYPE_CHECKING:
    from unoduel.agent.protocol import AgentProtocol


@dataclass
class MatchResult:
    """Result of a completed game."""

    winner: Optional[Actor]
    num_turns: int
    history: tuple[str, ...]


class GameRunner:
    """Runs a single duel to completion.

    The agent plays the human side. With threaded_input the agent is asked
    from a worker thread, so a blocking terminal prompt does not stall the
    event loop.
    """

    def __init__(
        self,
        agent: "AgentProtocol",
        controller: TurnController,
        threaded_input: bool = False,
        max_turns: int = 1000,
    ):
        self._agent = agent
        self._controller = controller
        self._threaded_input = threaded_input
        self._max_turns = max_turns

    async def run(self) -> MatchResult:
        """Run the game and return the result."""
        controller = self._controller
        controller.start()
        num_turns = 0

        while not controller.is_game_over() and num_turns < self._max_turns:
            view = controller.view(Actor.HUMAN)
            if self._threaded_input:
                action = await asyncio.to_thread(self._agent.get_action, view)
            else:
                action = self._agent.get_action(view)

            if isinstance(action, PlayCard):
                accepted = await controller.submit_human_play(action.card)
            else:
                accepted = False
            if not accepted or isinstance(action, DrawCard):
                accepted = await controller.submit_human_draw()
            if not accepted:
                break
            num_turns += 1

        state = controller.state
        return MatchResult(
            winner=state.winner,
            num_turns=num_turns,
            history=tuple(state.history),
        )
