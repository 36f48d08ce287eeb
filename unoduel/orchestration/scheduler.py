"""Pacing: the timed pauses between engine steps.

Every pause carries the cancellation token of the game that requested it.
When the game is reset while a pause is pending, the continuation raises
GameCancelled as soon as it resumes instead of touching state.
"""

import asyncio
import logging
import random
from typing import Awaitable, Callable, Optional

from unoduel.config import PacingConfig

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class GameCancelled(Exception):
    """A delayed continuation woke up after its game was discarded."""


class CancellationToken:
    """Tied to one game instance; cancelled when that game is reset."""

    def __init__(self) -> None:
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True

    def raise_if_cancelled(self) -> None:
        if self._cancelled:
            raise GameCancelled()


class PacingScheduler:
    """Cooperative delays for opponent thinking and staggered draws."""

    def __init__(
        self,
        pacing: Optional[PacingConfig] = None,
        rng: Optional[random.Random] = None,
        sleep: Sleep = asyncio.sleep,
    ):
        self.pacing = pacing or PacingConfig()
        self._rng = rng or random.Random()
        self._sleep = sleep

    def thinking_delay(self) -> float:
        """A uniformly random thinking time within the configured range."""
        return self._rng.uniform(self.pacing.think_min, self.pacing.think_max)

    async def pause(self, seconds: float, token: CancellationToken) -> None:
        """Suspend for seconds, then fail if the owning game was reset meanwhile."""
        token.raise_if_cancelled()
        await self._sleep(seconds)
        if token.cancelled:
            logger.warning("Dropping continuation of a game that was reset")
            raise GameCancelled()

    async def think(self, token: CancellationToken) -> float:
        delay = self.thinking_delay()
        logger.debug("Opponent thinking for %.2fs", delay)
        await self.pause(delay, token)
        return delay

    async def after_draw(self, token: CancellationToken) -> None:
        await self.pause(self.pacing.draw_interval, token)
