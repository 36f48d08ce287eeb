"""Tests for pacing and configuration."""

import asyncio
import random

import pytest

from conftest import FakeClock
from unoduel.config import GameConfig, PacingConfig
from unoduel.orchestration import CancellationToken, GameCancelled, PacingScheduler


def test_thinking_delay_stays_in_range() -> None:
    scheduler = PacingScheduler(PacingConfig(), random.Random(0))
    delays = [scheduler.thinking_delay() for _ in range(500)]
    assert all(0.75 <= d <= 1.5 for d in delays)
    assert max(delays) - min(delays) > 0.5


def test_think_and_draw_pauses(clock: FakeClock) -> None:
    scheduler = PacingScheduler(PacingConfig(), random.Random(0), clock.sleep)
    token = CancellationToken()

    async def run() -> float:
        delay = await scheduler.think(token)
        await scheduler.after_draw(token)
        return delay

    delay = asyncio.run(run())
    assert clock.sleeps == [delay, 0.35]


def test_pause_raises_when_cancelled_while_waiting(clock: FakeClock) -> None:
    scheduler = PacingScheduler(PacingConfig(), random.Random(0), clock.sleep)
    token = CancellationToken()

    async def cancel(seconds: float) -> None:
        token.cancel()

    clock.on_sleep = cancel
    with pytest.raises(GameCancelled):
        asyncio.run(scheduler.pause(1.0, token))


def test_pause_refuses_cancelled_token(clock: FakeClock) -> None:
    scheduler = PacingScheduler(PacingConfig(), random.Random(0), clock.sleep)
    token = CancellationToken()
    token.cancel()
    with pytest.raises(GameCancelled):
        asyncio.run(scheduler.pause(1.0, token))
    assert clock.sleeps == []


def test_real_sleep_with_instant_pacing() -> None:
    scheduler = PacingScheduler(PacingConfig.instant())
    asyncio.run(scheduler.think(CancellationToken()))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"think_min": -1.0},
        {"draw_interval": -0.1},
        {"think_min": 2.0, "think_max": 1.0},
    ],
)
def test_invalid_pacing(kwargs) -> None:
    with pytest.raises(ValueError):
        PacingConfig(**kwargs)


def test_invalid_game_config() -> None:
    with pytest.raises(ValueError):
        GameConfig(hand_size=0)
    with pytest.raises(ValueError):
        GameConfig(hand_size=21)
    with pytest.raises(ValueError):
        GameConfig(deck_size=30)


def test_config_from_env() -> None:
    env = {
        "UNODUEL_SEED": "17",
        "UNODUEL_THINK_MIN_MS": "100",
        "UNODUEL_THINK_MAX_MS": "200",
        "UNODUEL_DRAW_DELAY_MS": "50",
        "UNODUEL_ACTION_CARDS": "true",
    }
    config = GameConfig.from_env(env)
    assert config.seed == 17
    assert config.with_action_cards
    assert config.pacing == PacingConfig(think_min=0.1, think_max=0.2, draw_interval=0.05)


def test_config_overrides_win_over_env() -> None:
    config = GameConfig.from_env({"UNODUEL_SEED": "17"}, seed=3, pacing=PacingConfig.instant())
    assert config.seed == 3
    assert config.pacing == PacingConfig.instant()
    assert not config.with_action_cards


def test_config_defaults_from_empty_env() -> None:
    config = GameConfig.from_env({})
    assert config == GameConfig()
