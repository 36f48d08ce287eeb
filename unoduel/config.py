"""Game and pacing configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from unoduel.engine.deck import DECK_SIZE
from unoduel.engine.hand import MAX_HAND_SIZE

THINK_MIN = 0.75
THINK_MAX = 1.5
DRAW_INTERVAL = 0.35


@dataclass(frozen=True)
class PacingConfig:
    """Delays, in seconds, that make automated actions perceivable."""

    think_min: float = THINK_MIN
    think_max: float = THINK_MAX
    draw_interval: float = DRAW_INTERVAL

    def __post_init__(self) -> None:
        if min(self.think_min, self.think_max, self.draw_interval) < 0:
            raise ValueError("Pacing delays must not be negative")
        if self.think_min > self.think_max:
            raise ValueError(
                f"think_min ({self.think_min}) must not exceed think_max ({self.think_max})"
            )

    @classmethod
    def instant(cls) -> "PacingConfig":
        return cls(think_min=0.0, think_max=0.0, draw_interval=0.0)


@dataclass(frozen=True)
class GameConfig:
    """Everything a host chooses before starting a game."""

    hand_size: int = 7
    max_hand_size: int = MAX_HAND_SIZE
    deck_size: int = DECK_SIZE
    with_action_cards: bool = False
    seed: Optional[int] = None
    pacing: PacingConfig = field(default_factory=PacingConfig)

    def __post_init__(self) -> None:
        if not 1 <= self.hand_size <= self.max_hand_size:
            raise ValueError(f"hand_size must be between 1 and {self.max_hand_size}")
        if self.deck_size < 2 * self.max_hand_size + 1:
            raise ValueError("deck_size is too small for two full hands")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "GameConfig":
        """Build a config from UNODUEL_* variables; explicit overrides win."""
        env = os.environ if environ is None else environ

        def _ms(name: str, default: float) -> float:
            raw = env.get(name)
            return default if raw in (None, "") else int(raw) / 1000.0

        pacing = PacingConfig(
            think_min=_ms("UNODUEL_THINK_MIN_MS", THINK_MIN),
            think_max=_ms("UNODUEL_THINK_MAX_MS", THINK_MAX),
            draw_interval=_ms("UNODUEL_DRAW_DELAY_MS", DRAW_INTERVAL),
        )
        seed = env.get("UNODUEL_SEED")
        values = {
            "seed": int(seed) if seed else None,
            "with_action_cards": env.get("UNODUEL_ACTION_CARDS", "").lower() in ("1", "true", "yes"),
            "pacing": pacing,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
