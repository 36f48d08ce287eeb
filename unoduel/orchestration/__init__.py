"""Game orchestration."""

from unoduel.orchestration.game_runner import GameRunner, MatchResult
from unoduel.orchestration.presenter import NullPresenter, Presenter
from unoduel.orchestration.scheduler import CancellationToken, GameCancelled, PacingScheduler
from unoduel.orchestration.tournament import run_matches
from unoduel.orchestration.turn_controller import TurnController

__all__ = [
    "GameRunner",
    "MatchResult",
    "NullPresenter",
    "Presenter",
    "CancellationToken",
    "GameCancelled",
    "PacingScheduler",
    "run_matches",
    "TurnController",
]
