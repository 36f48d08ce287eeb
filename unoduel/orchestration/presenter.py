"""Presenter protocol - what the engine tells the host UI."""

from typing import Protocol

from unoduel.engine import GameResult


class Presenter(Protocol):
    """Host-side collaborator notified of engine changes."""

    def request_layout_refresh(self) -> None:
        """Container contents changed; positions should be recomputed."""
        ...

    def notify_game_ended(self, result: GameResult) -> None:
        """Called exactly once per game with the human's result."""
        ...


class NullPresenter:
    """Presenter for headless runs."""

    def request_layout_refresh(self) -> None:
        pass

    def notify_game_ended(self, result: GameResult) -> None:
        pass
