"""CLI entry point."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import typer
from dotenv import load_dotenv

from unoduel.engine import Actor, GameResult

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="UNO duel: you against a heuristic opponent")


class TerminalPresenter:
    """Echoes container sizes after every change and the final result."""

    def __init__(self) -> None:
        self.controller = None

    def request_layout_refresh(self) -> None:
        if self.controller is None:
            return
        state = self.controller.state
        typer.echo(
            f"  [you: {len(state.hands[Actor.HUMAN])} | "
            f"opponent: {len(state.hands[Actor.OPPONENT])} | "
            f"deck: {len(state.deck)} | top: {state.top_discard() or '-'}]"
        )

    def notify_game_ended(self, result: GameResult) -> None:
        if result is GameResult.WIN:
            typer.secho("You won!", fg=typer.colors.GREEN, bold=True)
        else:
            typer.secho("You lost!", fg=typer.colors.RED, bold=True)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")


@app.command()
def play(
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    fast: bool = typer.Option(False, "--fast", help="Skip thinking and draw delays"),
    action_cards: bool = typer.Option(
        False, "--action-cards", help="Put Skip and Reverse cards in the deck"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log engine events"),
) -> None:
    """Play one duel in the terminal."""
    from unoduel.agents.human_agent import HumanAgent
    from unoduel.config import GameConfig, PacingConfig
    from unoduel.orchestration.game_runner import GameRunner
    from unoduel.orchestration.turn_controller import TurnController

    _configure_logging(verbose)
    config = GameConfig.from_env(
        seed=seed,
        with_action_cards=True if action_cards else None,
        pacing=PacingConfig.instant() if fast else None,
    )
    presenter = TerminalPresenter()
    controller = TurnController(config, presenter=presenter)
    presenter.controller = controller
    runner = GameRunner(HumanAgent(name="you"), controller, threaded_input=True)
    result = asyncio.run(runner.run())
    if result.winner is None:
        typer.echo("Game stopped without a winner.")
    typer.echo(f"Turns: {result.num_turns}")


@app.command()
def simulate(
    games: int = typer.Option(100, "--games", "-g", help="Number of games"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    action_cards: bool = typer.Option(
        False, "--action-cards", help="Put Skip and Reverse cards in the deck"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log engine events"),
) -> None:
    """Pit a random stand-in human against the heuristic opponent."""
    from unoduel.orchestration.tournament import run_matches

    _configure_logging(verbose)
    counts = run_matches(num_games=games, seed=seed, with_action_cards=action_cards)
    typer.echo("Simulation results:")
    for side, n in sorted(counts.items(), key=lambda x: -x[1]):
        typer.echo(f"  {side}: {n}")


if __name__ == "__main__":
    app()
