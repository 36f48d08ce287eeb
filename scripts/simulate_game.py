"""Simulate a duel between a random stand-in human and the heuristic opponent."""

import asyncio

from unoduel.agents import RandomAgent
from unoduel.config import GameConfig, PacingConfig
from unoduel.orchestration import GameRunner, TurnController


def main():
    config = GameConfig(seed=42, pacing=PacingConfig.instant())
    controller = TurnController(config)
    runner = GameRunner(RandomAgent(seed=7), controller)
    result = asyncio.run(runner.run())

    for event in result.history:
        print(f"> {event}")

    print(f"Game finished! Winner: {result.winner.value if result.winner else 'none'}")
    print(f"Turns: {result.num_turns}")
    controller.state.check_invariants()


if __name__ == "__main__":
    main()
