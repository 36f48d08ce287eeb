"""Tournament - run many headless duels and aggregate results."""

import asyncio
import random
from collections import defaultdict
from typing import Optional

from unoduel.agents.random_agent import RandomAgent
from unoduel.config import GameConfig, PacingConfig
from unoduel.orchestration.game_runner import GameRunner, MatchResult
from unoduel.orchestration.turn_controller import TurnController


async def play_match(config: GameConfig, human_seed: Optional[int] = None) -> MatchResult:
    """One duel between a RandomAgent stand-in and the heuristic opponent."""
    controller = TurnController(config)
    runner = GameRunner(RandomAgent(seed=human_seed), controller)
    result = await runner.run()
    controller.state.check_invariants()
    return result


def run_matches(
    num_games: int = 100,
    seed: Optional[int] = None,
    with_action_cards: bool = False,
) -> dict[str, int]:
    """Play num_games duels with no pacing delays.

    Returns:
        Dict mapping "human", "opponent" and "unfinished" to game counts.
    """
    counts: dict[str, int] = defaultdict(int)
    rng = random.Random(seed)
    for _ in range(num_games):
        config = GameConfig(
            seed=rng.randint(0, 2**31 - 1),
            with_action_cards=with_action_cards,
            pacing=PacingConfig.instant(),
        )
        result = asyncio.run(play_match(config, human_seed=rng.randint(0, 2**31 - 1)))
        counts[result.winner.value if result.winner else "unfinished"] += 1
    return dict(counts)
