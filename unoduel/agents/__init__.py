"""Built-in agents."""

from unoduel.agents.heuristic_agent import HeuristicAgent
from unoduel.agents.human_agent import HumanAgent
from unoduel.agents.random_agent import RandomAgent

__all__ = ["HeuristicAgent", "HumanAgent", "RandomAgent"]
