"""UNO duel: a two-player UNO engine with a heuristic opponent."""

__version__ = "0.1.0"
