"""
Agent module - the Player interface and baseline strategies.
"""

from coverage_explorer.agent.agent import Player, make_rng
from coverage_explorer.agent.baselines import RandomPlayer, GreedyPlayer

__all__ = [
    "Player",
    "RandomPlayer",
    "GreedyPlayer",
    "make_rng",
]
