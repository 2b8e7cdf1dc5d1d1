"""
Baseline strategies to compare the Monte Carlo engine against.

- RandomPlayer: uniform over legal moves
- GreedyPlayer: one-ahead, most follow-up moves wins (Warnsdorff-style,
  inverted: it keeps options open instead of closing corners)
"""

from __future__ import annotations

import random
from typing import Optional, TYPE_CHECKING

from coverage_explorer.agent.agent import Player, make_rng

if TYPE_CHECKING:
    from coverage_explorer.core.types import Move
    from coverage_explorer.games.game_base import CoverageGame


class RandomPlayer(Player):
    """Uniformly random legal move."""

    name = "random"

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.rng = make_rng(seed, rng)

    def decide(self, game: "CoverageGame", rng: Optional[random.Random] = None) -> Optional["Move"]:
        moves = game.valid_moves()
        if not moves:
            return None
        return (rng or self.rng).choice(moves)


class GreedyPlayer(Player):
    """Move that leaves the most legal moves behind it. First seen wins ties."""

    name = "greedy"

    def decide(self, game: "CoverageGame", rng: Optional[random.Random] = None) -> Optional["Move"]:
        best, best_open = None, -1
        for move in game.valid_moves():
            clone = game.deep_clone()
            if not clone.apply_move(move):
                continue
            openness = len(clone.valid_moves())
            if openness > best_open:
                best, best_open = move, openness
        return best
