"""
Selection module - the Monte Carlo decision engine and its parts.

Provides the main entry point:
- select_move(): one decision with a throwaway MonteCarloPlayer
"""

from __future__ import annotations

import random
from typing import Optional, TYPE_CHECKING

from coverage_explorer.core.config import EngineConfig, DEFAULT_ENGINE_CONFIG
from coverage_explorer.selection.engine import MonteCarloPlayer
from coverage_explorer.selection.evaluation import MoveEvaluator, secondary_scores
from coverage_explorer.selection.heuristics import edge_bonus, positional_score
from coverage_explorer.selection.playout import rollout
from coverage_explorer.selection.tiebreak import resolve

if TYPE_CHECKING:
    from coverage_explorer.core.types import Move
    from coverage_explorer.games.game_base import CoverageGame


def select_move(
    game: "CoverageGame",
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    debug: bool = False,
) -> Optional["Move"]:
    """
    Select a move for the current turn.

    Args:
        game: Current game (not mutated)
        config: Engine parameters
        seed: Seed for a fresh random stream (ignored if rng is given)
        rng: Random stream to use
        debug: If True, log the candidate table

    Returns:
        Selected move, or None when no legal move exists
    """
    player = MonteCarloPlayer(config, seed=seed, rng=rng, debug=debug)
    return player.decide(game)


__all__ = [
    "select_move",
    "MonteCarloPlayer",
    "MoveEvaluator",
    "secondary_scores",
    "positional_score",
    "edge_bonus",
    "rollout",
    "resolve",
]
