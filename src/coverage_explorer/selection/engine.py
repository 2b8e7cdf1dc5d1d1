"""
Monte Carlo decision engine.

decide() runs the whole procedure for one turn:

    1. No legal moves → None
    2. Primary score per move (playouts + openness + edge bonus); best kept,
       first seen wins ties
    3. Secondary (positional) score per applicable move, ranked descending
    4. Top two secondary scores within tie_threshold → tie-break on openness
       among the top tie_candidates
    5. Otherwise the best primary move, or the first legal move if nothing
       could be scored
"""

from __future__ import annotations

import logging
import random
from typing import Optional, TYPE_CHECKING

from coverage_explorer.agent.agent import Player, make_rng
from coverage_explorer.core.config import EngineConfig, DEFAULT_ENGINE_CONFIG
from coverage_explorer.debug.viz import render_candidates
from coverage_explorer.selection import tiebreak
from coverage_explorer.selection.evaluation import (
    MoveEvaluator,
    SecondaryScorer,
    best_candidate,
    secondary_scores,
)
from coverage_explorer.selection.heuristics import positional_score

if TYPE_CHECKING:
    from coverage_explorer.core.types import Move
    from coverage_explorer.games.game_base import CoverageGame

logger = logging.getLogger(__name__)


class MonteCarloPlayer(Player):
    """
    Coverage-maximizing player built on weighted Monte Carlo playouts.

    Stateless across turns: every decide() works only on the game passed in.
    The random stream is owned by the player unless one is passed per call.
    """

    name = "monte_carlo"

    def __init__(
        self,
        config: EngineConfig = DEFAULT_ENGINE_CONFIG,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        secondary: SecondaryScorer = positional_score,
        debug: bool = False,
    ):
        self.config = config
        self.rng = make_rng(seed, rng)
        self.secondary = secondary
        self.debug = debug
        self.evaluator = MoveEvaluator(config)

    def decide(self, game: "CoverageGame", rng: Optional[random.Random] = None) -> Optional["Move"]:
        rng = rng or self.rng
        moves = game.valid_moves()
        if not moves:
            return None

        candidates = self.evaluator.evaluate_all(game, moves, rng)
        best = best_candidate(candidates)

        ranked = tiebreak.rank(secondary_scores(game, moves, self.secondary))
        tied = tiebreak.is_tied(ranked, self.config.tie_threshold)

        if tied:
            chosen = tiebreak.resolve(game, ranked[:self.config.tie_candidates])
        elif best is not None:
            chosen = best
        else:
            # Not re-verified: relies on the board never listing a move it then rejects.
            logger.warning(
                "No candidate of %d applied on a clone; falling back to %s",
                len(moves), moves[0],
            )
            chosen = moves[0]

        if self.debug:
            logger.info("\n%s", render_candidates(candidates, ranked, chosen, tied))
        else:
            logger.debug(
                "decide: %d moves, %d scored, tie-break=%s, chosen=%s",
                len(moves), len(candidates), tied, chosen,
            )
        return chosen
