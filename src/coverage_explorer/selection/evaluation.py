"""
Move evaluation.

The primary score of a candidate move is

    primary = mean playout coverage
            + openness * future_moves_weight
            + edge bonus

where openness is the number of legal moves right after the candidate is
played. The playout average estimates the long run; the two extra terms
steer away from immediate dead ends and toward the board boundary.
"""

from __future__ import annotations

import random
from typing import Callable, List, Optional, Sequence, TYPE_CHECKING

from coverage_explorer.core.config import EngineConfig, DEFAULT_ENGINE_CONFIG
from coverage_explorer.core.types import CandidateScore, Move, SecondaryScore
from coverage_explorer.selection.heuristics import edge_bonus, positional_score
from coverage_explorer.selection.playout import rollout

if TYPE_CHECKING:
    from coverage_explorer.games.game_base import CoverageGame

SecondaryScorer = Callable[["CoverageGame", Move], float]


class MoveEvaluator:
    """Scores candidate moves with Monte Carlo playouts plus heuristics."""

    def __init__(self, config: EngineConfig = DEFAULT_ENGINE_CONFIG):
        self.config = config

    def evaluate(self, game: "CoverageGame", move: Move, rng: random.Random) -> Optional[float]:
        """
        Primary score of move, or None if it fails to apply.

        game itself is left untouched; all work happens on clones.
        """
        cfg = self.config
        after = game.deep_clone()
        if not after.apply_move(move):
            return None

        openness = len(after.valid_moves()) * cfg.future_moves_weight

        total = 0.0
        for _ in range(cfg.playouts):
            total += rollout(after.deep_clone(), cfg.max_steps, rng, cfg.explore_weight)
        avg_coverage = total / cfg.playouts

        return avg_coverage + openness + edge_bonus(game, move, cfg.edge_bonus)

    def evaluate_all(
        self,
        game: "CoverageGame",
        moves: Sequence[Move],
        rng: random.Random,
    ) -> List[CandidateScore]:
        """Primary scores in move order. Moves that fail to apply are skipped."""
        scores: List[CandidateScore] = []
        for move in moves:
            score = self.evaluate(game, move, rng)
            if score is not None:
                scores.append(CandidateScore(move, score))
        return scores


def applies(game: "CoverageGame", move: Move) -> bool:
    """True if move applies cleanly to a clone of game."""
    return game.deep_clone().apply_move(move)


def secondary_scores(
    game: "CoverageGame",
    moves: Sequence[Move],
    scorer: SecondaryScorer = positional_score,
) -> List[SecondaryScore]:
    """Secondary score for every move that applies, in move order."""
    return [SecondaryScore(m, scorer(game, m)) for m in moves if applies(game, m)]


def best_candidate(candidates: Sequence[CandidateScore]) -> Optional[Move]:
    """Highest primary score; the first one seen wins ties."""
    best: Optional[Move] = None
    best_score = float("-inf")
    for move, score in candidates:
        if score > best_score:
            best, best_score = move, score
    return best
