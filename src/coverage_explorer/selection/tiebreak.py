"""
Tie-break on immediate openness.

When the positional heuristic cannot separate the leading candidates, the one
that leaves the most legal moves after it is played wins.
"""

from __future__ import annotations

from typing import List, Sequence, TYPE_CHECKING

from coverage_explorer.core.types import SecondaryScore

if TYPE_CHECKING:
    from coverage_explorer.core.types import Move
    from coverage_explorer.games.game_base import CoverageGame


def is_tied(ranked: Sequence[SecondaryScore], threshold: float) -> bool:
    """At least two candidates and the top two closer than threshold."""
    return len(ranked) >= 2 and abs(ranked[0].score - ranked[1].score) < threshold


def rank(scores: Sequence[SecondaryScore]) -> List[SecondaryScore]:
    """Sort descending by score. Stable, so equal scores keep their order."""
    return sorted(scores, key=lambda s: s.score, reverse=True)


def openness_after(game: "CoverageGame", move: "Move") -> int:
    """Legal moves available once move is played on a clone."""
    clone = game.deep_clone()
    clone.apply_move(move)
    return len(clone.valid_moves())


def resolve(game: "CoverageGame", candidates: Sequence[SecondaryScore]) -> "Move":
    """
    Candidate leaving the most legal moves behind; first seen wins ties.

    Args:
        game: Current game (not mutated)
        candidates: Non-empty, in ranked order

    Returns:
        The winning move
    """
    if not candidates:
        raise ValueError("No candidates provided")

    best = candidates[0].move
    max_options = -1
    for candidate in candidates:
        options = openness_after(game, candidate.move)
        if options > max_options:
            best, max_options = candidate.move, options
    return best
