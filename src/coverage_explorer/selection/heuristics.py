"""
Positional heuristics: the phase-aware secondary score and the edge bonus.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from coverage_explorer.core.types import EDGE_BONUS
from coverage_explorer.games.game_rules import distance_to_center, edge_distance

if TYPE_CHECKING:
    from coverage_explorer.core.types import Move
    from coverage_explorer.games.game_base import CoverageGame


def is_early_game(game: "CoverageGame") -> bool:
    """Less than a quarter of the board covered (integer quarter)."""
    size = game.size()
    return game.score() < (size * size) // 4


def positional_score(game: "CoverageGame", move: "Move") -> float:
    """
    Phase-aware secondary score.

    Early on, staying near the center scores high (size - distance); later,
    being far from it does (distance). Distance is measured from the current
    position, before move is played.
    """
    row, col = game.position()
    size = game.size()
    distance = distance_to_center(row, col, size)
    return size - distance if is_early_game(game) else distance


def moves_toward_edge(game: "CoverageGame", move: "Move") -> bool:
    """True if move strictly shrinks the row or column distance to an edge."""
    row, col = game.position()
    size = game.size()
    new_row, new_col = move.target(row, col)

    closer_row = edge_distance(new_row, size) < edge_distance(row, size)
    closer_col = edge_distance(new_col, size) < edge_distance(col, size)
    return closer_row or closer_col


def edge_bonus(game: "CoverageGame", move: "Move", bonus: float = EDGE_BONUS) -> float:
    return bonus if moves_toward_edge(game, move) else 0.0
