"""
Games module - coverage board implementations.
"""

from coverage_explorer.games.game_state import GameState
from coverage_explorer.games.game_base import CoverageGame
from coverage_explorer.games.game_rules import (
    in_bounds,
    board_full,
    edge_distance,
    center,
    distance_to_center,
)
from coverage_explorer.games.grid_walk import GridWalk, KingWalk, KING_DIRS
from coverage_explorer.games.knight_tour import KnightTour, KNIGHT_DIRS

__all__ = [
    "GameState",
    "CoverageGame",
    "GridWalk",
    "KingWalk",
    "KnightTour",
    "KING_DIRS",
    "KNIGHT_DIRS",
    "in_bounds",
    "board_full",
    "edge_distance",
    "center",
    "distance_to_center",
]
