"""
Knight's tour board.

Same coverage rules as KingWalk, but the player jumps like a chess knight, so
dead ends appear much earlier and move ordering matters far more.
"""

from __future__ import annotations

from coverage_explorer.core.types import Move
from coverage_explorer.games.grid_walk import GridWalk

KNIGHT_DIRS = (
    Move(-2, -1), Move(-2, 1),
    Move(-1, -2), Move(-1, 2),
    Move(1, -2),  Move(1, 2),
    Move(2, -1),  Move(2, 1),
)


class KnightTour(GridWalk):
    """Knight jumps on a square board."""

    __slots__ = ()

    DIRECTIONS = KNIGHT_DIRS

    def game_id(self) -> str:
        return "knight_tour"
