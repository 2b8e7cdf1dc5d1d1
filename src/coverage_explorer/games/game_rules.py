"""
Grid geometry helpers shared by the boards and the heuristics.
"""

from __future__ import annotations

import math
from typing import Tuple

import numpy as np


def in_bounds(board: np.ndarray, r: int, c: int) -> bool:
    """Return True if (r, c) is inside the board."""
    rows, cols = board.shape
    return 0 <= r < rows and 0 <= c < cols


def edge_distance(index: int, size: int) -> int:
    """Distance from a row (or column) index to the nearer end of its axis."""
    return min(index, size - 1 - index)


def center(size: int) -> Tuple[int, int]:
    """Center cell, using integer division for both coordinates."""
    return size // 2, size // 2


def distance_to_center(row: int, col: int, size: int) -> float:
    """Euclidean distance from (row, col) to center(size)."""
    cr, cc = center(size)
    return math.sqrt((row - cr) ** 2 + (col - cc) ** 2)


def board_full(board: np.ndarray) -> bool:
    """Return True if every cell has been visited."""
    return bool(np.all(board != 0))
