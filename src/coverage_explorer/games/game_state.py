"""
GameState - coverage board container.

Optimized for fast copying.
"""

from __future__ import annotations

import numpy as np


class GameState:
    """
    Lightweight coverage state.

    Uses an int8 grid for fast copy:
        0 = unvisited
        1 = visited
    plus the player's (row, col).
    """
    __slots__ = ('visited', 'row', 'col')

    def __init__(self, visited: np.ndarray, row: int, col: int):
        self.visited = visited
        self.row = row
        self.col = col

    @classmethod
    def fresh(cls, size: int, row: int = 0, col: int = 0) -> "GameState":
        """Empty size x size board with only the start cell visited."""
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")
        if not (0 <= row < size and 0 <= col < size):
            raise ValueError(f"Start ({row},{col}) is outside a {size}x{size} board")
        visited = np.zeros((size, size), dtype=np.int8)
        visited[row, col] = 1
        return cls(visited, row, col)

    @property
    def size(self) -> int:
        return int(self.visited.shape[0])

    @property
    def covered(self) -> int:
        return int(np.count_nonzero(self.visited))

    def copy(self) -> "GameState":
        """Fast copy - visited.copy() is optimized for contiguous int arrays."""
        return GameState(self.visited.copy(), self.row, self.col)
