"""
Grid walk boards - optimized.

The player sits on one cell of a square board and moves by a fixed set of
offsets. A move is legal when it lands inside the board on a cell that has not
been visited yet. The game ends when no legal move remains; the score is the
number of visited cells (the start cell included).

Uses int8 board:
    0 = unvisited
    1 = visited
"""

from __future__ import annotations

from typing import List, Tuple

from coverage_explorer.core.types import Move
from coverage_explorer.games.game_base import CoverageGame
from coverage_explorer.games.game_rules import in_bounds
from coverage_explorer.games.game_state import GameState

# Cell strings: each cell value maps to its display string
CELL_STRINGS = {0: " ", 1: "·"}
PLAYER_STRING = "@"

# Direction vectors (dr, dc), row-major order
KING_DIRS = (
    Move(-1, -1), Move(-1, 0), Move(-1, 1),
    Move(0, -1),               Move(0, 1),
    Move(1, -1),  Move(1, 0),  Move(1, 1),
)

DEFAULT_SIZE = 8


class GridWalk(CoverageGame):
    """Coverage walk over a square board with a configurable move set."""

    __slots__ = ('state',)

    DIRECTIONS: Tuple[Move, ...] = KING_DIRS

    def __init__(self, size: int = DEFAULT_SIZE, start: Tuple[int, int] = (0, 0)):
        self.state = GameState.fresh(size, *start)

    def game_id(self) -> str:
        return "grid_walk"

    def deep_clone(self) -> "GridWalk":
        g = self.__class__.__new__(self.__class__)
        g.state = self.state.copy()
        return g

    def get_state(self) -> GameState:
        return self.state

    def set_state(self, game_state: GameState) -> None:
        self.state = game_state

    def _open(self, r: int, c: int) -> bool:
        board = self.state.visited
        return in_bounds(board, r, c) and board[r, c] == 0

    def valid_moves(self) -> List[Move]:
        r, c = self.state.row, self.state.col
        return [m for m in self.DIRECTIONS if self._open(r + m.d_row, c + m.d_col)]

    def apply_move(self, move: Move) -> bool:
        r = self.state.row + int(move[0])
        c = self.state.col + int(move[1])

        if not self._open(r, c):
            return False

        self.state.visited[r, c] = 1
        self.state.row, self.state.col = r, c
        return True

    def is_over(self) -> bool:
        return not self.valid_moves()

    def score(self) -> int:
        return self.state.covered

    def position(self) -> Tuple[int, int]:
        return self.state.row, self.state.col

    def size(self) -> int:
        return self.state.size

    def state_string(self) -> str:
        board = self.state.visited
        n = self.state.size

        def cell(i: int, j: int) -> str:
            if (i, j) == (self.state.row, self.state.col):
                return PLAYER_STRING
            return CELL_STRINGS[int(board[i, j])]

        lines = ["╭" + "┬".join("───" for _ in range(n)) + "╮"]
        for i in range(n):
            lines.append("│ " + " │ ".join(cell(i, j) for j in range(n)) + " │")
            if i < n - 1:
                lines.append("├" + "┼".join("───" for _ in range(n)) + "┤")
        lines.append("╰" + "┴".join("───" for _ in range(n)) + "╯")
        lines.append(f"Covered: {self.score()}/{n * n}")
        return "\n".join(lines)


class KingWalk(GridWalk):
    """One step in any of the 8 directions."""

    __slots__ = ()

    DIRECTIONS = KING_DIRS

    def game_id(self) -> str:
        return "king_walk"
