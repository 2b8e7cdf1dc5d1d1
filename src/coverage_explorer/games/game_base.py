"""
CoverageGame - abstract base class for single-player coverage boards.
"""

from abc import ABC, abstractmethod
from typing import List, Tuple

from coverage_explorer.core.types import Move
from coverage_explorer.games.game_state import GameState


class CoverageGame(ABC):
    """
    Abstract base class for grid-coverage games.

    IMPORTANT ARCHITECTURE NOTE:
    -----------------------------
    - The rules live here, never in the engine.
    - The engine only ever calls these methods, mostly on deep clones.
    - apply_move() reports failure through its return value; it does not raise
      for an illegal move. After a failed apply the game contents are
      unspecified and callers must discard that clone.
    """

    @abstractmethod
    def game_id(self) -> str:
        """Return a stable identifier (e.g. 'king_walk')."""
        pass

    @abstractmethod
    def deep_clone(self) -> "CoverageGame":
        """
        Deep copy of game + state.
        Used heavily for evaluation and playouts.
        """
        pass

    @abstractmethod
    def get_state(self) -> GameState:
        """Return the current game state."""
        pass

    @abstractmethod
    def set_state(self, game_state: GameState) -> None:
        """Replace the current game state."""
        pass

    @abstractmethod
    def valid_moves(self) -> List[Move]:
        """
        Return all legal moves from the current state, in a stable order.
        Example (KingWalk): [Move(-1, -1), Move(-1, 0), ...]
        """
        pass

    @abstractmethod
    def apply_move(self, move: Move) -> bool:
        """Apply a move in place. Returns False if the move could not be applied."""
        pass

    @abstractmethod
    def is_over(self) -> bool:
        """Return True if no further play is possible."""
        pass

    @abstractmethod
    def score(self) -> int:
        """Number of distinct cells visited so far."""
        pass

    @abstractmethod
    def position(self) -> Tuple[int, int]:
        """Player's current (row, col)."""
        pass

    @abstractmethod
    def size(self) -> int:
        """Board side length."""
        pass

    @abstractmethod
    def state_string(self) -> str:
        """Pretty string representation of the state."""
        pass
