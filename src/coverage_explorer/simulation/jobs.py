"""
Job data structures for parallel simulation.

Defines the input (GameJob) and output (JobResult) types used
by worker processes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from coverage_explorer.core.types import Move
    from coverage_explorer.games.game_base import CoverageGame


@dataclass(frozen=True)
class GameJob:
    """
    Self-contained job for a worker process.

    Contains everything needed to play one game to the end
    without requiring shared state. Each job carries its own seed,
    so every game draws from an independent random stream.
    """
    game: "CoverageGame"
    player_name: str
    seed: int
    max_turns: Optional[int] = None


@dataclass
class JobResult:
    """Result from one completed game."""
    game_id: str
    player_name: str
    seed: int
    coverage: int
    board_cells: int
    moves: List["Move"] = field(default_factory=list)

    @property
    def turns(self) -> int:
        return len(self.moves)

    @property
    def coverage_ratio(self) -> float:
        return self.coverage / self.board_cells if self.board_cells else 0.0
