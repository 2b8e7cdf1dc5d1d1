"""
Configuration and game / player registries.
"""

from typing import Optional, Tuple

from coverage_explorer.agent import GreedyPlayer, RandomPlayer
from coverage_explorer.core.config import EngineConfig
from coverage_explorer.games import KingWalk, KnightTour
from coverage_explorer.games.grid_walk import DEFAULT_SIZE
from coverage_explorer.selection.engine import MonteCarloPlayer
from coverage_explorer.simulation import DEFAULT_WORKER_COUNT


# ---------------------------------------------------------------------------
# Registries
# ---------------------------------------------------------------------------

GAMES = {
    "king_walk": KingWalk,
    "knight_tour": KnightTour,
}

PLAYERS = {
    "monte_carlo": MonteCarloPlayer,
    "greedy": GreedyPlayer,
    "random": RandomPlayer,
}


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

class Config:
    """Run configuration with sensible defaults."""

    def __init__(
        self,
        game_name: str = "king_walk",
        player_name: str = "monte_carlo",
        size: int = DEFAULT_SIZE,
        start: Tuple[int, int] = (0, 0),
        games: int = 1,
        num_workers: int = DEFAULT_WORKER_COUNT,
        seed: Optional[int] = None,
        playouts: Optional[int] = None,
        max_steps: Optional[int] = None,
    ):
        if player_name not in PLAYERS:
            raise KeyError(player_name)

        self.game_name = game_name
        self.player_name = player_name
        self.size = size
        self.start = start
        self.games = games
        self.seed = seed

        # Derive dependent values
        self.game_class = GAMES[game_name]
        self.num_workers = max(1, min(num_workers, games))

        overrides = {}
        if playouts is not None:
            overrides["playouts"] = playouts
        if max_steps is not None:
            overrides["max_steps"] = max_steps
        self.engine = EngineConfig(**overrides)

    @property
    def board_cells(self) -> int:
        return self.size * self.size


# Default configuration
DEFAULT_CONFIG = Config()
