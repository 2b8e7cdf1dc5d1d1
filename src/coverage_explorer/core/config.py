"""
Engine tuning parameters.
"""

from __future__ import annotations

from dataclasses import dataclass

from coverage_explorer.core.types import (
    MONTE_CARLO_PLAYOUTS,
    MONTE_CARLO_MAX_STEPS,
    EXPLORE_WEIGHT,
    FUTURE_MOVES_WEIGHT,
    EDGE_BONUS,
    TIE_THRESHOLD,
    TIE_CANDIDATES,
)


@dataclass(frozen=True)
class EngineConfig:
    """Monte Carlo engine parameters. Defaults match the module constants."""

    playouts: int = MONTE_CARLO_PLAYOUTS
    max_steps: int = MONTE_CARLO_MAX_STEPS
    explore_weight: float = EXPLORE_WEIGHT
    future_moves_weight: float = FUTURE_MOVES_WEIGHT
    edge_bonus: float = EDGE_BONUS
    tie_threshold: float = TIE_THRESHOLD
    tie_candidates: int = TIE_CANDIDATES

    def __post_init__(self):
        if self.playouts < 1:
            raise ValueError(f"playouts must be >= 1, got {self.playouts}")
        if self.max_steps < 0:
            raise ValueError(f"max_steps must be >= 0, got {self.max_steps}")
        if self.tie_candidates < 1:
            raise ValueError(f"tie_candidates must be >= 1, got {self.tie_candidates}")
        if self.tie_threshold < 0:
            raise ValueError(f"tie_threshold must be >= 0, got {self.tie_threshold}")


DEFAULT_ENGINE_CONFIG = EngineConfig()
