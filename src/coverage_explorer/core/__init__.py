"""
Core module - fundamental types, constants, and weighted sampling.

This module provides the building blocks used throughout the engine.
"""

from coverage_explorer.core.types import (
    Move,
    CandidateScore,
    SecondaryScore,
    WeightedOption,
    MONTE_CARLO_PLAYOUTS,
    MONTE_CARLO_MAX_STEPS,
    EXPLORE_WEIGHT,
    FUTURE_MOVES_WEIGHT,
    EDGE_BONUS,
    TIE_THRESHOLD,
    TIE_CANDIDATES,
)
from coverage_explorer.core.sampling import sample, total_weight
from coverage_explorer.core.config import EngineConfig, DEFAULT_ENGINE_CONFIG

__all__ = [
    # Types
    "Move",
    "CandidateScore",
    "SecondaryScore",
    "WeightedOption",
    "EngineConfig",
    # Constants
    "MONTE_CARLO_PLAYOUTS",
    "MONTE_CARLO_MAX_STEPS",
    "EXPLORE_WEIGHT",
    "FUTURE_MOVES_WEIGHT",
    "EDGE_BONUS",
    "TIE_THRESHOLD",
    "TIE_CANDIDATES",
    "DEFAULT_ENGINE_CONFIG",
    # Functions
    "sample",
    "total_weight",
]
