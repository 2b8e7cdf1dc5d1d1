"""
Core types, constants, and value records.

This module contains the fundamental types used throughout the engine:
- Move: an immutable directional delta
- CandidateScore / SecondaryScore / WeightedOption: paired-value records
- Default engine tuning constants
"""

from __future__ import annotations

from typing import NamedTuple


# ╔═════════════════════════════════════════════════════════════════════════════╗
# ║                      CONFIGURABLE ENGINE CONSTANTS                          ║
# ║                                                                             ║
# ║  Defaults used by EngineConfig. Tune for strength vs. speed:                ║
# ║                                                                             ║
# ║  Fast:        PLAYOUTS=5,  MAX_STEPS=60   → weak but instant                ║
# ║  Standard:    PLAYOUTS=20, MAX_STEPS=250  → good coverage estimates         ║
# ║  Thorough:    PLAYOUTS=50, MAX_STEPS=500  → slow, low-variance              ║
# ╚═════════════════════════════════════════════════════════════════════════════╝

MONTE_CARLO_PLAYOUTS = 20    # Playouts per candidate move
MONTE_CARLO_MAX_STEPS = 250  # Step cap per playout
EXPLORE_WEIGHT = 1.2         # Exponent on (openness + 1) when weighting rollout moves
FUTURE_MOVES_WEIGHT = 0.8    # Weight on immediate openness in the primary score
EDGE_BONUS = 1.0             # Added when a move heads toward a board edge

# Top-two secondary scores closer than this trigger the tie-break
TIE_THRESHOLD = 0.5
# Number of top secondary-ranked candidates handed to the tie-break
TIE_CANDIDATES = 3


class Move(NamedTuple):
    """Row/column offset applied to the player's position."""

    d_row: int
    d_col: int

    def target(self, row: int, col: int) -> tuple[int, int]:
        """Position reached when this move is taken from (row, col)."""
        return row + self.d_row, col + self.d_col

    def __str__(self) -> str:
        return f"({self.d_row:+d},{self.d_col:+d})"


class CandidateScore(NamedTuple):
    """Primary (rollout-based) score of a move."""

    move: Move
    score: float


class SecondaryScore(NamedTuple):
    """Phase-dependent positional score of a move."""

    move: Move
    score: float


class WeightedOption(NamedTuple):
    """A move paired with its sampling weight (>= 0)."""

    move: Move
    weight: float
