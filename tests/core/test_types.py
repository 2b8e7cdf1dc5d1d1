"""
Tests for coverage_explorer.core.types

Tests Move and the paired-value records.
"""

import pytest

from coverage_explorer.core.types import (
    CandidateScore,
    Move,
    SecondaryScore,
    WeightedOption,
    MONTE_CARLO_PLAYOUTS,
    MONTE_CARLO_MAX_STEPS,
    EXPLORE_WEIGHT,
    FUTURE_MOVES_WEIGHT,
    TIE_THRESHOLD,
    TIE_CANDIDATES,
)


class TestMove:
    """Move value-type tests."""

    def test_value_equality(self):
        """Moves compare by value, not identity."""
        assert Move(1, -1) == Move(1, -1)
        assert Move(1, -1) is not Move(1, -1)
        assert Move(1, 0) != Move(0, 1)

    def test_hashable(self):
        """Equal moves hash equal, so they work as dict keys."""
        table = {Move(1, 2): "a"}
        assert table[Move(1, 2)] == "a"

    def test_immutable(self):
        """Fields cannot be reassigned."""
        move = Move(1, 1)
        with pytest.raises(AttributeError):
            move.d_row = 3

    def test_target(self):
        """target() adds the delta to a position."""
        assert Move(-1, 2).target(3, 3) == (2, 5)

    def test_str(self):
        """String form shows signed deltas."""
        assert str(Move(-1, 2)) == "(-1,+2)"


class TestRecords:
    """Paired-value record tests."""

    def test_candidate_unpacks(self):
        move, score = CandidateScore(Move(0, 1), 3.5)
        assert move == Move(0, 1)
        assert score == 3.5

    def test_secondary_fields(self):
        s = SecondaryScore(Move(1, 0), 9.7)
        assert s.move == Move(1, 0)
        assert s.score == 9.7

    def test_weighted_option_fields(self):
        w = WeightedOption(Move(1, 1), 2.0)
        assert w.weight == 2.0


class TestDefaults:
    """Default constants."""

    def test_values(self):
        assert MONTE_CARLO_PLAYOUTS == 20
        assert MONTE_CARLO_MAX_STEPS == 250
        assert EXPLORE_WEIGHT == 1.2
        assert FUTURE_MOVES_WEIGHT == 0.8
        assert TIE_THRESHOLD == 0.5
        assert TIE_CANDIDATES == 3
