"""
Tests for coverage_explorer.core.config
"""

import dataclasses

import pytest

from coverage_explorer.core.config import EngineConfig, DEFAULT_ENGINE_CONFIG


class TestEngineConfig:
    """EngineConfig tests."""

    def test_defaults(self):
        cfg = EngineConfig()
        assert cfg.playouts == 20
        assert cfg.max_steps == 250
        assert cfg.explore_weight == 1.2
        assert cfg.future_moves_weight == 0.8
        assert cfg.edge_bonus == 1.0
        assert cfg.tie_threshold == 0.5
        assert cfg.tie_candidates == 3

    def test_default_instance(self):
        assert DEFAULT_ENGINE_CONFIG == EngineConfig()

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_ENGINE_CONFIG.playouts = 1

    @pytest.mark.parametrize("kwargs", [
        {"playouts": 0},
        {"max_steps": -1},
        {"tie_candidates": 0},
        {"tie_threshold": -0.1},
    ])
    def test_invalid_raises(self, kwargs):
        with pytest.raises(ValueError):
            EngineConfig(**kwargs)

    def test_zero_steps_allowed(self):
        """max_steps=0 means playouts only measure the post-move state."""
        assert EngineConfig(max_steps=0).max_steps == 0
