"""
Tests for coverage_explorer.simulation.worker

Tests full-game play and the worker entry point.
"""

import logging
from unittest.mock import MagicMock

import pytest

import coverage_explorer.simulation.worker as worker
from coverage_explorer.agent import GreedyPlayer, RandomPlayer
from coverage_explorer.core.config import EngineConfig
from coverage_explorer.core.types import Move
from coverage_explorer.games.grid_walk import KingWalk
from coverage_explorer.simulation.jobs import GameJob
from coverage_explorer.simulation.worker import play_game, run_game, worker_init


@pytest.fixture(autouse=True)
def reset_worker():
    """Each test starts with an uninitialized worker."""
    worker._worker_config = None
    yield
    worker._worker_config = None


class TestPlayGame:
    """play_game function tests."""

    def test_plays_to_end(self, small_walk: KingWalk):
        moves = play_game(small_walk, GreedyPlayer())
        assert small_walk.is_over()
        assert len(moves) == small_walk.score() - 1

    def test_max_turns(self, king_walk: KingWalk):
        moves = play_game(king_walk, RandomPlayer(seed=1), max_turns=3)
        assert len(moves) == 3
        assert king_walk.score() == 4

    def test_stuck_game(self, stuck_game):
        assert play_game(stuck_game, GreedyPlayer()) == []

    def test_player_returns_none(self, king_walk: KingWalk):
        player = MagicMock()
        player.decide.return_value = None
        assert play_game(king_walk, player) == []

    def test_rejected_move_stops(self, king_walk: KingWalk, caplog):
        """A move the board rejects ends the game with a warning."""
        player = MagicMock()
        player.name = "bad"
        player.decide.return_value = Move(-1, -1)
        with caplog.at_level(logging.WARNING, logger="coverage_explorer.simulation.worker"):
            assert play_game(king_walk, player) == []
        assert "rejected" in caplog.text


class TestRunGame:
    """run_game function tests."""

    def test_requires_init(self):
        job = GameJob(game=KingWalk(size=4), player_name="greedy", seed=0)
        with pytest.raises(RuntimeError, match="not initialized"):
            run_game(job)

    def test_result(self):
        worker_init(EngineConfig(playouts=2, max_steps=10))
        job = GameJob(game=KingWalk(size=4), player_name="greedy", seed=0)
        result = run_game(job)

        assert result.game_id == "king_walk"
        assert result.player_name == "greedy"
        assert result.board_cells == 16
        assert result.coverage == result.turns + 1

    def test_seeded_monte_carlo_reproducible(self):
        worker_init(EngineConfig(playouts=2, max_steps=10))
        a = run_game(GameJob(game=KingWalk(size=4), player_name="monte_carlo", seed=5))
        b = run_game(GameJob(game=KingWalk(size=4), player_name="monte_carlo", seed=5))
        assert a.moves == b.moves
