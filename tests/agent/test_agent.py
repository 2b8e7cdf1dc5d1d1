"""
Tests for coverage_explorer.agent

Tests the Player interface and baseline strategies.
"""

import random

import pytest

from coverage_explorer.agent import GreedyPlayer, Player, RandomPlayer, make_rng
from coverage_explorer.core.types import Move
from coverage_explorer.games.grid_walk import KingWalk


class TestPlayerInterface:
    """Player ABC tests."""

    def test_abstract(self):
        """Player cannot be instantiated without decide()."""
        with pytest.raises(TypeError):
            Player()

    def test_minimal_subclass(self, king_walk: KingWalk):
        class FirstMove(Player):
            def decide(self, game, rng=None):
                moves = game.valid_moves()
                return moves[0] if moves else None

        assert FirstMove().decide(king_walk) == Move(0, 1)


class TestMakeRng:
    """make_rng tests."""

    def test_passthrough(self):
        rng = random.Random(1)
        assert make_rng(5, rng) is rng

    def test_seeded(self):
        assert make_rng(7).random() == random.Random(7).random()


class TestRandomPlayer:
    """RandomPlayer tests."""

    def test_legal(self, king_walk: KingWalk):
        assert RandomPlayer(seed=1).decide(king_walk) in king_walk.valid_moves()

    def test_none_when_stuck(self, stuck_game):
        assert RandomPlayer(seed=1).decide(stuck_game) is None

    def test_seeded_reproducible(self, king_walk: KingWalk):
        a = [RandomPlayer(seed=3).decide(king_walk) for _ in range(5)]
        b = [RandomPlayer(seed=3).decide(king_walk) for _ in range(5)]
        assert a == b

    def test_per_call_rng(self, king_walk: KingWalk):
        player = RandomPlayer(seed=0)
        assert player.decide(king_walk, random.Random(9)) == player.decide(king_walk, random.Random(9))

    def test_does_not_mutate(self, king_walk: KingWalk):
        RandomPlayer(seed=1).decide(king_walk)
        assert king_walk.score() == 1


class TestGreedyPlayer:
    """GreedyPlayer tests."""

    def test_picks_most_open(self, tie_game):
        """Chooses the move leaving the most legal moves."""
        assert GreedyPlayer().decide(tie_game) == Move(1, 1)

    def test_none_when_stuck(self, stuck_game):
        assert GreedyPlayer().decide(stuck_game) is None

    def test_skips_failing(self, scripted, make_dead_end):
        up, down = Move(-1, 0), Move(1, 0)
        game = scripted(
            moves=[up, down],
            children={up: make_dead_end(9), down: make_dead_end(1)},
            reject=[up],
        )
        assert GreedyPlayer().decide(game) == down

    def test_names(self):
        assert GreedyPlayer.name == "greedy"
        assert RandomPlayer.name == "random"
