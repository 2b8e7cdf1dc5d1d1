"""
Shared test fixtures for coverage_explorer tests.

Design principles:
- Real boards where the rules matter, a scripted board where exact
  openness / scores / failures must be controlled
- Clean imports at module level
- Minimal, focused fixtures
"""

import copy
import random
from typing import Dict, Iterable, Optional, Sequence, Tuple

import numpy as np
import pytest

from coverage_explorer.core.config import EngineConfig
from coverage_explorer.core.types import Move
from coverage_explorer.games.game_base import CoverageGame
from coverage_explorer.games.game_state import GameState
from coverage_explorer.games.grid_walk import KingWalk
from coverage_explorer.games.knight_tour import KnightTour


# =============================================================================
# Scripted board
# =============================================================================

class ScriptedGame(CoverageGame):
    """
    Board whose every transition is spelled out.

    Applying a move replaces this node's contents with a copy of the child
    node for that move. Moves without a child, or listed in reject, fail to
    apply.
    """

    def __init__(
        self,
        moves: Sequence[Move] = (),
        children: Optional[Dict[Move, "ScriptedGame"]] = None,
        covered: int = 1,
        size: int = 10,
        pos: Tuple[int, int] = (5, 5),
        reject: Iterable[Move] = (),
    ):
        self.moves = list(moves)
        self.children = dict(children or {})
        self.covered = covered
        self._size = size
        self.pos = pos
        self.reject = set(reject)
        self.applied = 0

    def game_id(self) -> str:
        return "scripted"

    def deep_clone(self) -> "ScriptedGame":
        return copy.deepcopy(self)

    def get_state(self) -> GameState:
        return GameState(np.zeros((self._size, self._size), dtype=np.int8), *self.pos)

    def set_state(self, game_state: GameState) -> None:
        self.pos = (game_state.row, game_state.col)

    def valid_moves(self):
        return list(self.moves)

    def apply_move(self, move: Move) -> bool:
        if move in self.reject or move not in self.children:
            return False
        applied = self.applied + 1
        self.__dict__.update(copy.deepcopy(self.children[move].__dict__))
        self.applied = applied
        return True

    def is_over(self) -> bool:
        return not self.moves

    def score(self) -> int:
        return self.covered

    def position(self) -> Tuple[int, int]:
        return self.pos

    def size(self) -> int:
        return self._size

    def state_string(self) -> str:
        return f"scripted at {self.pos}, covered {self.covered}"


def dead_end(openness: int, covered: int = 2, **kwargs) -> ScriptedGame:
    """Node listing `openness` moves, none of which can be applied."""
    moves = [Move(100, i) for i in range(openness)]
    return ScriptedGame(moves=moves, covered=covered, **kwargs)


# Three moves from (5, 5): up, right, down-right
UP, RIGHT, DOWN_RIGHT = Move(-1, 0), Move(0, 1), Move(1, 1)


# =============================================================================
# Config Fixtures
# =============================================================================

@pytest.fixture
def fast_config() -> EngineConfig:
    """Small playout budget so engine tests stay quick."""
    return EngineConfig(playouts=3, max_steps=30)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


# =============================================================================
# Game Fixtures
# =============================================================================

@pytest.fixture
def king_walk() -> KingWalk:
    """Fresh 8x8 KingWalk from the corner."""
    return KingWalk(size=8)


@pytest.fixture
def small_walk() -> KingWalk:
    """Fresh 4x4 KingWalk from the corner."""
    return KingWalk(size=4)


@pytest.fixture
def knight_tour() -> KnightTour:
    """Fresh 5x5 KnightTour from the corner."""
    return KnightTour(size=5)


@pytest.fixture
def tie_game() -> ScriptedGame:
    """
    Three applicable moves whose follow-ups leave 2, 5 and 9 legal moves.
    """
    return ScriptedGame(
        moves=[UP, RIGHT, DOWN_RIGHT],
        children={
            UP: dead_end(2),
            RIGHT: dead_end(5),
            DOWN_RIGHT: dead_end(9),
        },
    )


@pytest.fixture
def stuck_game() -> ScriptedGame:
    """No legal moves at all."""
    return ScriptedGame(moves=[])


@pytest.fixture
def scripted():
    """The ScriptedGame class, for tests that build their own tree."""
    return ScriptedGame


@pytest.fixture
def make_dead_end():
    """The dead_end node builder."""
    return dead_end
