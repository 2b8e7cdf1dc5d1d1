"""
Coverage Explorer - Monte Carlo move selection for grid-coverage games.

The player walks a square board and tries to visit as many cells as
possible before it runs out of legal moves. Each turn the engine scores
every legal move with weighted random playouts, adds openness and edge
heuristics, and breaks near-ties on how many moves a candidate leaves open.

Quick Start:
    from coverage_explorer import KingWalk, MonteCarloPlayer, play

    game = KingWalk(size=8)
    play(game, MonteCarloPlayer(seed=7), verbose=True)

Modules:
    core       - Move and score records, constants, EngineConfig, weighted sampling
    games      - CoverageGame interface and reference boards
    agent      - Player interface and baseline strategies
    selection  - Playouts, heuristics, evaluation, tie-break, decision engine
    simulation - Full games and parallel benchmarking
    debug      - Candidate table rendering
"""

from coverage_explorer.api import (
    play,
    benchmark,
    select_move,
    MonteCarloPlayer,
    SimulationRunner,
    DEFAULT_WORKER_COUNT,
)

from coverage_explorer.agent import Player, RandomPlayer, GreedyPlayer
from coverage_explorer.core import Move, EngineConfig
from coverage_explorer.games import CoverageGame, KingWalk, KnightTour

__version__ = "1.0.0"

__all__ = [
    # Main API
    "play",
    "benchmark",
    "select_move",
    "SimulationRunner",
    "DEFAULT_WORKER_COUNT",
    # Players
    "Player",
    "MonteCarloPlayer",
    "RandomPlayer",
    "GreedyPlayer",
    # Games
    "CoverageGame",
    "KingWalk",
    "KnightTour",
    # Types
    "Move",
    "EngineConfig",
]
