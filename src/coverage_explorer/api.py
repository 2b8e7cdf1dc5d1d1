"""
Public API for playing and benchmarking coverage games.

Usage:
    from coverage_explorer import KingWalk, MonteCarloPlayer, play

    game = KingWalk(size=8)
    player = MonteCarloPlayer(seed=7)
    moves = play(game, player, verbose=True)
"""

from __future__ import annotations

import logging
from typing import List, Optional, TYPE_CHECKING

from coverage_explorer.core.config import EngineConfig, DEFAULT_ENGINE_CONFIG
from coverage_explorer.selection import select_move, MonteCarloPlayer
from coverage_explorer.simulation import (
    SimulationRunner,
    BatchSummary,
    DEFAULT_WORKER_COUNT,
    play_game,
    summarize,
)

if TYPE_CHECKING:
    from coverage_explorer.agent.agent import Player
    from coverage_explorer.core.types import Move
    from coverage_explorer.games.game_base import CoverageGame


def play(
    game: "CoverageGame",
    player: "Player",
    max_turns: Optional[int] = None,
    verbose: bool = False,
) -> List["Move"]:
    """
    Play game to the end with player, printing each turn when verbose.

    Mutates game. Returns the moves that were played.
    """
    if not verbose:
        return play_game(game, player, max_turns)

    print(f"Starting {game.game_id()} ({game.size()}x{game.size()}) with {player.name}")
    print(game.state_string())

    played: List["Move"] = []
    try:
        while not game.is_over():
            if max_turns is not None and len(played) >= max_turns:
                break
            moves = play_game(game, player, max_turns=1)
            if not moves:
                break
            played.extend(moves)
            print(f"\nTurn {len(played)}: {player.name} played {moves[0]}")
            print(game.state_string())
    except KeyboardInterrupt:
        print("\nInterrupted")
        raise

    print("\n" + "=" * 40)
    print("GAME OVER")
    print("=" * 40)
    print(f"Final: {game.score()} of {game.size() ** 2} cells in {len(played)} moves")
    return played


def benchmark(
    game: "CoverageGame",
    player_name: str,
    num_games: int,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
    num_workers: int = DEFAULT_WORKER_COUNT,
    seed: int = 0,
) -> BatchSummary:
    """Play num_games seeded copies of game in parallel and summarize coverage."""
    with SimulationRunner(config, num_workers, log_level=logging.getLogger().level) as runner:
        results = runner.run_batch(game, player_name, num_games, seed=seed)
    return summarize(results)


__all__ = [
    "play",
    "benchmark",
    "select_move",
    "MonteCarloPlayer",
    "SimulationRunner",
    "DEFAULT_WORKER_COUNT",
]
