"""
Worker process logic for parallel simulation.

Each worker holds the engine configuration it was started with. Workers
receive GameJob objects and return JobResult objects.
"""

from __future__ import annotations

import logging
from typing import List, Optional, TYPE_CHECKING

from coverage_explorer.core.config import EngineConfig
from coverage_explorer.simulation.jobs import GameJob, JobResult

if TYPE_CHECKING:
    from coverage_explorer.agent.agent import Player
    from coverage_explorer.core.types import Move
    from coverage_explorer.games.game_base import CoverageGame

logger = logging.getLogger(__name__)

# Global worker state (initialized per process)
_worker_config: Optional[EngineConfig] = None


def worker_init(config: EngineConfig, log_level: int = logging.WARNING) -> None:
    """Store the engine configuration for this worker process."""
    global _worker_config
    _worker_config = config
    logging.basicConfig(level=log_level)


def play_game(
    game: "CoverageGame",
    player: "Player",
    max_turns: Optional[int] = None,
) -> List["Move"]:
    """
    Let player move on game until it has no move left.

    Mutates game. Stops early after max_turns moves, or if the board
    rejects a move the player chose.

    Returns:
        The moves that were applied, in order
    """
    played: List["Move"] = []
    while not game.is_over():
        if max_turns is not None and len(played) >= max_turns:
            break

        move = player.decide(game)
        if move is None:
            break
        if not game.apply_move(move):
            logger.warning("Board rejected %s chosen by %s; stopping", move, player.name)
            break
        played.append(move)

    return played


def run_game(job: GameJob) -> JobResult:
    """Execute a single game."""
    if _worker_config is None:
        raise RuntimeError("Worker not initialized")

    from coverage_explorer.utils.factory import create_player

    game = job.game
    player = create_player(job.player_name, config=_worker_config, seed=job.seed)
    moves = play_game(game, player, job.max_turns)

    return JobResult(
        game_id=game.game_id(),
        player_name=job.player_name,
        seed=job.seed,
        coverage=game.score(),
        board_cells=game.size() ** 2,
        moves=moves,
    )
