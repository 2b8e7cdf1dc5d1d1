"""
Factory functions for creating games and players.
"""

from typing import Optional, Tuple

from coverage_explorer.agent.agent import Player
from coverage_explorer.core.config import EngineConfig, DEFAULT_ENGINE_CONFIG
from coverage_explorer.games.game_base import CoverageGame
from coverage_explorer.games.grid_walk import DEFAULT_SIZE
from coverage_explorer.utils.config import GAMES, PLAYERS


def create_game(
    game_name: str,
    size: int = DEFAULT_SIZE,
    start: Tuple[int, int] = (0, 0),
) -> CoverageGame:
    """
    Create a game on a fresh board.

    Args:
        game_name: Key from GAMES registry (e.g., "king_walk")
        size: Board side length
        start: Starting (row, col), visited from the outset

    Returns:
        Configured game instance
    """
    if game_name not in GAMES:
        available = ", ".join(GAMES.keys())
        raise ValueError(f"Unknown game: {game_name}. Available: {available}")

    return GAMES[game_name](size=size, start=start)


def create_player(
    player_name: str,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
    seed: Optional[int] = None,
    debug: bool = False,
) -> Player:
    """
    Create a strategy by name.

    Args:
        player_name: Key from PLAYERS registry (e.g., "monte_carlo")
        config: Engine parameters (Monte Carlo player only)
        seed: Seed for the player's random stream
        debug: Log the candidate table on every decision (Monte Carlo only)

    Returns:
        Player instance
    """
    if player_name not in PLAYERS:
        available = ", ".join(PLAYERS.keys())
        raise ValueError(f"Unknown player: {player_name}. Available: {available}")

    player_class = PLAYERS[player_name]
    if player_name == "monte_carlo":
        return player_class(config, seed=seed, debug=debug)
    if player_name == "random":
        return player_class(seed=seed)
    return player_class()
