"""
Command-line interface for playing and benchmarking coverage games.
"""

import argparse
import logging

from coverage_explorer.api import play, benchmark
from coverage_explorer.utils.config import Config, GAMES, PLAYERS
from coverage_explorer.utils.factory import create_game, create_player


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play grid-coverage games with Monte Carlo move selection"
    )
    parser.add_argument(
        "--game", "-g",
        choices=list(GAMES.keys()),
        default="king_walk",
        help="Board to play (default: king_walk)",
    )
    parser.add_argument(
        "--player", "-p",
        choices=list(PLAYERS.keys()),
        default="monte_carlo",
        help="Strategy (default: monte_carlo)",
    )
    parser.add_argument(
        "--size", "-s",
        type=int,
        default=8,
        help="Board side length (default: 8)",
    )
    parser.add_argument(
        "--start",
        type=str,
        default="0,0",
        help="Start cell as 'row,col' (default: 0,0)",
    )
    parser.add_argument(
        "--games", "-n",
        type=int,
        default=1,
        help="Number of games; more than 1 runs a parallel benchmark (default: 1)",
    )
    parser.add_argument(
        "--workers", "-w",
        type=int,
        default=None,
        help="Number of worker processes (default: CPU count - 1)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (default: unseeded)",
    )
    parser.add_argument(
        "--playouts",
        type=int,
        default=None,
        help="Playouts per candidate move (default: 20)",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="Step cap per playout (default: 250)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show the candidate table for every decision",
    )
    return parser.parse_args(argv)


def parse_start(start_str: str, size: int) -> tuple[int, int]:
    """Parse and validate the --start argument."""
    try:
        row, col = (int(p.strip()) for p in start_str.split(","))
    except ValueError as e:
        raise ValueError(
            f"Invalid --start format: '{start_str}'. Expected 'row,col' (e.g., '3,4')."
        ) from e

    if not (0 <= row < size and 0 <= col < size):
        raise ValueError(f"Start ({row},{col}) is outside a {size}x{size} board.")
    return row, col


def main(argv=None) -> None:
    args = parse_args(argv)

    level = logging.INFO if args.debug and args.log_level == "WARNING" else args.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        start = parse_start(args.start, args.size)
        config_kwargs = {
            "game_name": args.game,
            "player_name": args.player,
            "size": args.size,
            "start": start,
            "games": args.games,
            "seed": args.seed,
            "playouts": args.playouts,
            "max_steps": args.max_steps,
        }
        if args.workers:
            config_kwargs["num_workers"] = args.workers
        config = Config(**config_kwargs)
        game = create_game(config.game_name, config.size, config.start)
    except ValueError as e:
        raise SystemExit(f"error: {e}")

    if config.games == 1:
        player = create_player(config.player_name, config.engine, seed=config.seed, debug=args.debug)
        play(game, player, verbose=True)
        return

    summary = benchmark(
        game,
        config.player_name,
        config.games,
        config=config.engine,
        num_workers=config.num_workers,
        seed=config.seed or 0,
    )
    print(
        f"{config.player_name} on {game.game_id()} {config.size}x{config.size}: "
        f"{summary.games} games, coverage {summary.mean_coverage:.1f} ± {summary.std_coverage:.1f} "
        f"(min {summary.min_coverage}, max {summary.max_coverage}, "
        f"{summary.mean_ratio:.1%} of {config.board_cells} cells)"
    )


if __name__ == "__main__":
    main()
