"""
Parallel game runner for benchmarking strategies.

Whole games run in worker processes; the decision engine inside each game
stays single-threaded. Every job gets its own seed, derived from the batch
seed, so results are reproducible and no random stream is shared.
"""

from __future__ import annotations

import atexit
import logging
import multiprocessing as mp
import signal
import sys
import threading
from multiprocessing.pool import Pool
from typing import List, NamedTuple, Optional, Sequence, TYPE_CHECKING

import numpy as np

from coverage_explorer.core.config import EngineConfig, DEFAULT_ENGINE_CONFIG
from coverage_explorer.simulation.jobs import GameJob, JobResult
from coverage_explorer.simulation.worker import worker_init, run_game

if TYPE_CHECKING:
    from coverage_explorer.games.game_base import CoverageGame

logger = logging.getLogger(__name__)

DEFAULT_WORKER_COUNT = max(1, mp.cpu_count() - 1)

# ---------------------------------------------------------------------------
# Process cleanup
# ---------------------------------------------------------------------------

_active_runners: List["SimulationRunner"] = []


def _shutdown_all():
    for runner in _active_runners[:]:
        runner.shutdown(force=True)


def _worker_init_wrapper(config: EngineConfig, log_level: int):
    """Workers ignore SIGINT — only main process handles Ctrl+C."""
    signal.signal(signal.SIGINT, signal.SIG_IGN)
    worker_init(config, log_level)


def _on_signal(signum, frame):
    _shutdown_all()
    if signum == signal.SIGINT:
        raise KeyboardInterrupt
    sys.exit(1)


if mp.current_process().name == 'MainProcess' and threading.current_thread() is threading.main_thread():
    signal.signal(signal.SIGINT, _on_signal)
    signal.signal(signal.SIGTERM, _on_signal)
    atexit.register(_shutdown_all)


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------

class BatchSummary(NamedTuple):
    """Aggregate coverage over a batch of games."""

    games: int
    mean_coverage: float
    std_coverage: float
    min_coverage: int
    max_coverage: int
    mean_ratio: float


def summarize(results: Sequence[JobResult]) -> BatchSummary:
    """Mean / spread of coverage over results."""
    if not results:
        return BatchSummary(0, 0.0, 0.0, 0, 0, 0.0)

    coverage = np.array([r.coverage for r in results], dtype=np.float64)
    ratios = np.array([r.coverage_ratio for r in results], dtype=np.float64)
    return BatchSummary(
        games=len(results),
        mean_coverage=float(coverage.mean()),
        std_coverage=float(coverage.std()),
        min_coverage=int(coverage.min()),
        max_coverage=int(coverage.max()),
        mean_ratio=float(ratios.mean()),
    )


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------

class SimulationRunner:
    """
    Manages a process pool that plays complete games.

    Use as a context manager so the pool is always torn down:

        with SimulationRunner(config, num_workers=4) as runner:
            results = runner.run_batch(game, "monte_carlo", num_games=20, seed=7)
    """

    def __init__(
        self,
        config: EngineConfig = DEFAULT_ENGINE_CONFIG,
        num_workers: int = DEFAULT_WORKER_COUNT,
        log_level: int = logging.WARNING,
    ):
        if num_workers < 1:
            raise ValueError(f"num_workers must be >= 1, got {num_workers}")
        self.config = config
        self.num_workers = num_workers
        self.log_level = log_level
        self._pool: Optional[Pool] = None

        _active_runners.append(self)

    def __enter__(self):
        self._ensure_pool()
        return self

    def __exit__(self, exc_type, *_):
        self.shutdown(force=exc_type is not None)

    def _ensure_pool(self) -> Pool:
        if self._pool is None:
            self._pool = Pool(
                processes=self.num_workers,
                initializer=_worker_init_wrapper,
                initargs=(self.config, self.log_level),
            )
        return self._pool

    def shutdown(self, force: bool = False) -> None:
        if self in _active_runners:
            _active_runners.remove(self)

        if self._pool is None:
            return

        pool, self._pool = self._pool, None
        pool.terminate() if force else pool.close()
        pool.join()

    def run_batch(
        self,
        game: "CoverageGame",
        player_name: str,
        num_games: int,
        seed: int = 0,
        max_turns: Optional[int] = None,
    ) -> List[JobResult]:
        """
        Play num_games copies of game with the named player.

        Game i uses seed + i, so a batch is reproducible for a fixed seed
        regardless of the number of workers.
        """
        if num_games <= 0:
            return []

        pool = self._ensure_pool()
        jobs = self._make_jobs(game, player_name, num_games, seed, max_turns)

        try:
            results = pool.map(run_game, jobs)
        except KeyboardInterrupt:
            logger.info("Interrupted — discarding unfinished games")
            raise

        logger.info("Finished %d %s games with %s", len(results), game.game_id(), player_name)
        return results

    def _make_jobs(
        self,
        game: "CoverageGame",
        player_name: str,
        count: int,
        seed: int,
        max_turns: Optional[int],
    ) -> List[GameJob]:
        return [
            GameJob(
                game=game.deep_clone(),
                player_name=player_name,
                seed=seed + i,
                max_turns=max_turns,
            )
            for i in range(count)
        ]
