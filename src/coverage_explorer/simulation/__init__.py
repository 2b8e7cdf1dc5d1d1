"""
Simulation module - full games and parallel benchmarking.

Provides the infrastructure for playing complete games with a strategy and
for running many seeded games in parallel.
"""

from coverage_explorer.simulation.jobs import GameJob, JobResult
from coverage_explorer.simulation.runner import (
    SimulationRunner,
    BatchSummary,
    DEFAULT_WORKER_COUNT,
    summarize,
)
from coverage_explorer.simulation.worker import play_game

__all__ = [
    "GameJob",
    "JobResult",
    "SimulationRunner",
    "BatchSummary",
    "DEFAULT_WORKER_COUNT",
    "summarize",
    "play_game",
]
