"""
Weighted random playouts.

A playout walks a cloned game forward with randomized moves and reports the
coverage it reached. Moves are not uniform: each one is weighted by how many
follow-up moves it leaves open,

    weight = (openness + 1) ** explore_weight

so rollouts drift toward positions that keep the walk alive, approximating
sensible play without any search.
"""

from __future__ import annotations

import random
from typing import List, TYPE_CHECKING

from coverage_explorer.core.sampling import sample
from coverage_explorer.core.types import EXPLORE_WEIGHT, WeightedOption

if TYPE_CHECKING:
    from coverage_explorer.games.game_base import CoverageGame


def weighted_options(game: "CoverageGame", explore_weight: float = EXPLORE_WEIGHT) -> List[WeightedOption]:
    """
    Weight every legal move by the openness it leaves behind.

    Moves that fail to apply on their clone are left out.
    """
    options: List[WeightedOption] = []
    for move in game.valid_moves():
        probe = game.deep_clone()
        if not probe.apply_move(move):
            continue
        openness = len(probe.valid_moves())
        options.append(WeightedOption(move, float((openness + 1) ** explore_weight)))
    return options


def rollout(
    game: "CoverageGame",
    max_steps: int,
    rng: random.Random,
    explore_weight: float = EXPLORE_WEIGHT,
) -> int:
    """
    Play weighted random moves on game until it ends or max_steps is reached.

    Mutates game, so callers hand in a clone they own.

    Args:
        game: Game to play forward
        max_steps: Upper bound on applied moves
        rng: Random stream; one draw per step
        explore_weight: Exponent on (openness + 1)

    Returns:
        Coverage score when the playout stops
    """
    steps = 0
    while not game.is_over() and steps < max_steps:
        options = weighted_options(game, explore_weight)
        if not options:
            break

        chosen = sample(options, rng.random())
        if not game.apply_move(chosen.move):
            break
        steps += 1

    return game.score()
