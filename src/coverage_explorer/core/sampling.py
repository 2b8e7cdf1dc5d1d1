"""
Weighted sampling via inverse CDF.

The sampler is handed the uniform draw instead of pulling one itself, so the
same inputs always give the same choice and callers stay in control of the
random stream.
"""

from __future__ import annotations

from typing import Sequence

from coverage_explorer.core.types import WeightedOption


def total_weight(options: Sequence[WeightedOption]) -> float:
    """Sum of option weights. Raises ValueError on a negative weight."""
    total = 0.0
    for option in options:
        if option.weight < 0:
            raise ValueError(f"Negative weight {option.weight} for move {option.move}")
        total += option.weight
    return total


def sample(options: Sequence[WeightedOption], draw: float) -> WeightedOption:
    """
    Pick one option with probability proportional to its weight.

    Args:
        options: Candidates in a fixed order
        draw: Uniform value in [0, 1)

    Returns:
        The first option whose cumulative weight reaches draw * total.
        Falls back to the first option when none does (zero total weight,
        or float round-off at the top of the range).
    """
    if not options:
        raise ValueError("No options provided")

    threshold = draw * total_weight(options)
    cumulative = 0.0

    for option in options:
        cumulative += option.weight
        if cumulative >= threshold:
            return option

    return options[0]
