"""
Player - the capability interface every move-selection strategy implements.

Strategies share no base-class state; a harness picks one and calls
decide() once per turn with the authoritative game.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from coverage_explorer.core.types import Move
    from coverage_explorer.games.game_base import CoverageGame


class Player(ABC):
    """A move-selection strategy."""

    name: str = "player"

    @abstractmethod
    def decide(
        self,
        game: "CoverageGame",
        rng: Optional[random.Random] = None,
    ) -> Optional["Move"]:
        """
        Choose the next move.

        Args:
            game: Current game. Never mutated.
            rng: Random source for this call. Strategies fall back to their
                own stream when omitted.

        Returns:
            The chosen move, or None when no legal move exists.
        """
        pass


def make_rng(seed: Optional[int] = None, rng: Optional[random.Random] = None) -> random.Random:
    """Return rng if given, else a new Random seeded with seed."""
    if rng is not None:
        return rng
    return random.Random(seed)
