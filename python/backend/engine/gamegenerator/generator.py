"""Scrambles tile grids using only legal moves."""

from __future__ import annotations

import logging
import random

from backend.models.grid import Direction, GridState

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates solvable puzzles by shuffling from the solved state."""

    @staticmethod
    def shuffle_depth(size: int) -> int:
        """Number of successful swaps a shuffle applies to a *size* grid."""
        return size ** 3

    @staticmethod
    def scramble(grid: GridState, rng: random.Random | None = None) -> int:
        """Scramble *grid* in-place using random legal moves.

        Each attempt draws a fresh cell and direction; only attempts that
        actually swap count towards the shuffle depth.  Returns the number
        of swaps applied.
        """
        rng = rng or random.Random()
        target = GameGenerator.shuffle_depth(grid.size)
        count = len(grid.cells)
        directions = list(Direction)

        swaps = 0
        attempts = 0
        while swaps < target:
            attempts += 1
            index = rng.randrange(count)
            if grid.try_swap(index, rng.choice(directions)):
                swaps += 1

        logger.debug(
            "Shuffled %d×%d grid: %d swaps in %d attempts",
            grid.size, grid.size, swaps, attempts,
        )
        return swaps
