"""Pytest fixtures and helpers shared by the tile puzzle tests."""

from __future__ import annotations

import random

import pytest

from backend.engine.gameplay import PuzzleController
from backend.models.config import GameConfig
from backend.models.grid import EMPTY, GridState


def assert_valid_grid(grid: GridState) -> None:
    """Exactly one empty cell, tiles exactly 0..N²-2, empty_index in step."""
    count = grid.size * grid.size
    assert len(grid.cells) == count
    assert grid.cells.count(EMPTY) == 1
    assert sorted(c for c in grid.cells if c != EMPTY) == list(range(count - 1))
    assert grid.cells[grid.empty_index] == EMPTY


def is_reachable_from_solved(grid: GridState) -> bool:
    """Permutation-parity test for sliding puzzles of any size.

    Treating the empty cell as the highest tile, a grid is reachable iff
    the permutation parity equals the parity of the empty cell's
    Manhattan distance from the last cell.
    """
    count = grid.size * grid.size
    perm = [count - 1 if c == EMPTY else c for c in grid.cells]
    seen = [False] * count
    transpositions = 0
    for start in range(count):
        length = 0
        i = start
        while not seen[i]:
            seen[i] = True
            i = perm[i]
            length += 1
        if length:
            transpositions += length - 1
    row, col = divmod(grid.empty_index, grid.size)
    distance = (grid.size - 1 - row) + (grid.size - 1 - col)
    return transpositions % 2 == distance % 2


@pytest.fixture
def rng():
    """Seeded RNG so shuffles are repeatable."""
    return random.Random(1234)


@pytest.fixture
def controller(rng):
    """A 3×3 controller with a 100-move cap, set up but not shuffled."""
    ctl = PuzzleController(GameConfig(grid_size=3, max_moves=100), rng=rng)
    ctl.new_game()
    return ctl


@pytest.fixture
def grid_3x3():
    return GridState.solved(3)


@pytest.fixture
def grid_4x4():
    return GridState.solved(4)
