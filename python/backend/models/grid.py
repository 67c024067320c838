"""Grid model for the tile puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

EMPTY = -1


class Direction(StrEnum):
    """Where a tile moves, relative to the cell it occupies."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Order in which a selected tile is tried against the empty slot.
PRECEDENCE: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)

# (row, col) step of a tile moving in each direction.
_STEPS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


@dataclass
class GridState:
    """Represents the puzzle grid as a flat, row-major list of cells.

    Cell ``i`` holds tile ``i`` when solved; ``EMPTY`` marks the vacant
    cell.  ``empty_index`` is kept in step with ``cells`` by every swap.
    """

    size: int
    cells: list[int]
    empty_index: int

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, size: int) -> GridState:
        """Return the goal-state grid (tiles in order, empty slot last)."""
        count = size * size
        cells = list(range(count - 1)) + [EMPTY]
        return cls(size=size, cells=cells, empty_index=count - 1)

    @classmethod
    def from_flat(cls, size: int, cells: list[int]) -> GridState:
        """Create a grid from a flat row-major cell list.

        Example::

            GridState.from_flat(3, [0, 1, 2, 3, 4, EMPTY, 6, 7, 5])
        """
        count = size * size
        if len(cells) != count:
            raise ValueError(
                f"Expected {count} cells for a {size}×{size} grid, "
                f"got {len(cells)}."
            )
        if cells.count(EMPTY) != 1:
            raise ValueError("A grid must contain exactly one empty cell.")
        if sorted(c for c in cells if c != EMPTY) != list(range(count - 1)):
            raise ValueError(
                f"Tiles must be exactly 0..{count - 2} with no duplicates."
            )
        return cls(size=size, cells=list(cells), empty_index=cells.index(EMPTY))

    def reset(self) -> None:
        """Put every tile back in its goal cell."""
        fresh = GridState.solved(self.size)
        self.cells = fresh.cells
        self.empty_index = fresh.empty_index

    # -- moves ----------------------------------------------------------------

    def offset(self, direction: Direction) -> int:
        dr, dc = _STEPS[direction]
        return dr * self.size + dc

    def can_swap(self, index: int, direction: Direction) -> bool:
        """Check whether the tile at *index* may slide in *direction*."""
        count = len(self.cells)
        if not 0 <= index < count:
            return False
        # Column guards stop horizontal moves from wrapping to another row.
        if direction is Direction.LEFT and index % self.size == 0:
            return False
        if direction is Direction.RIGHT and index % self.size == self.size - 1:
            return False
        target = index + self.offset(direction)
        return 0 <= target < count and target == self.empty_index

    def try_swap(self, index: int, direction: Direction) -> bool:
        """Slide the tile at *index* into the empty slot next to it.

        Returns True if the move was legal and applied; otherwise the
        grid is left untouched.
        """
        if not self.can_swap(index, direction):
            return False
        target = index + self.offset(direction)
        self.cells[index], self.cells[target] = (
            self.cells[target],
            self.cells[index],
        )
        self.empty_index = index
        return True

    # -- queries --------------------------------------------------------------

    def get_tile(self, index: int) -> int:
        if not 0 <= index < len(self.cells):
            raise IndexError(f"cell {index} is outside the grid")
        return self.cells[index]

    def direction_to_empty(self, index: int) -> Direction | None:
        """Return the first direction in which *index* could move, if any."""
        for direction in PRECEDENCE:
            if self.can_swap(index, direction):
                return direction
        return None

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal cells."""
        last = len(self.cells) - 1
        if self.cells[last] != EMPTY:
            return False
        return all(self.cells[i] == i for i in range(last))

    def is_tile_correct(self, index: int) -> bool:
        """Check if the cell at *index* holds the tile that belongs there."""
        tile = self.get_tile(index)
        if tile == EMPTY:
            return index == len(self.cells) - 1
        return tile == index

    def copy(self) -> GridState:
        return GridState(
            size=self.size,
            cells=self.cells[:],
            empty_index=self.empty_index,
        )
