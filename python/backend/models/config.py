"""Per-game configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


class InvalidConfigError(ValueError):
    """Raised when a grid size or move cap is not one of the supported values."""


@dataclass(frozen=True)
class GameConfig:
    """Grid size and move cap for one game.

    A game never sees its config change; a new value takes effect on the
    next ``new_game``.
    """

    SUPPORTED_GRID_SIZES: ClassVar[tuple[int, ...]] = (3, 4, 5)
    SUPPORTED_MAX_MOVES: ClassVar[tuple[int, ...]] = (100, 200, 500)

    grid_size: int = 3
    max_moves: int = 500

    def __post_init__(self) -> None:
        check_grid_size(self.grid_size)
        check_max_moves(self.max_moves)


def check_grid_size(size: int) -> int:
    if size not in GameConfig.SUPPORTED_GRID_SIZES:
        raise InvalidConfigError(
            f"Grid size {size!r} is not supported; "
            f"choose one of {GameConfig.SUPPORTED_GRID_SIZES}."
        )
    return size


def check_max_moves(max_moves: int) -> int:
    if max_moves not in GameConfig.SUPPORTED_MAX_MOVES:
        raise InvalidConfigError(
            f"Move cap {max_moves!r} is not supported; "
            f"choose one of {GameConfig.SUPPORTED_MAX_MOVES}."
        )
    return max_moves
