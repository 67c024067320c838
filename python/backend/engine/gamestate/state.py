"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import time

from backend.models.config import GameConfig
from backend.models.grid import GridState
from backend.models.outcome import GamePhase


class GameState:
    """Holds the current grid, phase, move counter, and elapsed time."""

    def __init__(self, config: GameConfig) -> None:
        self.config = config
        self.grid = GridState.solved(config.grid_size)
        self.phase: GamePhase = GamePhase.SETUP
        self.moves: int = 0
        self._start_time: float = time.time()
        self._elapsed_banked: float = 0.0
        self._running: bool = False

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.time() - self._start_time)
        return self._elapsed_banked

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += time.time() - self._start_time
            self._running = False

    def resume(self) -> None:
        if not self._running:
            self._start_time = time.time()
            self._running = True

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    @property
    def moves_left(self) -> int:
        return max(0, self.config.max_moves - self.moves)

    @property
    def budget_spent(self) -> bool:
        return self.moves >= self.config.max_moves

    @property
    def is_solved(self) -> bool:
        return self.grid.is_solved()
