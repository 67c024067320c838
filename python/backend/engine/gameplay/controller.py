"""Core gameplay logic — arbitrates moves and decides win or loss."""

from __future__ import annotations

import logging
import random

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamestate import GameState
from backend.models.config import GameConfig, check_grid_size, check_max_moves
from backend.models.grid import GridState
from backend.models.outcome import GameOutcome, GamePhase, MoveResult

logger = logging.getLogger(__name__)


class PuzzleController:
    """Orchestrates one game at a time.

    The host builds a single controller and calls ``new_game``, then
    ``shuffle`` once its own start-up delay has elapsed, then
    ``attempt_move`` for every cell the player selects.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._pending = config or GameConfig()
        self.rng = rng or random.Random()
        self.state = GameState(self._pending)

    # -- configuration --------------------------------------------------------

    @property
    def config(self) -> GameConfig:
        """Config of the game in progress."""
        return self.state.config

    @property
    def next_config(self) -> GameConfig:
        """Config the next ``new_game`` will use."""
        return self._pending

    def set_grid_size(self, size: int) -> None:
        check_grid_size(size)
        self._pending = GameConfig(size, self._pending.max_moves)

    def set_max_moves(self, max_moves: int) -> None:
        check_max_moves(max_moves)
        self._pending = GameConfig(self._pending.grid_size, max_moves)

    # -- lifecycle ------------------------------------------------------------

    def new_game(
        self,
        grid_size: int | None = None,
        max_moves: int | None = None,
    ) -> None:
        """Start over with a solved grid, zero moves and no outcome."""
        self._pending = GameConfig(
            grid_size if grid_size is not None else self._pending.grid_size,
            max_moves if max_moves is not None else self._pending.max_moves,
        )
        self.state = GameState(self._pending)
        logger.info(
            "New game: %d×%d grid, %d moves allowed",
            self.config.grid_size, self.config.grid_size, self.config.max_moves,
        )

    def shuffle(self) -> int:
        """Scramble the grid and open play.  Only the first call per game acts."""
        if self.state.phase is not GamePhase.SETUP:
            logger.debug("Shuffle ignored in phase %s", self.state.phase)
            return 0
        self.state.phase = GamePhase.SHUFFLING
        swaps = GameGenerator.scramble(self.state.grid, self.rng)
        self.state.phase = GamePhase.PLAYING
        self.state.resume()
        return swaps

    # -- moves ----------------------------------------------------------------

    def attempt_move(self, index: int) -> MoveResult:
        """Slide the tile at *index* into the empty slot, if it borders it.

        Illegal moves, and every move once the game is won or lost, come
        back with ``accepted=False`` and change nothing.  A legal move made
        before ``shuffle`` starts play on the unshuffled grid.
        """
        state = self.state
        if state.phase.is_terminal:
            return self._result(accepted=False)

        grid = state.grid
        empty = grid.empty_index
        direction = grid.direction_to_empty(index)
        if direction is None:
            logger.debug("Rejected move of cell %d (empty slot at %d)", index, empty)
            return self._result(accepted=False)
        grid.try_swap(index, direction)

        if state.phase is GamePhase.SETUP:
            state.phase = GamePhase.PLAYING
            state.resume()

        if state.is_solved:
            state.phase = GamePhase.WON
            state.pause()
            logger.info("Puzzle solved in %d moves", state.moves)
        else:
            state.increment_moves()
            if state.budget_spent:
                state.phase = GamePhase.LOST
                state.pause()
                logger.info("Move cap of %d reached", self.config.max_moves)

        return self._result(accepted=True, moved_from=index, moved_to=empty)

    # -- queries --------------------------------------------------------------

    @property
    def grid(self) -> GridState:
        """Snapshot of the current grid; mutating it does not affect play."""
        return self.state.grid.copy()

    @property
    def phase(self) -> GamePhase:
        return self.state.phase

    def get_tile_at(self, index: int) -> int:
        """Tile at *index*; raises ``IndexError`` for cells off the grid."""
        return self.state.grid.get_tile(index)

    def get_outcome(self) -> GameOutcome:
        return self.state.phase.outcome

    def get_move_count(self) -> int:
        return self.state.moves

    # -- helpers --------------------------------------------------------------

    def _result(
        self,
        accepted: bool,
        moved_from: int | None = None,
        moved_to: int | None = None,
    ) -> MoveResult:
        return MoveResult(
            accepted=accepted,
            outcome=self.get_outcome(),
            move_count=self.state.moves,
            moved_from=moved_from,
            moved_to=moved_to,
        )
