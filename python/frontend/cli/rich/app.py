"""Rich terminal frontend — tables, colours, and panels.

Acts as the host for ``PuzzleController``: it turns keypresses into cell
selections, waits a moment on the solved grid before asking the core to
shuffle, and draws whatever the core reports back.
"""

from __future__ import annotations

import random
import sys
import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import PuzzleController
from backend.models.config import GameConfig
from backend.models.grid import EMPTY, GridState
from backend.models.outcome import GameOutcome, MoveResult
from frontend.cli.input_handler import get_key, get_key_timeout

console = Console()

# Seconds the solved grid stays on screen before the shuffle.
SHUFFLE_DELAY = 0.5


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


def _cycle(values: tuple[int, ...], current: int, step: int) -> int:
    """Return the neighbour of *current* in *values*, clamped at the ends."""
    i = values.index(current) + step
    return values[max(0, min(len(values) - 1, i))]


def move_cursor(cursor: int, action: str, size: int) -> int:
    """Move the selection cursor one cell, stopping at the grid edges."""
    row, col = divmod(cursor, size)
    if action == "up":
        row = max(0, row - 1)
    elif action == "down":
        row = min(size - 1, row + 1)
    elif action == "left":
        col = max(0, col - 1)
    elif action == "right":
        col = min(size - 1, col + 1)
    return row * size + col


def describe(result: MoveResult) -> str:
    """Status line for the outcome of one selection."""
    if not result.accepted:
        return "[yellow]That tile is not next to the empty slot.[/yellow]"
    return ""


# -- board rendering ----------------------------------------------------------


def _render_board(
    grid: GridState,
    cursor: int | None = None,
    last_moved: int | None = None,
) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(grid.size * grid.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(grid.size):
        table.add_column(width=width + 1, justify="center")

    for r in range(grid.size):
        cells: list[str] = []
        for c in range(grid.size):
            i = r * grid.size + c
            tile = grid.get_tile(i)
            if tile == EMPTY:
                style, label = "dim", "·"
            elif i == last_moved:
                style, label = "bold cyan", f"{tile + 1:>{width}}"
            elif grid.is_tile_correct(i):
                style, label = "bold green", f"{tile + 1:>{width}}"
            else:
                style, label = "bold white", f"{tile + 1:>{width}}"
            if i == cursor:
                style += " reverse"
            cells.append(f"[{style}]{label}[/{style}]")
        table.add_row(*cells)

    return table


# -- menu screen --------------------------------------------------------------


def _draw_menu(config: GameConfig) -> None:
    """Draw the main menu with the size and move-cap selectors."""
    console.clear()

    sizes = Text()
    for s in GameConfig.SUPPORTED_GRID_SIZES:
        if s != GameConfig.SUPPORTED_GRID_SIZES[0]:
            sizes.append("  ")
        style = "bold green on #313244" if s == config.grid_size else "dim"
        sizes.append(f" {s}×{s} ", style=style)

    caps = Text()
    for m in GameConfig.SUPPORTED_MAX_MOVES:
        if m != GameConfig.SUPPORTED_MAX_MOVES[0]:
            caps.append("  ")
        style = "bold yellow on #313244" if m == config.max_moves else "dim"
        caps.append(f" {m} moves ", style=style)

    opts = Text()
    opts.append("  Enter", style="bold cyan")
    opts.append("  Play    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(sizes),
        Align.center(Text("  ← →  change size", style="dim")),
        Text(""),
        Align.center(caps),
        Align.center(Text("  ↑ ↓  change move cap", style="dim")),
        Text(""),
        Align.center(opts),
        Text(""),
    )

    panel = Panel(
        body,
        title="[bold]T I L E   P U Z Z L E[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))


# -- game screens -------------------------------------------------------------


def _stats(controller: PuzzleController) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(
        f"{controller.get_move_count()}/{controller.config.max_moves}",
        style="bold yellow",
    )
    stats.append(f" ({controller.state.moves_left} left)", style="dim")
    stats.append("    Time: ", style="dim")
    stats.append(
        _format_time(controller.state.elapsed_time), style="bold yellow"
    )
    return stats


def _draw_game(
    controller: PuzzleController,
    cursor: int | None,
    status: str = "",
    last_moved: int | None = None,
) -> None:
    """Draw the game screen."""
    console.clear()

    size = controller.config.grid_size
    board_table = _render_board(controller.grid, cursor, last_moved)

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  cursor   ", style="dim")
    controls.append("Space", style="bold cyan")
    controls.append("  slide   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    panel = Panel(
        Align.center(board_table),
        title=f"[bold cyan]Tile Puzzle  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    # Save the cursor right before the stats line so _update_time() can
    # come back and repaint only that line.
    sys.stdout.write("\033[s")
    sys.stdout.flush()
    console.print(Align.center(_stats(controller)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _update_time(controller: PuzzleController) -> None:
    """Overwrite just the stats line using the saved cursor position."""
    _DIM = "\033[2m"
    _YB = "\033[33;1m"
    _RS = "\033[0m"

    moves = f"{controller.get_move_count()}/{controller.config.max_moves}"
    left = f" ({controller.state.moves_left} left)"
    clock = _format_time(controller.state.elapsed_time)
    stats_raw = (
        f"{_DIM}Moves: {_RS}{_YB}{moves}{_RS}{_DIM}{left}{_RS}"
        f"    {_DIM}Time: {_RS}{_YB}{clock}{_RS}"
    )

    visible_len = len(f"Moves: {moves}{left}    Time: {clock}")
    pad = max(0, (console.width - visible_len) // 2)

    sys.stdout.write(f"\033[u\033[K{' ' * pad}{stats_raw}")
    sys.stdout.flush()


def _draw_result(controller: PuzzleController) -> None:
    """Draw the final board with a win or loss banner."""
    console.clear()

    size = controller.config.grid_size
    won = controller.get_outcome() is GameOutcome.WON

    banner = Text()
    if won:
        banner.append("\n  ★ ", style="bold yellow")
        banner.append("CONGRATULATIONS!", style="bold green")
        banner.append("  You solved it!  ", style="green")
        banner.append("★\n", style="bold yellow")
    else:
        banner.append("\n  OUT OF MOVES", style="bold red")
        banner.append(
            f"  The {controller.config.max_moves}-move cap was reached.\n",
            style="red",
        )

    group = Group(
        Align.center(_render_board(controller.grid)),
        Align.center(banner),
        Align.center(_stats(controller)),
    )

    colour = "green" if won else "red"
    panel = Panel(
        group,
        title=f"[bold {colour}]Tile Puzzle  {size}×{size}[/bold {colour}]",
        border_style=f"bold {colour}",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))


# -- game loops ---------------------------------------------------------------


def _start_game(controller: PuzzleController) -> None:
    """Set up a fresh game, show it solved for a moment, then shuffle."""
    controller.new_game()
    _draw_game(controller, cursor=None, status="[dim]Shuffling…[/dim]")
    time.sleep(SHUFFLE_DELAY)
    controller.shuffle()


def _play_game(controller: PuzzleController) -> None:
    """Play games with the controller's next config until the player quits."""
    while True:
        _start_game(controller)
        cursor = controller.grid.empty_index
        status = ""
        last_moved: int | None = None

        while controller.get_outcome() is GameOutcome.IN_PROGRESS:
            _draw_game(controller, cursor, status, last_moved)
            status = ""

            # Poll with a short timeout so the clock keeps ticking.
            while True:
                key = get_key_timeout(0.5)
                if key is not None:
                    break
                _update_time(controller)

            if key in ("up", "down", "left", "right"):
                cursor = move_cursor(cursor, key, controller.config.grid_size)
            elif key == "select":
                result = controller.attempt_move(cursor)
                status = describe(result)
                last_moved = result.moved_to
            elif key == "restart":
                _start_game(controller)
                cursor = controller.grid.empty_index
                last_moved = None
            elif key == "quit":
                return

        # -- game over ---------------------------------------------------------
        _draw_result(controller)
        console.print(
            Align.center(
                Text("\n  Press R to play again, Q to go back.\n", style="dim")
            )
        )

        while True:
            key = get_key()
            if key == "restart":
                break
            if key == "quit":
                return


# -- menu loop ----------------------------------------------------------------


def _menu_loop(controller: PuzzleController) -> None:
    while True:
        config = controller.next_config
        _draw_menu(config)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(
                Align.center(Text("\nGoodbye!\n", style="bold cyan"))
            )
            return
        elif key in ("left", "right"):
            step = -1 if key == "left" else 1
            controller.set_grid_size(
                _cycle(GameConfig.SUPPORTED_GRID_SIZES, config.grid_size, step)
            )
        elif key in ("up", "down"):
            step = 1 if key == "up" else -1
            controller.set_max_moves(
                _cycle(GameConfig.SUPPORTED_MAX_MOVES, config.max_moves, step)
            )
        elif key == "select":
            _play_game(controller)


# -- public entry point -------------------------------------------------------


def run(
    config: GameConfig,
    seed: int | None = None,
    menu: bool = True,
) -> None:
    """Launch the Rich CLI, either at the menu or straight into a game."""
    controller = PuzzleController(config, rng=random.Random(seed))
    if menu:
        _menu_loop(controller)
    else:
        _play_game(controller)
