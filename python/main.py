#!/usr/bin/env python3
"""Tile Puzzle.

Usage::

    python main.py                 # interactive menu
    python main.py -s 4 -m 200     # straight into a 4×4 game, 200 moves
    python main.py --seed 7        # reproducible shuffles
"""

import importlib
import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.models.config import GameConfig  # noqa: E402

FRONTEND = "frontend.cli.rich.app"


# -- helpers ------------------------------------------------------------------


def _check_max_moves(value: Optional[int]) -> Optional[int]:
    if value is not None and value not in GameConfig.SUPPORTED_MAX_MOVES:
        choices = ", ".join(str(m) for m in GameConfig.SUPPORTED_MAX_MOVES)
        raise typer.BadParameter(f"must be one of {choices}.")
    return value


def _check_log_level(value: str) -> str:
    level = value.upper()
    if level not in logging.getLevelNamesMapping():
        raise typer.BadParameter(f"unknown logging level {value!r}.")
    return level


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    size: Optional[int] = typer.Option(
        None, "-s", "--size",
        min=min(GameConfig.SUPPORTED_GRID_SIZES),
        max=max(GameConfig.SUPPORTED_GRID_SIZES),
        envvar="TILE_PUZZLE_SIZE",
        help="Grid size (3-5).",
    ),
    max_moves: Optional[int] = typer.Option(
        None, "-m", "--max-moves",
        callback=_check_max_moves,
        envvar="TILE_PUZZLE_MAX_MOVES",
        help="Move cap (100, 200 or 500).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        envvar="TILE_PUZZLE_SEED",
        help="Seed for the shuffle.",
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level",
        callback=_check_log_level,
        envvar="TILE_PUZZLE_LOG_LEVEL",
        help="Logging level.",
    ),
) -> None:
    """Tile Puzzle. Omit --size and --max-moves for the interactive menu."""
    _configure_logging(log_level)

    defaults = GameConfig()
    config = GameConfig(
        grid_size=size if size is not None else defaults.grid_size,
        max_moves=max_moves if max_moves is not None else defaults.max_moves,
    )
    menu = size is None and max_moves is None

    mod = importlib.import_module(FRONTEND)
    mod.run(config=config, seed=seed, menu=menu)


if __name__ == "__main__":
    app()
