"""Tests for the terminal host's pure helpers and its shuffle hand-off."""

from __future__ import annotations

import pytest
from rich.console import Console

from backend.engine.gameplay import PuzzleController
from backend.models.config import GameConfig
from backend.models.grid import GridState
from backend.models.outcome import GamePhase, GameOutcome, MoveResult
from frontend.cli.rich import app


@pytest.mark.parametrize(
    "cursor,action,expected",
    [
        (4, "up", 1),
        (4, "down", 7),
        (4, "left", 3),
        (4, "right", 5),
        (0, "up", 0),
        (0, "left", 0),
        (2, "right", 2),
        (8, "down", 8),
        (3, "left", 3),
        (4, "select", 4),
    ],
)
def test_move_cursor_stays_on_grid(cursor, action, expected):
    assert app.move_cursor(cursor, action, 3) == expected


def test_cycle_clamps_at_ends():
    sizes = GameConfig.SUPPORTED_GRID_SIZES
    assert app._cycle(sizes, 3, -1) == 3
    assert app._cycle(sizes, 3, 1) == 4
    assert app._cycle(sizes, 5, 1) == 5


def test_describe():
    rejected = MoveResult(False, GameOutcome.IN_PROGRESS, 0)
    accepted = MoveResult(True, GameOutcome.IN_PROGRESS, 1, 5, 8)
    assert "not next to" in app.describe(rejected)
    assert app.describe(accepted) == ""


def test_render_board_labels_tiles_from_one():
    console = Console(width=60, record=True)
    console.print(app._render_board(GridState.solved(3), cursor=0))
    text = console.export_text()
    for label in range(1, 9):
        assert str(label) in text
    assert "·" in text


def test_stats_show_moves_left():
    controller = PuzzleController(GameConfig(3, 100))
    controller.new_game()
    controller.attempt_move(5)
    text = app._stats(controller).plain
    assert "1/100" in text
    assert "(99 left)" in text


def test_start_game_waits_then_shuffles(monkeypatch):
    calls = []
    monkeypatch.setattr(app, "_draw_game", lambda *a, **k: calls.append("draw"))
    monkeypatch.setattr(app.time, "sleep", lambda s: calls.append(("sleep", s)))

    controller = PuzzleController(GameConfig(4, 200))
    app._start_game(controller)

    assert calls == ["draw", ("sleep", app.SHUFFLE_DELAY)]
    assert controller.phase is GamePhase.PLAYING
    assert controller.config == GameConfig(4, 200)
