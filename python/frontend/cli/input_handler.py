"""Single-keypress reader for the terminal frontend.

Turns raw keys into action strings: cursor movement, cell selection and a
few commands.  Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable

# -- key tables ----------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    " ": "select",
    "\r": "select",
    "\n": "select",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve(ch: str) -> str:
    """Map one raw character to its action string.

    Letters are matched case-insensitively; digits and other printable
    characters come back unchanged, anything else as ``""``.
    """
    action = _KEY_MAP.get(ch) or _KEY_MAP.get(ch.lower())
    if action:
        return action
    return ch if ch.isprintable() else ""


def decode_escape(read_next: Callable[[], str | None]) -> str:
    """Decode what follows an ESC byte.

    *read_next* returns the next character, or ``None`` when nothing more
    is pending.  ``ESC [ A..D`` is an arrow key; a bare ESC means quit.
    """
    ch2 = read_next()
    if ch2 != "[":
        return "quit"
    ch3 = read_next()
    if ch3 is None:
        return ""
    return _ARROW_MAP.get(ch3, "")


# -- platform readers ----------------------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        return sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Block until a key is pressed and return its action string.

    Possible return values:
        "up", "down", "left", "right"  — cursor movement (arrows / WASD)
        "select"                       — Space / Enter
        "restart"                      — r
        "quit"                         — q / Ctrl-C / Escape
        "<char>"                       — other printable character
        ""                             — unrecognised key
    """
    ch = _getch()
    if ch == "\x1b":
        return decode_escape(_getch)
    return resolve(ch)


def get_key_timeout(timeout: float) -> str | None:
    """Like ``get_key`` but give up after *timeout* seconds.

    Returns ``None`` if no key arrived in time, so the caller can refresh
    the clock between keypresses.
    """
    if os.name == "nt":
        import msvcrt  # type: ignore[import-not-found]
        import time

        end = time.monotonic() + timeout
        while time.monotonic() < end:
            if msvcrt.kbhit():
                return get_key()
            time.sleep(0.02)
        return None

    import select
    import termios
    import tty

    fd = sys.stdin.fileno()

    def read_pending(wait: float) -> str | None:
        ready, _, _ = select.select([fd], [], [], wait)
        if not ready:
            return None
        # os.read is unbuffered, so select still sees the rest of an
        # escape sequence.
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = read_pending(timeout)
        if ch is None:
            return None
        if ch == "\x1b":
            return decode_escape(lambda: read_pending(0.1))
        return resolve(ch)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
