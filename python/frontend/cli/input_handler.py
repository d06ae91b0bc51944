"""Single-keypress reader for the terminal front end.

Arrow keys and WASD slide tiles; letters trigger actions. Works on
macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- key mapping ---------------------------------------------------------------

_ACTIONS: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "scramble",
    "g": "reset",
    "n": "hint",
    "v": "solve",
    "\r": "enter",
    "\n": "enter",
}

_ARROWS: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string.

    Letters are case-insensitive; unmapped printable characters (menu
    digits) come back unchanged and anything else becomes ``""``.
    """
    action = _ACTIONS.get(ch) or _ACTIONS.get(ch.lower())
    if action:
        return action
    return ch if ch.isprintable() else ""


def get_key() -> str:
    """Block for one keypress and return its action string.

    One of ``"up"``, ``"down"``, ``"left"``, ``"right"`` (tile slides),
    ``"quit"``, ``"scramble"``, ``"reset"``, ``"hint"``, ``"solve"``,
    ``"enter"``, an unmapped printable character, or ``""``.
    """
    ch = _getch()

    # ESC [ A/B/C/D
    if ch == "\x1b":
        if _getch() == "[":
            return _ARROWS.get(_getch(), "")
        return "quit"

    return resolve(ch)


def key_pressed() -> bool:
    """Return True if a keypress is waiting, without consuming it."""
    if os.name == "nt":
        import msvcrt  # type: ignore[import-not-found]

        return bool(msvcrt.kbhit())

    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        ready, _, _ = select.select([fd], [], [], 0)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return bool(ready)
