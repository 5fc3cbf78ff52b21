"""Raw keypresses for the puzzle view, turned into game actions.

Tiles slide with the arrow keys or WASD; N asks for a hint, U takes back
the last move, R deals a fresh shuffle and Q or Escape leaves. Keys are
read one at a time through termios, or msvcrt on Windows.
"""

from __future__ import annotations

import os
import sys


# -- low-level character readers -----------------------------------------------


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


# -- shared key mapping --------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "W": "up",
    "s": "down",
    "S": "down",
    "a": "left",
    "A": "left",
    "d": "right",
    "D": "right",
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "shuffle",
    "R": "shuffle",
    "n": "hint",
    "N": "hint",
    "u": "undo",
    "U": "undo",
    "\r": "enter",
    "\n": "enter",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    return _KEY_MAP.get(ch, ch if ch.isprintable() else "")


def resolve_escape(ch2: str, ch3: str = "") -> str:
    """Map the tail of an ``ESC`` sequence to an action string."""
    if ch2 != "[":
        return "quit"  # bare Escape
    return _ARROW_MAP.get(ch3, "")


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Actions:
        "up", "down", "left", "right"   arrow keys or WASD; the tile slides
                                        that way
        "hint"                          n, highlight a suggested tile
        "undo"                          u, take back the last move
        "shuffle"                       r, new game (also "play again")
        "quit"                          q, Ctrl-C or Escape
        "enter"                         Enter / Return
        "<char>"                        any other printable key
        ""                              anything else
    """
    ch = _getch()

    # Arrow keys (Unix escape sequences: ESC [ A/B/C/D)
    if ch == "\x1b":
        ch2 = _getch()
        return resolve_escape(ch2, _getch() if ch2 == "[" else "")

    return resolve(ch)
