"""Key mapping for the dashboard: curses key code -> action name."""
from __future__ import annotations

import curses
from typing import Optional

ESCAPE = 27


def get_action(key: int) -> Optional[str]:
    """
    Convert a curses key into an action string.
    Returns None for a timeout (-1) or an unknown key.

    Actions: quit, up, down, first, last, select.
    """
    if key == -1:
        return None
    if key in (ord("q"), ord("Q"), ESCAPE):
        return "quit"
    if key in (curses.KEY_UP, ord("k")):
        return "up"
    if key in (curses.KEY_DOWN, ord("j")):
        return "down"
    if key in (curses.KEY_HOME, ord("g")):
        return "first"
    if key in (curses.KEY_END, ord("G")):
        return "last"
    if key in (curses.KEY_ENTER, ord("\n"), ord("\r")):
        return "select"
    return None
