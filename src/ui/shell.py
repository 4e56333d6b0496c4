"""Dashboard shell: binds the live-game list to the detail table and runs the curses event loop."""
from __future__ import annotations

import curses
import logging
from typing import Sequence

import constants
from core import DetailView, Selection, list_entry
from feed import Game
from key_handlers import get_action
from .colors import HEADER_PAIR
from .helpers import safe_addstr
from .layout import Grid
from .widgets import Cell, ListWidget, TableWidget

logger = logging.getLogger(__name__)


def show_detail(table: TableWidget, view: DetailView) -> None:
    """Write a detail view into the table: centered header row, then home and away rows."""
    table.clear()
    for col, text in enumerate(view.header):
        table.set_cell(0, col, Cell(text, align="center", color=HEADER_PAIR))
    for r, row in enumerate(view.rows, start=1):
        table.set_cell(r, 0, Cell(row.team))
        table.set_cell(r, 1, Cell(row.score))


class DashboardShell:
    """
    Owns the list and table widgets for one session over a fixed live-game snapshot.
    The first game is selected on construction so the table is filled before any key press.
    """

    def __init__(self, games: Sequence[Game], color_ctx):
        self.color_ctx = color_ctx
        self.selection = Selection(games)
        self.menu = ListWidget(constants.LIST_TITLE)
        self.table = TableWidget(constants.TABLE_TITLE)
        self.grid = Grid(self.menu, self.table)

        for game in self.selection.games:
            entry = list_entry(game)
            self.menu.add_item(entry.label, entry.caption)
        show_detail(self.table, self.selection.select_initial())
        if self.selection.has_selection:
            self.menu.set_current_item(self.selection.index)
        # Callbacks bound after the initial highlight so it is not formatted twice
        self.menu.set_changed_func(self._on_select).set_selected_func(self._on_select)

    def _on_select(self, index, label, caption):
        logger.debug("select %d: %s", index, label)
        show_detail(self.table, self.selection.select(index))

    def handle_action(self, action) -> bool:
        """Apply one action. Returns False when the session should end."""
        if action == "quit":
            return False
        if action == "up":
            self.menu.move(-1)
        elif action == "down":
            self.menu.move(1)
        elif action == "first":
            self.menu.first()
        elif action == "last":
            self.menu.last()
        elif action == "select":
            self.menu.activate()
        return True

    def draw(self, stdscr):
        height, width = stdscr.getmaxyx()
        stdscr.erase()
        self.grid.draw(stdscr, self.color_ctx)
        safe_addstr(stdscr, height - 1, 0, constants.FOOTER_HINT, curses.A_DIM, max_width=width - 1)
        stdscr.refresh()

    def run(self, stdscr):
        """Event loop: one key at a time until quit."""
        while True:
            self.draw(stdscr)
            try:
                key = stdscr.getch()
            except KeyboardInterrupt:
                break
            if key == curses.KEY_RESIZE:
                continue
            if not self.handle_action(get_action(key)):
                break


def run_dashboard(stdscr, games: Sequence[Game], color_ctx) -> None:
    """curses.wrapper target: set up colors and run the shell."""
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    stdscr.keypad(True)
    curses.start_color()
    curses.use_default_colors()
    color_ctx.init_pairs()
    DashboardShell(games, color_ctx).run(stdscr)
