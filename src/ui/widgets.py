"""Curses widgets: selectable list of (label, caption) items and a bordered two-column table."""
from __future__ import annotations

import curses
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple

import constants
from .colors import HEADER_PAIR
from .helpers import align_text, clamp_scroll_offset, draw_box, safe_addstr

# Callback signature: (index, label, caption)
ItemCallback = Callable[[int, str, str], None]


class ListWidget:
    """Selectable list. Each item takes two lines: label, then a dimmed caption."""

    def __init__(self, title: str = constants.LIST_TITLE):
        self.title = title
        self._items: List[Tuple[str, str]] = []
        self._current: Optional[int] = None
        self._scroll = 0
        self._changed: Optional[ItemCallback] = None
        self._selected: Optional[ItemCallback] = None

    def add_item(self, label: str, caption: str = "") -> "ListWidget":
        self._items.append((label, caption))
        return self

    def set_changed_func(self, func: ItemCallback) -> "ListWidget":
        """Called when the highlighted item changes."""
        self._changed = func
        return self

    def set_selected_func(self, func: ItemCallback) -> "ListWidget":
        """Called when the user presses Enter on an item."""
        self._selected = func
        return self

    def __len__(self):
        return len(self._items)

    @property
    def items(self) -> List[Tuple[str, str]]:
        return list(self._items)

    @property
    def current_index(self) -> Optional[int]:
        return self._current

    def set_current_item(self, index: int) -> "ListWidget":
        """Highlight index (clamped to the list). Fires the changed callback when the index moves."""
        if not self._items:
            return self
        index = max(0, min(index, len(self._items) - 1))
        if index == self._current:
            return self
        self._current = index
        if self._changed:
            label, caption = self._items[index]
            self._changed(index, label, caption)
        return self

    def move(self, delta: int) -> "ListWidget":
        if self._current is None:
            return self.set_current_item(0)
        return self.set_current_item(self._current + delta)

    def first(self) -> "ListWidget":
        return self.set_current_item(0)

    def last(self) -> "ListWidget":
        return self.set_current_item(len(self._items) - 1)

    def activate(self) -> None:
        """Enter on the highlighted item."""
        if self._current is None or not self._selected:
            return
        label, caption = self._items[self._current]
        self._selected(self._current, label, caption)

    def draw(self, win, top, left, height, width, color_ctx, focused=True):
        border_attr = curses.A_BOLD if focused else curses.A_DIM
        if not draw_box(win, top, left, height, width, self.title, border_attr):
            return
        inner_w = width - 2
        visible = max(0, (height - 2) // 2)
        if not self._items:
            safe_addstr(win, top + 1, left + 1, align_text(constants.EMPTY_LIST_MESSAGE, inner_w), curses.A_DIM)
            return
        selected = self._current if self._current is not None else 0
        self._scroll = clamp_scroll_offset(self._scroll, selected, visible)
        for i in range(visible):
            idx = self._scroll + i
            if idx >= len(self._items):
                break
            label, caption = self._items[idx]
            row = top + 1 + i * 2
            attr = color_ctx.highlight_attr() if idx == self._current else curses.A_BOLD
            safe_addstr(win, row, left + 1, align_text(label, inner_w), attr)
            safe_addstr(win, row + 1, left + 1, align_text("  " + caption, inner_w), color_ctx.caption_attr())


class Cell(NamedTuple):
    text: str
    align: str = "left"
    color: Optional[int] = None


class TableWidget:
    """Sparse table of cells keyed by (row, col), drawn with grid lines inside a titled box."""

    def __init__(self, title: str = constants.TABLE_TITLE):
        self.title = title
        self._cells: Dict[Tuple[int, int], Cell] = {}

    def set_cell(self, row: int, col: int, cell: Cell) -> "TableWidget":
        self._cells[(row, col)] = cell
        return self

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        return self._cells.get((row, col))

    def clear(self) -> "TableWidget":
        self._cells.clear()
        return self

    @property
    def row_count(self) -> int:
        return max((r for r, _ in self._cells), default=-1) + 1

    @property
    def column_count(self) -> int:
        return max((c for _, c in self._cells), default=-1) + 1

    def rows(self) -> List[List[str]]:
        """Cell texts row by row ("" for unset cells)."""
        return [
            [self._cells[(r, c)].text if (r, c) in self._cells else "" for c in range(self.column_count)]
            for r in range(self.row_count)
        ]

    def column_widths(self, max_width: int) -> List[int]:
        """Natural width per column; the first column shrinks when the total does not fit max_width."""
        ncols = self.column_count
        widths = [1] * ncols
        for (_, c), cell in self._cells.items():
            widths[c] = max(widths[c], len(cell.text))
        # grid lines: one per column plus the closing one
        overflow = sum(widths) + ncols + 1 - max_width
        if overflow > 0 and ncols:
            widths[0] = max(1, widths[0] - overflow)
        return widths

    def draw(self, win, top, left, height, width, color_ctx, focused=False):
        border_attr = curses.A_BOLD if focused else curses.A_DIM
        if not draw_box(win, top, left, height, width, self.title, border_attr):
            return
        if not self._cells:
            return
        widths = self.column_widths(width - 2)
        x0, y = left + 1, top + 1
        bottom = top + height - 1

        def rule(l, m, r):
            return l + m.join("─" * w for w in widths) + r

        safe_addstr(win, y, x0, rule("┌", "┬", "┐"), border_attr, max_width=width - 2)
        y += 1
        for r in range(self.row_count):
            if y >= bottom - 1:
                break
            x = x0
            safe_addstr(win, y, x, "│", border_attr)
            for c, w in enumerate(widths):
                cell = self._cells.get((r, c))
                if cell is not None:
                    attr = _cell_attr(cell, color_ctx)
                    safe_addstr(win, y, x + 1, align_text(cell.text, w, cell.align), attr)
                safe_addstr(win, y, x + 1 + w, "│", border_attr)
                x += w + 1
            y += 1
            last = r == self.row_count - 1
            safe_addstr(win, y, x0, rule("└", "┴", "┘") if last else rule("├", "┼", "┤"), border_attr, max_width=width - 2)
            y += 1


def _cell_attr(cell: Cell, color_ctx) -> int:
    if cell.color is None:
        return 0
    if cell.color == HEADER_PAIR:
        return color_ctx.header_attr()
    return color_ctx.attr(cell.color)
