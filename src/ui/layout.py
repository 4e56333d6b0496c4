"""Grid layout: list and table side by side (1:3) on wide terminals, stacked on narrow ones."""
from __future__ import annotations

from typing import NamedTuple, Tuple

import constants


class Rect(NamedTuple):
    top: int
    left: int
    height: int
    width: int


class Grid:
    def __init__(
        self,
        left_widget,
        right_widget,
        weights: Tuple[int, int] = (constants.LIST_WEIGHT, constants.TABLE_WEIGHT),
        min_wide_width: int = constants.WIDE_LAYOUT_MIN_WIDTH,
        footer_lines: int = 1,
    ):
        self.left_widget = left_widget
        self.right_widget = right_widget
        self.weights = weights
        self.min_wide_width = min_wide_width
        self.footer_lines = footer_lines

    def regions(self, height: int, width: int) -> Tuple[Rect, Rect]:
        """Rects for (left_widget, right_widget) on a height x width screen, above the footer."""
        usable = max(0, height - self.footer_lines)
        if width >= self.min_wide_width:
            total = sum(self.weights)
            left_w = width * self.weights[0] // total
            return Rect(0, 0, usable, left_w), Rect(0, left_w, usable, width - left_w)
        top_h = usable // 2
        return Rect(0, 0, top_h, width), Rect(top_h, 0, usable - top_h, width)

    def draw(self, win, color_ctx, focus_left=True):
        height, width = win.getmaxyx()
        left, right = self.regions(height, width)
        self.left_widget.draw(win, *left, color_ctx, focused=focus_left)
        self.right_widget.draw(win, *right, color_ctx, focused=not focus_left)
