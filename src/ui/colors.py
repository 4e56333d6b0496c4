"""Color pairs per theme (curses): table header, list highlight, captions."""
import curses

import config

HEADER_PAIR = 1
HIGHLIGHT_PAIR = 2
CAPTION_PAIR = 3


class ColorContext:
    def __init__(self, theme="default"):
        self._theme = theme if theme in config.THEMES else "default"
        self._ready = False

    def init_pairs(self):
        if self._theme == "light":
            pairs = {
                HEADER_PAIR: (curses.COLOR_BLUE, -1),
                HIGHLIGHT_PAIR: (curses.COLOR_WHITE, curses.COLOR_BLUE),
                CAPTION_PAIR: (curses.COLOR_BLACK, -1),
            }
        elif self._theme == "high_contrast":
            pairs = {
                HEADER_PAIR: (curses.COLOR_WHITE, -1),
                HIGHLIGHT_PAIR: (curses.COLOR_BLACK, curses.COLOR_WHITE),
                CAPTION_PAIR: (curses.COLOR_WHITE, -1),
            }
        else:
            pairs = {
                HEADER_PAIR: (curses.COLOR_YELLOW, -1),
                HIGHLIGHT_PAIR: (curses.COLOR_BLACK, curses.COLOR_WHITE),
                CAPTION_PAIR: (curses.COLOR_GREEN, -1),
            }
        self._ready = True
        for pair, (fg, bg) in pairs.items():
            try:
                curses.init_pair(pair, fg, bg)
            except curses.error:
                self._ready = False
                break

    def attr(self, pair):
        """curses attribute for a pair, or 0 when colors are unavailable."""
        if not self._ready:
            return 0
        return curses.color_pair(pair)

    def header_attr(self):
        return self.attr(HEADER_PAIR) | curses.A_BOLD

    def highlight_attr(self):
        if self._theme == "high_contrast" or not self._ready:
            return curses.A_REVERSE | curses.A_BOLD
        return self.attr(HIGHLIGHT_PAIR)

    def caption_attr(self):
        return self.attr(CAPTION_PAIR) | curses.A_DIM
