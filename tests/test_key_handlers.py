"""Tests for key_handlers: get_action mapping."""
import sys
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

try:
    import curses
    from key_handlers import get_action, ESCAPE
    _curses_ok = True
except ImportError:
    _curses_ok = False


@unittest.skipIf(not _curses_ok, "curses not available")
class TestGetAction(unittest.TestCase):
    def test_timeout_returns_none(self):
        self.assertIsNone(get_action(-1))

    def test_quit(self):
        self.assertEqual(get_action(ord("q")), "quit")
        self.assertEqual(get_action(ord("Q")), "quit")
        self.assertEqual(get_action(ESCAPE), "quit")

    def test_up_down(self):
        self.assertEqual(get_action(curses.KEY_UP), "up")
        self.assertEqual(get_action(ord("k")), "up")
        self.assertEqual(get_action(curses.KEY_DOWN), "down")
        self.assertEqual(get_action(ord("j")), "down")

    def test_first_last(self):
        self.assertEqual(get_action(curses.KEY_HOME), "first")
        self.assertEqual(get_action(ord("g")), "first")
        self.assertEqual(get_action(curses.KEY_END), "last")
        self.assertEqual(get_action(ord("G")), "last")

    def test_select(self):
        self.assertEqual(get_action(ord("\n")), "select")
        self.assertEqual(get_action(ord("\r")), "select")
        self.assertEqual(get_action(curses.KEY_ENTER), "select")

    def test_unknown_key_returns_none(self):
        self.assertIsNone(get_action(ord("x")))
        self.assertIsNone(get_action(ord(" ")))
        self.assertIsNone(get_action(ord("1")))


if __name__ == "__main__":
    unittest.main()
