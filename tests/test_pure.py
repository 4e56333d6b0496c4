"""Tests for pure functions: live filter, list entries, detail rows, and selection."""
import sys
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))
from core import (
    DetailRow,
    DetailView,
    ListEntry,
    Selection,
    detail_rows,
    empty_detail,
    filter_live,
    list_entry,
    rank_prefix,
    select,
    team_line,
)
from feed import Game, Names, Team
import constants


def make_team(short="", rank="", score="", description=""):
    return Team(names=Names(short=short), rank=rank, score=score, description=description)


def make_game(state="live", away=None, home=None, period="3", clock="05:12", game_id=""):
    return Game(
        game_id=game_id,
        game_state=state,
        away=away or make_team("Duke"),
        home=home or make_team("UNC"),
        current_period=period,
        contest_clock=clock,
    )


class TestFilterLive(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(filter_live([]), ())

    def test_keeps_only_live_in_order(self):
        games = [make_game("final", game_id="1"), make_game("live", game_id="2"),
                 make_game("pre", game_id="3"), make_game("live", game_id="4")]
        live = filter_live(games)
        self.assertEqual([g.game_id for g in live], ["2", "4"])

    def test_exact_match_only(self):
        games = [make_game(s, game_id=s) for s in ("Live", "LIVE", " live", "live ", "in_progress", "")]
        self.assertEqual(filter_live(games), ())

    def test_subsequence_and_count(self):
        states = ["live", "pre", "live", "final", "live", "pre", "pre"]
        games = [make_game(s, game_id=str(i)) for i, s in enumerate(states)]
        live = filter_live(games)
        self.assertEqual(len(live), states.count("live"))
        ids = [g.game_id for g in live]
        self.assertEqual(ids, sorted(ids, key=int))
        self.assertTrue(all(g.game_state == "live" for g in live))

    def test_accepts_generator(self):
        live = filter_live(make_game(s) for s in ("live", "pre"))
        self.assertEqual(len(live), 1)


class TestListEntry(unittest.TestCase):
    def test_scenario_duke_at_unc(self):
        entry = list_entry(make_game(away=make_team("Duke"), home=make_team("UNC"), period="3", clock="05:12"))
        self.assertEqual(entry, ListEntry("Duke @ UNC", "3 Quarter, 05:12 remaining"))

    def test_label_is_verbatim(self):
        entry = list_entry(make_game(away=make_team(" texas a&m "), home=make_team("LSU")))
        self.assertEqual(entry.label, " texas a&m  @ LSU")

    def test_label_ignores_rank(self):
        entry = list_entry(make_game(home=make_team("UNC", rank="7")))
        self.assertEqual(entry.label, "Duke @ UNC")

    def test_blank_period_and_clock(self):
        entry = list_entry(make_game(period="", clock=""))
        self.assertEqual(entry.caption, " Quarter,  remaining")


class TestRankPrefix(unittest.TestCase):
    def test_ranked(self):
        self.assertEqual(rank_prefix(make_team("UNC", rank="7")), "(7) ")

    def test_unranked(self):
        self.assertEqual(rank_prefix(make_team("UNC")), "")

    def test_team_line_ranked_starts_with_prefix(self):
        self.assertTrue(team_line(make_team("UNC", rank="12", description="Tar Heels")).startswith("(12) UNC"))

    def test_team_line_unranked_starts_with_short(self):
        line = team_line(make_team("UNC", description="Tar Heels"))
        self.assertEqual(line, "UNC Tar Heels")


class TestDetailRows(unittest.TestCase):
    def test_scenario_ranked_home(self):
        home = make_team("UNC", rank="7", score="21", description="Tar Heels")
        away = make_team("Duke", score="14", description="Blue Devils")
        rows = detail_rows(make_game(home=home, away=away))
        self.assertEqual(rows[0], DetailRow("(7) UNC Tar Heels", "21"))
        self.assertEqual(rows[1], DetailRow("Duke Blue Devils", "14"))

    def test_each_side_uses_own_description(self):
        home = make_team("UNC", description="Tar Heels")
        away = make_team("Duke", description="Blue Devils")
        _, away_row = detail_rows(make_game(home=home, away=away))
        self.assertIn("Blue Devils", away_row.team)
        self.assertNotIn("Tar Heels", away_row.team)

    def test_score_untouched(self):
        rows = detail_rows(make_game(home=make_team("UNC", score=" 07"), away=make_team("Duke", score="")))
        self.assertEqual(rows[0].score, " 07")
        self.assertEqual(rows[1].score, "")

    def test_blank_fields_still_produce_rows(self):
        rows = detail_rows(make_game(home=make_team(""), away=make_team("", rank="3")))
        self.assertEqual(len(rows), 2)
        self.assertEqual(rows[0].team, " ")
        self.assertEqual(rows[1].team, "(3)  ")


class TestSelect(unittest.TestCase):
    def setUp(self):
        self.games = (
            make_game(game_id="1", home=make_team("UNC", rank="7", score="21", description="Tar Heels")),
            make_game(game_id="2", away=make_team("Ohio St."), home=make_team("Michigan", score="3")),
        )

    def test_view_has_header_and_two_rows(self):
        view = select(self.games, 0)
        self.assertIsInstance(view, DetailView)
        self.assertEqual(view.header, ("Team", "Score"))
        self.assertEqual(view.rows[0], DetailRow("(7) UNC Tar Heels", "21"))
        self.assertEqual(len(view.rows), 2)

    def test_out_of_range(self):
        with self.assertRaises(IndexError):
            select(self.games, 2)
        with self.assertRaises(IndexError):
            select(self.games, -1)
        with self.assertRaises(IndexError):
            select((), 0)

    def test_idempotent(self):
        self.assertEqual(select(self.games, 1), select(self.games, 1))

    def test_empty_detail_header_only(self):
        self.assertEqual(empty_detail(), DetailView(constants.DETAIL_HEADER, ()))


class TestSelection(unittest.TestCase):
    def test_starts_unselected(self):
        sel = Selection([make_game()])
        self.assertIsNone(sel.index)
        self.assertFalse(sel.has_selection)

    def test_select_moves_state(self):
        games = [make_game(game_id="1"), make_game(game_id="2")]
        sel = Selection(games)
        view = sel.select(1)
        self.assertEqual(sel.index, 1)
        self.assertEqual(view, select(games, 1))

    def test_reselect_same_output(self):
        sel = Selection([make_game(home=make_team("UNC", rank="7"))])
        first = sel.select(0)
        second = sel.select(0)
        self.assertEqual(first, second)
        self.assertEqual(sel.index, 0)

    def test_invalid_index_keeps_state(self):
        sel = Selection([make_game()])
        sel.select(0)
        with self.assertRaises(IndexError):
            sel.select(5)
        self.assertEqual(sel.index, 0)

    def test_select_initial_picks_first(self):
        sel = Selection([make_game(game_id="a"), make_game(game_id="b")])
        view = sel.select_initial()
        self.assertEqual(sel.index, 0)
        self.assertEqual(len(view.rows), 2)

    def test_select_initial_empty(self):
        sel = Selection([])
        self.assertEqual(sel.select_initial(), empty_detail())
        self.assertIsNone(sel.index)

    def test_snapshot_is_tuple(self):
        games = [make_game()]
        sel = Selection(games)
        games.append(make_game())
        self.assertEqual(len(sel.games), 1)


if __name__ == "__main__":
    unittest.main()
