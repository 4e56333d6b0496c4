"""CLI formatters and exporters for live games: text blocks, JSON, CSV."""
from __future__ import annotations

import csv
import json
import sys
from datetime import datetime
from typing import Sequence

from dateutil import parser

import constants
from core import detail_rows, list_entry
from feed import Game


def scoreboard_date(games: Sequence[Game]) -> str:
    """ISO date of the scoreboard, from the first parseable startDate (MM-DD-YYYY in the feed); today otherwise."""
    for g in games:
        if not g.start_date:
            continue
        try:
            return parser.parse(g.start_date).date().isoformat()
        except (ValueError, OverflowError):
            continue
    return datetime.now().date().isoformat()


def format_game_block(game: Game) -> str:
    """List label, caption and the two detail rows for one game."""
    entry = list_entry(game)
    lines = [entry.label, f"  {entry.caption}"]
    for row in detail_rows(game):
        lines.append(f"  {row.team:<40} {row.score}")
    return "\n".join(lines)


def print_live_games(games: Sequence[Game]) -> None:
    """Print live games to stdout, one block per game."""
    print(f"Live games - {scoreboard_date(games)}")
    print("-" * 60)
    if not games:
        print(constants.EMPTY_LIST_MESSAGE + ".")
        return
    for g in games:
        print(format_game_block(g))


def _game_record(game: Game) -> dict:
    entry = list_entry(game)
    home, away = detail_rows(game)
    return {
        "gameID": game.game_id,
        "label": entry.label,
        "caption": entry.caption,
        "home": {"team": home.team, "score": home.score},
        "away": {"team": away.team, "score": away.score},
        "network": game.network,
    }


def export_games_json(games: Sequence[Game]) -> None:
    """Export live games to stdout as JSON."""
    out = {"date": scoreboard_date(games), "games": [_game_record(g) for g in games]}
    print(json.dumps(out, indent=2, ensure_ascii=False))


def export_games_csv(games: Sequence[Game]) -> None:
    """Export live games to stdout as CSV."""
    date_str = scoreboard_date(games)
    writer = csv.writer(sys.stdout)
    writer.writerow(["date", "gameID", "label", "caption", "homeTeam", "homeScore", "awayTeam", "awayScore"])
    for g in games:
        rec = _game_record(g)
        writer.writerow([
            date_str,
            rec["gameID"],
            rec["label"],
            rec["caption"],
            rec["home"]["team"],
            rec["home"]["score"],
            rec["away"]["team"],
            rec["away"]["score"],
        ])
