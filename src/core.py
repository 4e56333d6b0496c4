"""Pure business logic: live filter, list entries, detail rows, and selection. UI imports from here."""
from __future__ import annotations

from typing import Iterable, NamedTuple, Optional, Sequence, Tuple

import constants
from feed import Game, Team


class ListEntry(NamedTuple):
    label: str
    caption: str


class DetailRow(NamedTuple):
    team: str
    score: str


class DetailView(NamedTuple):
    header: Tuple[str, str]
    rows: Tuple[DetailRow, ...]


def filter_live(games: Iterable[Game]) -> Tuple[Game, ...]:
    """Games whose state is exactly "live", in feed order."""
    return tuple(g for g in games if g.game_state == constants.LIVE_STATE)


def list_entry(game: Game) -> ListEntry:
    """Menu label ("Away @ Home") and caption (period and clock) for one game."""
    label = f"{game.away.names.short} @ {game.home.names.short}"
    caption = f"{game.current_period} Quarter, {game.contest_clock} remaining"
    return ListEntry(label, caption)


def rank_prefix(team: Team) -> str:
    return f"({team.rank}) " if team.rank else ""


def team_line(team: Team) -> str:
    """Detail text for one side: optional rank prefix, short name, description."""
    return f"{rank_prefix(team)}{team.names.short} {team.description}"


def detail_rows(game: Game) -> Tuple[DetailRow, DetailRow]:
    """Home row first, then away; scores are passed through untouched."""
    return (
        DetailRow(team_line(game.home), game.home.score),
        DetailRow(team_line(game.away), game.away.score),
    )


def empty_detail() -> DetailView:
    return DetailView(constants.DETAIL_HEADER, ())


def select(games: Sequence[Game], index: int) -> DetailView:
    """
    Detail view for games[index]. Raises IndexError outside 0..len(games)-1
    (negative indexes are not treated as offsets from the end).
    """
    if index < 0 or index >= len(games):
        raise IndexError(f"game index {index} out of range (0..{len(games) - 1})")
    return DetailView(constants.DETAIL_HEADER, detail_rows(games[index]))


class Selection:
    """
    Selection state over the live-game snapshot.
    NoSelection (index None) -> Selected(i) on select(i); re-selecting i yields the same view.
    """

    def __init__(self, games: Sequence[Game]):
        self._games = tuple(games)
        self._index: Optional[int] = None

    @property
    def games(self) -> Tuple[Game, ...]:
        return self._games

    @property
    def index(self) -> Optional[int]:
        return self._index

    @property
    def has_selection(self) -> bool:
        return self._index is not None

    def select(self, index: int) -> DetailView:
        view = select(self._games, index)
        self._index = index
        return view

    def select_initial(self) -> DetailView:
        """Eagerly select the first game; header-only view when there are none."""
        if not self._games:
            return empty_detail()
        return self.select(0)
