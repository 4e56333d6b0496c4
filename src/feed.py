"""Scoreboard feed model (pydantic) and decoder: raw JSON bytes -> tuple of Game records.

Decoding policy (default-on-missing):
  - unknown fields are ignored;
  - a missing or null string becomes "", a missing or null boolean becomes False,
    a missing or null list becomes empty, a missing or null object becomes its defaults;
  - wrong JSON types (a number where a string is declared, etc.) and invalid JSON are errors.
"""
from __future__ import annotations

import logging
from typing import Any, Tuple, Union

from pydantic import BaseModel, Field, StrictBool, StrictStr, ValidationError, model_validator

logger = logging.getLogger(__name__)


class FeedError(Exception):
    """Base for failures that stop the app before the dashboard opens."""


class ParseError(FeedError):
    """Response body is not valid JSON or does not match the scoreboard schema."""

    def __init__(self, message: str, cause: Exception = None):
        super().__init__(message)
        self.cause = cause


class _FeedModel(BaseModel):
    model_config = {
        "extra": "ignore",
        "frozen": True,
        "populate_by_name": True,
    }

    @model_validator(mode="before")
    @classmethod
    def _null_as_missing(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Names(_FeedModel):
    char6: StrictStr = ""
    short: StrictStr = ""
    seo: StrictStr = ""
    full: StrictStr = ""


class Conference(_FeedModel):
    conference_name: StrictStr = Field("", alias="conferenceName")
    conference_seo: StrictStr = Field("", alias="conferenceSeo")


class Team(_FeedModel):
    score: StrictStr = ""
    names: Names = Field(default_factory=Names)
    winner: StrictBool = False
    seed: StrictStr = ""
    description: StrictStr = ""
    rank: StrictStr = ""
    conferences: Tuple[Conference, ...] = ()


class Game(_FeedModel):
    game_id: StrictStr = Field("", alias="gameID")
    title: StrictStr = ""
    away: Team = Field(default_factory=Team)
    home: Team = Field(default_factory=Team)
    game_state: StrictStr = Field("", alias="gameState")
    current_period: StrictStr = Field("", alias="currentPeriod")
    contest_clock: StrictStr = Field("", alias="contestClock")
    # Passthrough metadata, not used for filtering or formatting
    final_message: StrictStr = Field("", alias="finalMessage")
    bracket_round: StrictStr = Field("", alias="bracketRound")
    contest_name: StrictStr = Field("", alias="contestName")
    url: StrictStr = ""
    network: StrictStr = ""
    live_video_enabled: StrictBool = Field(False, alias="liveVideoEnabled")
    start_time: StrictStr = Field("", alias="startTime")
    start_time_epoch: StrictStr = Field("", alias="startTimeEpoch")
    bracket_id: StrictStr = Field("", alias="bracketId")
    start_date: StrictStr = Field("", alias="startDate")
    video_state: StrictStr = Field("", alias="videoState")
    bracket_region: StrictStr = Field("", alias="bracketRegion")


class GameEntry(_FeedModel):
    """Wire wrapper: each element of "games" nests the record under "game"."""

    game: Game = Field(default_factory=Game)


class Scoreboard(_FeedModel):
    games: Tuple[GameEntry, ...] = ()


GameFeed = Tuple[Game, ...]


def parse_feed(raw: Union[bytes, str]) -> GameFeed:
    """Decode a scoreboard payload into the games in feed order. Raises ParseError."""
    try:
        board = Scoreboard.model_validate_json(raw)
    except ValidationError as e:
        logger.warning("parse_feed failed: %s", e.errors(include_url=False)[:3], exc_info=True)
        raise ParseError(_describe_validation_error(e), e) from e
    games = tuple(entry.game for entry in board.games)
    logger.debug("parse_feed: %d games", len(games))
    return games


def _describe_validation_error(exc: ValidationError) -> str:
    """Short message from the first pydantic error (location + message)."""
    errors = exc.errors(include_url=False)
    if not errors:
        return "invalid scoreboard payload"
    first = errors[0]
    loc = ".".join(str(p) for p in first.get("loc", ()))
    msg = first.get("msg", "invalid value")
    more = f" (+{len(errors) - 1} more)" if len(errors) > 1 else ""
    return f"{loc}: {msg}{more}" if loc else f"{msg}{more}"
