"""Scoreboard API client: single fetch of the FBS feed and the one-shot live-game load."""
from __future__ import annotations

import logging
from typing import Optional, Tuple

import requests

import constants
from core import filter_live
from feed import FeedError, Game, parse_feed

logger = logging.getLogger(__name__)


class RetrievalError(FeedError):
    """Network/transport failure or non-2xx response from the scores endpoint."""

    def __init__(self, message: str, cause: Exception = None):
        super().__init__(message)
        self.cause = cause


def _user_facing_error(exc: Exception, default_prefix: str) -> str:
    """Short, user-friendly message derived from the exception."""
    msg = str(exc).strip() or type(exc).__name__
    err_lower = msg.lower()
    if isinstance(exc, requests.Timeout) or "timeout" in err_lower or "timed out" in err_lower:
        return "Connection timeout. Try again later."
    if isinstance(exc, requests.ConnectionError) or "connection" in err_lower or "unreachable" in err_lower:
        return "No connection. Check your network."
    if "429" in msg or "too many" in err_lower:
        return "Too many requests. Wait a moment and retry."
    if "404" in msg or "not found" in err_lower:
        return "Data not found."
    if len(msg) > 60:
        return default_prefix + ": " + msg[:57] + "..."
    return default_prefix + ": " + msg


def fetch_feed(endpoint: str = constants.SCORES_ENDPOINT) -> bytes:
    """GET the scoreboard once and return the raw body. No retry, no cache. Raises RetrievalError."""
    logger.debug("GET %s", endpoint)
    try:
        resp = requests.get(endpoint, timeout=constants.REQUEST_TIMEOUT)
        resp.raise_for_status()
    except requests.RequestException as e:
        logger.warning("fetch_feed failed: %s", e, exc_info=True)
        raise RetrievalError(_user_facing_error(e, "Scoreboard"), e) from e
    logger.debug("fetch_feed: %d bytes (HTTP %s)", len(resp.content), resp.status_code)
    return resp.content


class ApiClient:
    def __init__(self, endpoint: str = constants.SCORES_ENDPOINT):
        self._endpoint = endpoint

    def fetch_games(self) -> Tuple[Game, ...]:
        """All games in the feed, in feed order. Raises RetrievalError or ParseError."""
        return parse_feed(fetch_feed(self._endpoint))


def load_live_games(client: Optional[ApiClient] = None) -> Tuple[Game, ...]:
    """
    One-shot initialization: fetch -> parse -> filter.
    Returns the immutable live-game snapshot the dashboard browses for the whole session.
    """
    client = client or ApiClient()
    games = client.fetch_games()
    live = filter_live(games)
    logger.debug("load_live_games: %d of %d games live", len(live), len(games))
    return live
