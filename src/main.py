#!/usr/bin/env python3
"""CFB Terminal entry point: one-shot feed load, curses dashboard, and CLI mode."""

from __future__ import annotations

import curses
import logging
from typing import Optional, Tuple

import typer

import api
import cli_formatters
import config
import logging_config
from feed import FeedError, Game, ParseError
from ui.colors import ColorContext
from ui.shell import run_dashboard

logger = logging.getLogger(__name__)


def load_games_or_exit(api_client: api.ApiClient) -> Tuple[Game, ...]:
    """Run the one-shot load; on failure print a diagnostic and exit 1 before any UI exists."""
    try:
        return api.load_live_games(api_client)
    except FeedError as e:
        what = "parse" if isinstance(e, ParseError) else "get"
        logger.warning("failed to %s game data: %s", what, e, exc_info=True)
        typer.echo(f"Error: failed to {what} game data: {e}", err=True)
        raise typer.Exit(code=1)


def run(api_client: api.ApiClient) -> None:
    cfg = config.load_config()
    games = load_games_or_exit(api_client)
    color_ctx = ColorContext(theme=config.theme(cfg))
    try:
        curses.wrapper(lambda stdscr: run_dashboard(stdscr, games, color_ctx))
    except KeyboardInterrupt:
        pass


def run_cli(api_client: api.ApiClient, live_games: bool, export_games: Optional[str]) -> None:
    games = load_games_or_exit(api_client)
    if export_games == "json":
        cli_formatters.export_games_json(games)
    elif export_games == "csv":
        cli_formatters.export_games_csv(games)
    elif live_games:
        cli_formatters.print_live_games(games)


app = typer.Typer(
    name="cfb-terminal",
    help="CFB Terminal – live college football (FBS) scores in the terminal. With no arguments, opens TUI mode.",
    no_args_is_help=False,
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    live_games: bool = typer.Option(False, "-l", "--live-games", help="Print live games with scores and exit"),
    export_games: Optional[str] = typer.Option(None, "-e", "--export-games", help="Export live games: json or csv"),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
) -> None:
    if version:
        typer.echo(f"cfb-terminal {config.__version__}")
        raise typer.Exit()
    if export_games is not None and export_games not in ("json", "csv"):
        raise typer.BadParameter("--export-games must be json or csv")
    if ctx.invoked_subcommand is not None:
        return
    logging_config.setup_logging()
    api_client = api.ApiClient()
    if live_games or export_games:
        run_cli(api_client, live_games, export_games)
    else:
        run(api_client)


if __name__ == "__main__":
    app()
