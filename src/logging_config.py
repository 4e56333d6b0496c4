"""Logging setup: level from the CFB_DEBUG environment variable (set = DEBUG) or WARNING."""
import logging
import os

LOG_LEVEL = logging.DEBUG if os.environ.get("CFB_DEBUG") else logging.WARNING


def setup_logging():
    """Configure the app's root logger. Call once at startup, before the first fetch."""
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(levelname)s [%(name)s] %(message)s",
    )