"""App configuration: load/save config.json (validated with pydantic) and preference helpers."""
from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any, Literal, Optional

from pydantic import BaseModel, ValidationError

__version__ = "1.0.0"

APP_NAME = "cfb-terminal"
CONFIG_FILENAME = "config.json"

THEMES = ("default", "high_contrast", "light")

logger = logging.getLogger(__name__)


class AppConfig(BaseModel):
    """Validated app configuration. Defaults and types guaranteed."""

    theme: Literal["default", "high_contrast", "light"] = "default"

    model_config = {"extra": "ignore"}


DEFAULT_CONFIG = AppConfig().model_dump(mode="json")


def get_config_dir() -> str:
    """%APPDATA%\\cfb-terminal on Windows, $XDG_CONFIG_HOME/cfb-terminal or ~/.config/cfb-terminal elsewhere."""
    if sys.platform == "win32":
        base = os.environ.get("APPDATA") or os.path.join(os.path.expanduser("~"), "AppData", "Roaming")
        return os.path.join(base, APP_NAME)
    base = os.environ.get("XDG_CONFIG_HOME") or os.path.join(os.path.expanduser("~"), ".config")
    return os.path.join(base, APP_NAME)


def get_config_path() -> str:
    return os.path.join(get_config_dir(), CONFIG_FILENAME)


def load_config() -> dict[str, Any]:
    """Load config from disk and validate it; a missing or invalid file falls back to defaults."""
    path = get_config_path()
    if os.path.isfile(path):
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            model = AppConfig.model_validate(data)
            return model.model_dump(mode="json")
        except (json.JSONDecodeError, OSError, ValidationError) as e:
            logger.warning("Ignoring invalid config %s: %s", path, e)
        return dict(DEFAULT_CONFIG)
    cfg = dict(DEFAULT_CONFIG)
    try:
        save_config(cfg)
    except OSError as e:
        logger.warning("Could not write default config %s: %s", path, e)
    return cfg


def save_config(config: dict[str, Any]) -> None:
    """Validate and write config to disk (only valid values are persisted). Raises ValidationError."""
    model = AppConfig.model_validate(config)
    path = get_config_path()
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(model.model_dump(mode="json"), f, indent=2)


def theme(cfg: Optional[dict]) -> str:
    """Theme name: 'default', 'high_contrast' or 'light'."""
    return (cfg or {}).get("theme", "default")
