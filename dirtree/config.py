"""JSON config loading.

Reads the preferred theme, connector charset, hidden-directory preference and
strict exit mode. All access is defensive: malformed or missing config falls
back to defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "dirtree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class Settings:
    """Effective defaults before command-line overrides."""

    theme: str | None = None
    charset: str | None = None
    show_hidden: bool = False
    strict: bool = False


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except Exception:
        logger.debug("ignoring unreadable config at %s", CONFIG_PATH, exc_info=True)
        return {}
    return data if isinstance(data, dict) else {}


def _load_str(data: dict[str, object], key: str) -> str | None:
    value = data.get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _load_bool(data: dict[str, object], key: str) -> bool:
    """Only explicit booleans count; anything else is ``False``."""
    value = data.get(key)
    return bool(value) if isinstance(value, bool) else False


def load_settings() -> Settings:
    data = load_config()
    return Settings(
        theme=_load_str(data, "theme"),
        charset=_load_str(data, "charset"),
        show_hidden=_load_bool(data, "show_hidden"),
        strict=_load_bool(data, "strict"),
    )


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "Settings",
    "load_config",
    "load_settings",
]
