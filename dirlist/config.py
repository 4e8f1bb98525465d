"""Persistent JSON config helpers.

Reads default listing flags and sort order applied before command-line flags.
Malformed or missing config falls back to no defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .options import BOOLEAN_FLAG_FIELDS, SortKey

APP_NAME = "dirlist"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
LEGACY_CONFIG_PATH = Path.home() / ".config" / "dirlist.json"
CONFIG_PATH = DEFAULT_CONFIG_PATH


def _load_config_path() -> Path:
    """Return preferred config path, falling back to legacy location when needed."""
    if CONFIG_PATH.exists():
        return CONFIG_PATH
    if CONFIG_PATH == DEFAULT_CONFIG_PATH and LEGACY_CONFIG_PATH.exists():
        return LEGACY_CONFIG_PATH
    return CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    config_path = _load_config_path()
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_default_flags() -> dict[str, object]:
    """Return persisted listing defaults with invalid values dropped.

    Only boolean values for known flag names survive; ``sort`` is kept when it
    names a known sort key.
    """
    data = load_config()
    flags: dict[str, object] = {}
    for name in BOOLEAN_FLAG_FIELDS:
        value = data.get(name)
        if isinstance(value, bool):
            flags[name] = value
    sort_key = SortKey.parse(data.get("sort"))
    if sort_key is not None:
        flags["sort"] = sort_key.value
    return flags
