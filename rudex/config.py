"""JSON config loading helpers.

Reads default worker-pool size and bad-argument policy from a JSON file the
user edits by hand. rudex never writes it. Malformed or missing config falls
back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "rudex"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_max_workers() -> int | None:
    """Return the configured worker count, or ``None`` when unset/invalid.

    Booleans and non-positive values are rejected.
    """
    value = load_config().get("max_workers")
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


def load_keep_going() -> bool:
    """Return whether unreadable path arguments should not stop processing."""
    value = load_config().get("keep_going")
    return value if isinstance(value, bool) else False
