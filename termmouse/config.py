"""Persistent JSON config helpers.

Stores the preferred CLI output format.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "termmouse"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

OUTPUT_FORMATS = ("label", "json", "repr")


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


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so a read-only config directory never
    breaks decoding.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def load_output_format() -> str | None:
    """Load persisted output format, returning ``None`` when unset/invalid."""
    value = load_config().get("output_format")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped in OUTPUT_FORMATS else None


def save_output_format(name: str) -> None:
    """Persist the output format; unknown names are ignored."""
    stripped = str(name).strip()
    if stripped not in OUTPUT_FORMATS:
        return
    config = load_config()
    config["output_format"] = stripped
    save_config(config)
