"""Persistent JSON defaults for command-line flags.

Stores default dirs, extensions, formats, actions, depth, and log mode.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "dirgrep"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

_LIST_KEYS = ("dirs", "exts", "substrings", "formats", "actions")


@dataclass(frozen=True)
class UserDefaults:
    """Flag defaults read from the config file; ``None`` means unset."""

    dirs: tuple[str, ...] | None = None
    exts: tuple[str, ...] | None = None
    substrings: tuple[str, ...] | None = None
    formats: tuple[str, ...] | None = None
    actions: tuple[str, ...] | None = None
    depth: int | None = None
    log_json: bool | None = None


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

    Filesystem errors are ignored so a read-only config dir never breaks a run.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _string_list(value: object) -> tuple[str, ...] | None:
    """Accept a JSON list of strings or one comma-separated string."""
    if isinstance(value, str):
        return tuple(part.strip() for part in value.split(",") if part.strip())
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return tuple(value)
    return None


def load_defaults() -> UserDefaults:
    """Read flag defaults, ignoring keys whose values have the wrong type."""
    data = load_config()
    lists = {key: _string_list(data.get(key)) for key in _LIST_KEYS}
    depth = data.get("depth")
    log_json = data.get("log_json")
    return UserDefaults(
        **lists,
        depth=depth if isinstance(depth, int) and not isinstance(depth, bool) else None,
        log_json=log_json if isinstance(log_json, bool) else None,
    )


def save_defaults(values: dict[str, object]) -> None:
    """Merge ``values`` into the persisted config."""
    config = load_config()
    config.update(values)
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "UserDefaults",
    "load_config",
    "save_config",
    "load_defaults",
    "save_defaults",
]
