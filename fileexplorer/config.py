"""Persistent JSON preferences.

Stores new-file defaults and the size-label preference. Tree state itself
is never persisted. Malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .tree_state import DEFAULT_FILE_MODIFIED, DEFAULT_FILE_NAME, DEFAULT_FILE_SIZE

logger = logging.getLogger(__name__)

APP_NAME = "fileexplorer"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


@dataclass(frozen=True)
class NewFileDefaults:
    """Values used for files created through the explorer."""

    name: str = DEFAULT_FILE_NAME
    size: str = DEFAULT_FILE_SIZE
    modified: str = DEFAULT_FILE_MODIFIED


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Write failures are logged and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError) as exc:
        logger.debug("could not write config %s: %s", CONFIG_PATH, exc)


def _nonblank(value: object, fallback: str) -> str:
    if not isinstance(value, str):
        return fallback
    stripped = value.strip()
    return stripped if stripped else fallback


def load_new_file_defaults() -> NewFileDefaults:
    """Load new-file defaults; each non-string or blank value falls back."""
    value = load_config().get("new_file")
    if not isinstance(value, dict):
        return NewFileDefaults()
    return NewFileDefaults(
        name=_nonblank(value.get("name"), DEFAULT_FILE_NAME),
        size=_nonblank(value.get("size"), DEFAULT_FILE_SIZE),
        modified=_nonblank(value.get("modified"), DEFAULT_FILE_MODIFIED),
    )


def save_new_file_defaults(defaults: NewFileDefaults) -> None:
    config = load_config()
    config["new_file"] = {
        "name": _nonblank(defaults.name, DEFAULT_FILE_NAME),
        "size": _nonblank(defaults.size, DEFAULT_FILE_SIZE),
        "modified": _nonblank(defaults.modified, DEFAULT_FILE_MODIFIED),
    }
    save_config(config)


def load_show_size_labels() -> bool:
    """Return the size-label preference; only explicit booleans are honored."""
    value = load_config().get("show_size_labels")
    return value if isinstance(value, bool) else True


def save_show_size_labels(show_size_labels: bool) -> None:
    config = load_config()
    config["show_size_labels"] = bool(show_size_labels)
    save_config(config)
