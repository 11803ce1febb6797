"""User JSON config helpers.

Reads the UI theme name, filter-bar preference, and empty-list placeholder
from a hand-edited file. Malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from ..list_model import DEFAULT_PLACEHOLDER

APP_NAME = "lazylist"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


@dataclass(frozen=True)
class ListPreferences:
    """User preferences applied when the CLI builds a list."""

    theme: str | None = None
    show_filter: bool = True
    placeholder: str = DEFAULT_PLACEHOLDER


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def load_preferences() -> ListPreferences:
    """Return preferences with every invalid or missing key defaulted."""
    data = load_config()
    theme = data.get("theme")
    show_filter = data.get("show_filter")
    placeholder = data.get("placeholder")
    return ListPreferences(
        theme=theme.strip() if isinstance(theme, str) and theme.strip() else None,
        show_filter=show_filter if isinstance(show_filter, bool) else True,
        placeholder=placeholder if isinstance(placeholder, str) and placeholder.strip() else DEFAULT_PLACEHOLDER,
    )
