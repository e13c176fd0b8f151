"""Persistent JSON config helpers.

Stores UI theme, node geometry, tree-pane width, and the last opened tree.
Malformed or missing config falls back to defaults; write errors are ignored.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from ..layout import DEFAULT_INDENT_WIDTH, DEFAULT_ROW_HEIGHT
from ..ui_theme import normalize_theme_name

logger = logging.getLogger(__name__)

APP_NAME = "treemarquee"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

ROW_HEIGHT_RANGE = (1, 4)
INDENT_WIDTH_RANGE = (1, 8)


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

    Filesystem/serialization errors are logged and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.debug("could not write config %s: %s", CONFIG_PATH, exc)


def _update_config(key: str, value: object) -> None:
    config = load_config()
    config[key] = value
    save_config(config)


def _load_bounded_int(key: str, bounds: tuple[int, int], default: int) -> int:
    """Read an integer setting; booleans and out-of-range values fall back."""
    value = load_config().get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    low, high = bounds
    if value < low or value > high:
        return default
    return value


def load_row_height() -> int:
    return _load_bounded_int("row_height", ROW_HEIGHT_RANGE, DEFAULT_ROW_HEIGHT)


def load_indent_width() -> int:
    return _load_bounded_int("indent_width", INDENT_WIDTH_RANGE, DEFAULT_INDENT_WIDTH)


def load_theme_name() -> str | None:
    value = load_config().get("theme")
    if not isinstance(value, str) or not value.strip():
        return None
    return normalize_theme_name(value)


def save_theme_name(name: str) -> None:
    _update_config("theme", normalize_theme_name(name))


def load_tree_pane_percent() -> float | None:
    """Read the tree-pane width percentage constrained to the open interval (0, 100)."""
    value = load_config().get("tree_pane_percent")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if value <= 0 or value >= 100:
        return None
    return float(value)


def save_tree_pane_percent(total_width: int, tree_width: int) -> None:
    """Store the tree-pane width as a percentage clamped to ``[1.0, 99.0]``."""
    if total_width <= 0:
        return
    percent = max(1.0, min(99.0, (tree_width / total_width) * 100.0))
    _update_config("tree_pane_percent", round(percent, 2))


def load_last_tree_path() -> Path | None:
    value = load_config().get("last_tree_path")
    if not isinstance(value, str) or not value:
        return None
    return Path(value)


def save_last_tree_path(path: Path) -> None:
    _update_config("last_tree_path", str(path))
