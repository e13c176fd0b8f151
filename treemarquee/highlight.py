"""Pygments-backed highlighting for JSON printed by ``--json``."""

from __future__ import annotations

import json
from functools import lru_cache

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import JsonLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"


def normalize_style(style: str) -> str:
    """Return ``style`` if Pygments knows it, otherwise the default style."""
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


@lru_cache(maxsize=8)
def _formatter_for_style(style: str) -> TerminalFormatter:
    return TerminalFormatter(style=style)


def dump_json(data: object, *, style: str = DEFAULT_STYLE, no_color: bool = False) -> str:
    """Serialize ``data`` as indented JSON, colorized unless ``no_color``."""
    text = json.dumps(data, indent=2) + "\n"
    if no_color:
        return text
    return highlight(text, JsonLexer(), _formatter_for_style(normalize_style(style)))
