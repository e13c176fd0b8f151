"""Help overlay content and rendering."""

from __future__ import annotations

from ..ansi import fit_ansi_line
from ..ui_theme import UITheme

HELP_ENTRIES: tuple[tuple[str, str], ...] = (
    ("drag on empty space", "marquee select"),
    ("drag a node", "show drop position"),
    ("c / [clear]", "clear selection"),
    ("j/k, wheel", "scroll tree"),
    ("Shift+Left/Right", "resize tree pane"),
    ("?", "toggle help"),
    ("q", "quit"),
)


def help_lines(theme: UITheme) -> list[str]:
    key_width = max(len(key) for key, _ in HELP_ENTRIES)
    lines = [f"{theme.help_heading}KEYS{theme.reset}"]
    for key, description in HELP_ENTRIES:
        lines.append(f"{theme.help_key}{key.ljust(key_width)}{theme.reset}  {theme.help_dim}{description}{theme.reset}")
    return lines


def overlay_help(lines: list[str], width: int, theme: UITheme) -> list[str]:
    """Replace the bottom rows of ``lines`` with the help block."""
    block = help_lines(theme)
    if len(block) >= len(lines):
        block = block[: max(0, len(lines))]
    out = list(lines)
    first = len(out) - len(block)
    for offset, text in enumerate(block):
        out[first + offset] = fit_ansi_line(text, width, theme.reset)
    return out
