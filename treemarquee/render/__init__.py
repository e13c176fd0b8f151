"""Frame composition for the terminal UI.

``build_frame`` is pure: it turns a ``RenderContext`` into the full escape
sequence stream for one frame. ``render_frame`` writes that stream to stdout.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..ansi import fit_ansi_line
from ..geometry import Rect
from ..layout import LayoutRow
from ..screen import ScreenGeometry
from ..selection import NodeFlags
from ..tree_model import Tree
from ..ui_theme import UITheme
from .help import overlay_help
from .panel import render_selected_panel
from .tree_pane import render_tree_pane


@dataclass
class RenderContext:
    tree: Tree
    rows: Sequence[LayoutRow]
    flags_for: Callable[[str], NodeFlags]
    geometry: ScreenGeometry
    row_height: int
    theme: UITheme
    selected_ids: Sequence[str]
    marquee: Rect | None = None
    panel_start: int = 0
    show_help: bool = False
    status_text: str = ""


def build_status_line(left_text: str, width: int, right_text: str = "│ ? Help") -> str:
    usable = max(1, width - 1)
    if usable <= len(right_text):
        return right_text[-usable:]
    left_limit = max(0, usable - len(right_text) - 1)
    left = left_text[:left_limit]
    gap = " " * (usable - len(left) - len(right_text))
    return f"{left}{gap}{right_text}"


def build_frame(context: RenderContext) -> str:
    geometry = context.geometry
    theme = context.theme
    content_rows = geometry.content_rows

    tree_lines = render_tree_pane(
        context.rows,
        context.flags_for,
        width=geometry.tree_width,
        height=content_rows,
        scroll=geometry.tree_scroll,
        row_height=context.row_height,
        theme=theme,
        marquee=context.marquee,
    )
    panel_lines = render_selected_panel(
        context.tree,
        context.selected_ids,
        width=geometry.panel_width,
        height=content_rows,
        theme=theme,
        start=context.panel_start,
    )
    if context.show_help:
        panel_lines = overlay_help(panel_lines, geometry.panel_width, theme)

    out: list[str] = ["\033[H\033[J"]
    divider = f"{theme.divider}│{theme.reset}"
    for row in range(content_rows):
        out.append(fit_ansi_line(tree_lines[row], geometry.tree_width, theme.reset))
        out.append(divider)
        out.append(panel_lines[row])
        if "\033" in panel_lines[row]:
            out.append("\033[0m")
        out.append("\r\n")
    out.append(theme.reverse)
    out.append(build_status_line(context.status_text, geometry.width))
    out.append(theme.reset)
    return "".join(out)


def render_frame(context: RenderContext) -> None:
    os.write(sys.stdout.fileno(), build_frame(context).encode("utf-8", errors="replace"))


__all__ = [
    "RenderContext",
    "build_frame",
    "build_status_line",
    "render_frame",
    "render_tree_pane",
    "render_selected_panel",
]
