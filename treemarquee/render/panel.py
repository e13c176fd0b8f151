"""Selected-items pane: committed selection listed in tree order."""

from __future__ import annotations

from collections.abc import Sequence

from ..ansi import fit_ansi_line
from ..screen import CLEAR_BUTTON_LABEL, CLEAR_BUTTON_ROW
from ..tree_model import Tree
from ..ui_theme import UITheme

PANEL_TITLE = "Selected Items"


def render_selected_panel(
    tree: Tree,
    selected_ids: Sequence[str],
    *,
    width: int,
    height: int,
    theme: UITheme,
    start: int = 0,
) -> list[str]:
    """Return ``height`` lines for the right pane.

    Row 1 is the title with a count, row 2 holds the clear button, and the
    remaining rows list ``selected_ids`` (already in display order) starting
    at ``start``.
    """
    reset = theme.reset
    lines: list[str] = []
    lines.append(f" {theme.panel_heading}{PANEL_TITLE} ({len(selected_ids)}){reset}")
    while len(lines) < CLEAR_BUTTON_ROW - 1:
        lines.append("")
    lines.append(f" {theme.panel_button}{CLEAR_BUTTON_LABEL}{reset}")

    if not selected_ids:
        lines.append(f" {theme.status}drag over the tree to select{reset}")
    for node_id in selected_ids[max(0, start):]:
        node = tree.get(node_id)
        name = node.name if node is not None else ""
        lines.append(f" {theme.panel_id}{node_id}{reset} {theme.status}{name}{reset}")
        if len(lines) >= height:
            break

    lines = lines[:height]
    while len(lines) < height:
        lines.append("")
    return [fit_ansi_line(line, width, reset) for line in lines]
