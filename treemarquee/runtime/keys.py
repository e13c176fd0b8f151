"""Keyboard handling for the selection UI."""

from __future__ import annotations

from collections.abc import Callable

from ..layout import clamp_tree_width
from ..selection import SelectionEngine
from ..state import AppState

QUIT_KEYS = frozenset({"q", "Q", "CTRL_C"})
TREE_RESIZE_STEP = 2


def handle_key(
    key: str,
    state: AppState,
    engine: SelectionEngine,
    save_tree_width: Callable[[int, int], None],
) -> bool:
    """Apply one non-mouse key; return whether it was recognized."""
    if key in QUIT_KEYS:
        state.quit_requested = True
        return True
    if key == "?":
        state.show_help = not state.show_help
        state.dirty = True
        return True
    if key == "ESC":
        if state.show_help:
            state.show_help = False
            state.dirty = True
        return True
    if key in {"c", "C"}:
        engine.clear_selection()
        state.panel_start = 0
        state.dirty = True
        return True
    if key in {"j", "DOWN"}:
        if state.scroll_tree(1):
            state.dirty = True
        return True
    if key in {"k", "UP"}:
        if state.scroll_tree(-1):
            state.dirty = True
        return True
    if key in {"SHIFT_LEFT", "SHIFT_RIGHT"}:
        delta = TREE_RESIZE_STEP if key == "SHIFT_RIGHT" else -TREE_RESIZE_STEP
        previous = state.tree_width
        state.tree_width = clamp_tree_width(state.width, state.tree_width + delta)
        if state.tree_width != previous:
            save_tree_width(state.width, state.tree_width)
            state.dirty = True
        return True
    return False
