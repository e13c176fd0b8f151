"""Main interactive event loop for the terminal UI.

Each iteration tracks terminal resizes, renders when state is dirty, and
dispatches exactly one input token. All selection work happens
synchronously inside that dispatch.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass

from ..input import read_key
from ..layout import clamp_tree_width
from ..render import RenderContext
from ..state import AppState

IDLE_POLL_MS = 250


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``."""

    build_render_context: Callable[[], RenderContext]
    render_frame: Callable[[RenderContext], None]
    handle_mouse: Callable[[str], bool]
    handle_key: Callable[[str], bool]
    get_terminal_size: Callable[[], os.terminal_size]
    read_key: Callable[[int, int | None], str] = read_key


def run_main_loop(state: AppState, stdin_fd: int, callbacks: RuntimeLoopCallbacks) -> None:
    """Run until a quit key is handled."""
    ops = callbacks
    while not state.quit_requested:
        term = ops.get_terminal_size()
        if (term.columns, term.lines) != (state.width, state.height):
            state.width = term.columns
            state.height = term.lines
            state.tree_width = clamp_tree_width(state.width, state.tree_width)
            state.scroll_tree(0)
            state.dirty = True

        if state.dirty:
            ops.render_frame(ops.build_render_context())
            state.dirty = False

        key = ops.read_key(stdin_fd, IDLE_POLL_MS)
        if not key:
            continue
        if ops.handle_mouse(key):
            continue
        ops.handle_key(key)
