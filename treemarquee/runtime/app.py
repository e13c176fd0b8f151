"""Interactive application wiring.

Builds the layout, selection engine, drag indicators, and pointer router
around one ``AppState`` and hands them to the main loop.
"""

from __future__ import annotations

import logging
import shutil
import sys
from functools import partial

from ..layout import TreeLayout, clamp_tree_width, compute_tree_width
from ..render import RenderContext, render_frame
from ..selection import DragIndicatorTracker, SelectionEngine, node_flags
from ..state import AppState
from ..terminal import TerminalController
from ..tree_model import Tree
from ..ui_theme import UITheme
from . import config
from .keys import handle_key
from .loop import RuntimeLoopCallbacks, run_main_loop
from .mouse import PointerRouter

logger = logging.getLogger(__name__)


class SelectionApp:
    """Own the session objects that live while the view is mounted."""

    def __init__(
        self,
        tree: Tree,
        theme: UITheme,
        *,
        width: int,
        height: int,
        row_height: int,
        indent_width: int,
        tree_width: int | None = None,
    ) -> None:
        self.theme = theme
        self.layout = TreeLayout(tree, row_height=row_height, indent_width=indent_width)
        if tree_width is None:
            tree_width = compute_tree_width(width)
        self.state = AppState(
            tree=tree,
            layout=self.layout,
            width=width,
            height=height,
            tree_width=clamp_tree_width(width, tree_width),
        )
        self.engine = SelectionEngine(self.layout)
        self.indicators = DragIndicatorTracker()
        self.router = PointerRouter(self.state, self.engine, self.indicators)

    def status_text(self) -> str:
        engine = self.engine
        if engine.is_dragging():
            return f" selecting: {len(engine.transient_selection)} in marquee"
        drag = self.router.node_drag
        if drag.active:
            indicator = self.indicators.current
            if indicator is None:
                return f" dragging {drag.source_id}"
            return f" dragging {drag.source_id}: {indicator.position} {indicator.node_id}"
        return f" {len(self.state.tree)} nodes │ {len(engine.committed_selection)} selected"

    def build_render_context(self) -> RenderContext:
        state = self.state
        geometry = state.geometry()
        return RenderContext(
            tree=state.tree,
            # Fresh placements every frame, same as every engine snapshot.
            rows=self.layout.rows(),
            flags_for=partial(node_flags, engine=self.engine, indicators=self.indicators),
            geometry=geometry,
            row_height=self.layout.row_height,
            theme=self.theme,
            selected_ids=state.tree.ordered(self.engine.committed_selection),
            marquee=self.engine.marquee_rect_in(geometry.tree_origin()),
            panel_start=state.panel_start,
            show_help=state.show_help,
            status_text=self.status_text(),
        )

    def handle_key(self, key: str) -> bool:
        return handle_key(key, self.state, self.engine, config.save_tree_pane_percent)


def initial_tree_width(total_width: int) -> int | None:
    percent = config.load_tree_pane_percent()
    if percent is None:
        return None
    return max(1, int(round(total_width * percent / 100.0)))


def run_app(
    tree: Tree,
    theme: UITheme,
    *,
    row_height: int,
    indent_width: int,
) -> None:
    """Run the interactive selection UI on the controlling terminal."""
    term = shutil.get_terminal_size((80, 24))
    app = SelectionApp(
        tree,
        theme,
        width=term.columns,
        height=term.lines,
        row_height=row_height,
        indent_width=indent_width,
        tree_width=initial_tree_width(term.columns),
    )
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    callbacks = RuntimeLoopCallbacks(
        build_render_context=app.build_render_context,
        render_frame=render_frame,
        handle_mouse=app.router.handle,
        handle_key=app.handle_key,
        get_terminal_size=lambda: shutil.get_terminal_size((80, 24)),
    )
    logger.info("starting UI with %d nodes", len(tree))
    with terminal.raw_mode():
        run_main_loop(app.state, stdin_fd, callbacks)
