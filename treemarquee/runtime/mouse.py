"""Pointer routing for the tree pane and the selected-items pane.

Pressing on empty tree-pane space starts a marquee; pressing on a node label
starts a node drag, which only produces drag-over indicators. Every
left-button release ends whichever gesture is active, wherever it happens.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..input import parse_mouse_key
from ..selection import DragIndicatorTracker, SelectionEngine
from ..state import AppState

logger = logging.getLogger(__name__)

WHEEL_SCROLL_ROWS = 3


@dataclass
class NodeDragState:
    """Node drag in progress: the dragged node and the node under the pointer."""

    source_id: str | None = None
    hovered_id: str | None = None

    @property
    def active(self) -> bool:
        return self.source_id is not None

    def reset(self) -> None:
        self.source_id = None
        self.hovered_id = None


class PointerRouter:
    """Translate mouse tokens into selection-engine and drag-indicator calls."""

    def __init__(
        self,
        state: AppState,
        engine: SelectionEngine,
        indicators: DragIndicatorTracker,
    ) -> None:
        self._state = state
        self._engine = engine
        self._indicators = indicators
        self.node_drag = NodeDragState()

    def handle(self, key: str) -> bool:
        """Handle one mouse token; return ``False`` for non-mouse keys."""
        parsed = parse_mouse_key(key)
        if parsed is None:
            return key == "MOUSE"
        kind, col, row = parsed
        if kind == "MOUSE_LEFT_DOWN":
            self._press(col, row)
        elif kind == "MOUSE_LEFT_DRAG":
            self._move(col, row)
        elif kind == "MOUSE_LEFT_UP":
            self._release()
        elif kind in {"MOUSE_WHEEL_UP", "MOUSE_WHEEL_DOWN"}:
            self._wheel(col, row, -1 if kind == "MOUSE_WHEEL_UP" else 1)
        return True

    def _press(self, col: int, row: int) -> None:
        state = self._state
        if self._engine.is_dragging() or self.node_drag.active:
            # The release for the previous gesture never arrived.
            logger.debug("recovering from a missed pointer release")
            self._release()

        geometry = state.geometry()
        if geometry.is_clear_button(col, row):
            self._engine.clear_selection()
            state.panel_start = 0
            state.dirty = True
            return
        if not geometry.in_tree_pane(col, row):
            return

        point = geometry.pointer_to_canvas(col, row)
        hit = state.layout.row_at(point.x, point.y)
        if hit is not None:
            self.node_drag.source_id = hit.node_id
            return
        self._engine.begin_drag(point)
        state.dirty = True

    def _move(self, col: int, row: int) -> None:
        state = self._state
        geometry = state.geometry()
        point = geometry.pointer_to_canvas(col, row)
        if self._engine.is_dragging():
            self._engine.update_drag(point)
            state.dirty = True
            return
        if not self.node_drag.active:
            return

        target = state.layout.row_for_line(point.y) if geometry.in_tree_pane(col, row) else None
        target_id = target.node_id if target is not None else None
        hovered = self.node_drag.hovered_id
        if hovered is not None and hovered != target_id:
            self._indicators.drag_leave(hovered)
        self.node_drag.hovered_id = target_id
        if target is not None:
            self._indicators.drag_over(target.node_id, point.y, target.box)
        state.dirty = True

    def _release(self) -> None:
        state = self._state
        if self._engine.is_dragging():
            self._engine.end_drag()
            state.panel_start = 0
            state.dirty = True
        if self.node_drag.active:
            if self.node_drag.hovered_id is not None:
                self._indicators.drop(self.node_drag.hovered_id)
            self.node_drag.reset()
            state.dirty = True

    def _wheel(self, col: int, row: int, direction: int) -> None:
        state = self._state
        geometry = state.geometry()
        if geometry.in_panel(col, row):
            previous = state.panel_start
            last = max(0, len(self._engine.committed_selection) - 1)
            state.panel_start = max(0, min(state.panel_start + direction * WHEEL_SCROLL_ROWS, last))
            if state.panel_start != previous:
                state.dirty = True
            return
        if state.scroll_tree(direction * WHEEL_SCROLL_ROWS):
            state.dirty = True
