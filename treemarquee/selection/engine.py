"""Marquee selection engine.

The engine owns the two marquee anchors and both selection sets. Every anchor
change pulls a fresh snapshot from the layout provider and recomputes the
transient set from scratch; pointer release turns that set into the committed
selection, replacing whatever was committed before.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from ..geometry import Point, Rect
from ..layout import LayoutProvider, NodeBox

logger = logging.getLogger(__name__)


@dataclass
class SelectionState:
    """Mutable selection snapshot owned by ``SelectionEngine``.

    Views may read it; only the engine writes it.
    """

    anchor_start: Point | None = None
    anchor_end: Point | None = None
    transient_selection: frozenset[str] = field(default_factory=frozenset)
    committed_selection: frozenset[str] = field(default_factory=frozenset)


def intersecting_ids(rect: Rect, snapshot: Iterable[NodeBox]) -> frozenset[str]:
    """Return ids of every box strictly overlapping ``rect``."""
    return frozenset(entry.node_id for entry in snapshot if rect.intersects(entry.box))


class SelectionEngine:
    """Rubber-band selection over a layout provider's node boxes."""

    def __init__(self, layout: LayoutProvider) -> None:
        self._layout = layout
        self._state = SelectionState()

    @property
    def state(self) -> SelectionState:
        return self._state

    def is_dragging(self) -> bool:
        return self._state.anchor_start is not None

    def marquee_rect(self) -> Rect | None:
        """Return the current page-space marquee, or ``None`` when idle."""
        state = self._state
        if state.anchor_start is None or state.anchor_end is None:
            return None
        return Rect.from_points(state.anchor_start, state.anchor_end)

    def marquee_rect_in(self, origin: Point) -> Rect | None:
        """Return the marquee translated into a container whose page origin is ``origin``."""
        rect = self.marquee_rect()
        if rect is None:
            return None
        return rect.translated(-origin.x, -origin.y)

    def begin_drag(self, point: Point) -> None:
        self._state.anchor_start = point
        self._state.anchor_end = point
        logger.debug("marquee drag started at (%s, %s)", point.x, point.y)
        self._recompute()

    def update_drag(self, point: Point) -> None:
        """Move the free anchor to ``point``; ignored when no drag is active."""
        if self._state.anchor_start is None:
            logger.debug("update_drag ignored: no drag in progress")
            return
        self._state.anchor_end = point
        self._recompute()

    def end_drag(self) -> None:
        """Commit the transient set and return to idle; ignored when idle."""
        state = self._state
        if state.anchor_start is None:
            logger.debug("end_drag ignored: no drag in progress")
            return
        state.committed_selection = state.transient_selection
        state.anchor_start = None
        state.anchor_end = None
        state.transient_selection = frozenset()
        logger.debug("marquee drag committed %d node(s)", len(state.committed_selection))

    def clear_selection(self) -> None:
        self._state.committed_selection = frozenset()
        logger.debug("selection cleared")

    def is_selected(self, node_id: str) -> bool:
        return node_id in self._state.committed_selection

    def is_in_transient_selection(self, node_id: str) -> bool:
        return node_id in self._state.transient_selection

    @property
    def committed_selection(self) -> frozenset[str]:
        return self._state.committed_selection

    @property
    def transient_selection(self) -> frozenset[str]:
        return self._state.transient_selection

    def _recompute(self) -> None:
        rect = self.marquee_rect()
        if rect is None:
            self._state.transient_selection = frozenset()
            return
        # Snapshots are point-in-time; never reuse one across anchor changes.
        self._state.transient_selection = intersecting_ids(rect, self._layout.snapshot())
