"""Pure per-node visual flags derived from selection and drag state."""

from __future__ import annotations

from dataclasses import dataclass

from .drag_position import DragIndicatorTracker, DragPosition
from .engine import SelectionEngine


@dataclass(frozen=True)
class NodeFlags:
    """What the renderer should show for one node.

    ``selected`` is the committed selection, or the live marquee hit set while
    a marquee drag is active, so the whole tree re-syncs on every redraw.
    """

    selected: bool = False
    in_marquee: bool = False
    drag_indicator: DragPosition | None = None


NO_FLAGS = NodeFlags()


def node_flags(
    node_id: str,
    engine: SelectionEngine,
    indicators: DragIndicatorTracker | None = None,
) -> NodeFlags:
    dragging = engine.is_dragging()
    in_marquee = dragging and engine.is_in_transient_selection(node_id)
    selected = in_marquee if dragging else engine.is_selected(node_id)
    indicator = indicators.position_for(node_id) if indicators is not None else None
    if not (selected or in_marquee or indicator):
        return NO_FLAGS
    return NodeFlags(selected=selected, in_marquee=in_marquee, drag_indicator=indicator)
