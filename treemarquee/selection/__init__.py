"""Marquee selection engine, drag-over resolver, and derived node flags."""

from __future__ import annotations

from .drag_position import ABOVE, BELOW, DragIndicator, DragIndicatorTracker, DragPosition, classify
from .engine import SelectionEngine, SelectionState, intersecting_ids
from .flags import NO_FLAGS, NodeFlags, node_flags

__all__ = [
    "SelectionEngine",
    "SelectionState",
    "intersecting_ids",
    "DragPosition",
    "ABOVE",
    "BELOW",
    "classify",
    "DragIndicator",
    "DragIndicatorTracker",
    "NodeFlags",
    "NO_FLAGS",
    "node_flags",
]
