"""Above/below classification for drag-over gestures on a single node."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from ..geometry import Rect

DragPosition = Literal["above", "below"]

ABOVE: DragPosition = "above"
BELOW: DragPosition = "below"


def classify(pointer_y: float, box: Rect) -> DragPosition:
    """Return ``"above"`` for the upper half of ``box``, else ``"below"``.

    The exact midpoint counts as below.
    """
    midpoint = box.top + (box.bottom - box.top) / 2
    if pointer_y < midpoint:
        return ABOVE
    return BELOW


@dataclass(frozen=True)
class DragIndicator:
    node_id: str
    position: DragPosition


class DragIndicatorTracker:
    """Hold the drag indicator for whichever node the pointer is dragging over.

    At most one node carries an indicator; a drag-over on a new node replaces
    the previous one. Drop clears the indicator and never touches the tree.
    """

    def __init__(self) -> None:
        self._current: DragIndicator | None = None

    @property
    def current(self) -> DragIndicator | None:
        return self._current

    def drag_over(self, node_id: str, pointer_y: float, box: Rect) -> DragPosition:
        position = classify(pointer_y, box)
        self._current = DragIndicator(node_id, position)
        return position

    def drag_leave(self, node_id: str) -> None:
        if self._current is not None and self._current.node_id == node_id:
            self._current = None

    def drop(self, node_id: str) -> None:
        # TODO: apply the reorder once group/cross-parent move semantics are decided.
        self.drag_leave(node_id)

    def position_for(self, node_id: str) -> DragPosition | None:
        if self._current is None or self._current.node_id != node_id:
            return None
        return self._current.position

    def reset(self) -> None:
        self._current = None
