"""Terminal screen geometry for the two-pane layout.

Translates 1-based terminal ``(col, row)`` pointer positions into canvas
points and back. A pointer always lands on the centre of its cell, so a
marquee spanning two cells covers both of them and a pointer on the lower
half of a two-row node classifies as below.
"""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import Point

TREE_GUTTER_WIDTH = 2
DIVIDER_WIDTH = 1
CLEAR_BUTTON_LABEL = "[clear]"
CLEAR_BUTTON_ROW = 2


@dataclass(frozen=True)
class ScreenGeometry:
    """Pane geometry for one frame."""

    width: int
    height: int
    tree_width: int
    tree_scroll: int = 0

    @property
    def content_rows(self) -> int:
        """Rows available to panes (everything except the status row)."""
        return max(1, self.height - 1)

    @property
    def panel_col(self) -> int:
        """First terminal column of the selected-items pane."""
        return self.tree_width + DIVIDER_WIDTH + 1

    @property
    def panel_width(self) -> int:
        return max(1, self.width - self.tree_width - DIVIDER_WIDTH)

    def in_tree_pane(self, col: int, row: int) -> bool:
        return 1 <= col <= self.tree_width and 1 <= row <= self.content_rows

    def in_panel(self, col: int, row: int) -> bool:
        return self.panel_col <= col <= self.width and 1 <= row <= self.content_rows

    def pointer_to_canvas(self, col: int, row: int) -> Point:
        """Map a terminal cell to the canvas point at its centre."""
        return Point(
            x=col - 1 - TREE_GUTTER_WIDTH + 0.5,
            y=row - 1 + self.tree_scroll + 0.5,
        )

    def tree_origin(self) -> Point:
        """Canvas point shown at the tree pane's local origin."""
        return Point(0, self.tree_scroll)

    def is_clear_button(self, col: int, row: int) -> bool:
        if row != CLEAR_BUTTON_ROW:
            return False
        start = self.panel_col + 1
        return start <= col < start + len(CLEAR_BUTTON_LABEL)
