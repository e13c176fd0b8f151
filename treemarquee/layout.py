"""Page-space layout of tree nodes for the terminal tree pane.

Each node occupies ``row_height`` canvas rows; its box spans its label
(marker plus name) starting at its indentation column. Canvas coordinates
are scroll independent: row 0 is the first node no matter how far the pane
is scrolled.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from .ansi import display_width
from .geometry import Rect
from .tree_model import Group, Tree, TreeNode

GROUP_MARKER = "▾ "
ITEM_MARKER = "· "
DEFAULT_ROW_HEIGHT = 2
DEFAULT_INDENT_WIDTH = 2


@dataclass(frozen=True)
class NodeBox:
    """One rendered node's id and page-space bounding box."""

    node_id: str
    box: Rect


class LayoutProvider(Protocol):
    def snapshot(self) -> Sequence[NodeBox]:
        """Return boxes for every currently rendered node."""
        ...


@dataclass(frozen=True)
class LayoutRow:
    """Placement of one node on the canvas."""

    node: TreeNode
    depth: int
    index: int
    label: str
    box: Rect

    @property
    def node_id(self) -> str:
        return self.node.id


def node_label(node: TreeNode) -> str:
    marker = GROUP_MARKER if isinstance(node, Group) else ITEM_MARKER
    return f"{marker}{node.name}"


class TreeLayout:
    """Lay a tree out on the canvas and answer geometry queries about it."""

    def __init__(
        self,
        tree: Tree,
        row_height: int = DEFAULT_ROW_HEIGHT,
        indent_width: int = DEFAULT_INDENT_WIDTH,
    ) -> None:
        self.tree = tree
        self.row_height = max(1, row_height)
        self.indent_width = max(1, indent_width)

    def rows(self) -> list[LayoutRow]:
        """Compute placements in display order."""
        out: list[LayoutRow] = []
        for index, (node, depth) in enumerate(self.tree.walk()):
            label = node_label(node)
            left = depth * self.indent_width
            top = index * self.row_height
            box = Rect(
                left=left,
                top=top,
                right=left + max(1, display_width(label)),
                bottom=top + self.row_height,
            )
            out.append(LayoutRow(node=node, depth=depth, index=index, label=label, box=box))
        return out

    def snapshot(self) -> list[NodeBox]:
        return [NodeBox(row.node_id, row.box) for row in self.rows()]

    def canvas_height(self) -> int:
        return len(self.tree) * self.row_height

    def row_at(self, x: float, y: float) -> LayoutRow | None:
        """Return the node whose box contains the canvas point, if any.

        Boxes are half-open: ``left <= x < right`` and ``top <= y < bottom``.
        """
        if y < 0:
            return None
        index = int(y // self.row_height)
        rows = self.rows()
        if index >= len(rows):
            return None
        row = rows[index]
        if row.box.left <= x < row.box.right:
            return row
        return None

    def row_for_line(self, y: float) -> LayoutRow | None:
        """Return the node occupying canvas line ``y`` regardless of column."""
        if y < 0:
            return None
        index = int(y // self.row_height)
        rows = self.rows()
        if index >= len(rows):
            return None
        return rows[index]


def compute_tree_width(total_width: int) -> int:
    """Choose default tree-pane width from total terminal width."""
    if total_width <= 60:
        return max(16, total_width // 2)
    return max(24, min(60, (total_width * 3) // 5))


def clamp_tree_width(total_width: int, desired: int) -> int:
    """Clamp requested tree-pane width so the selected-items pane stays visible."""
    max_possible = max(1, total_width - 2)
    min_left = max(12, min(20, total_width - 12))
    max_left = max(min_left, total_width - 12)
    max_left = min(max_left, max_possible)
    min_left = min(min_left, max_left)
    return max(min_left, min(desired, max_left))
