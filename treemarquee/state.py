from __future__ import annotations

from dataclasses import dataclass

from .layout import TreeLayout
from .screen import ScreenGeometry
from .tree_model import Tree


@dataclass
class AppState:
    tree: Tree
    layout: TreeLayout
    width: int
    height: int
    tree_width: int
    tree_scroll: int = 0
    panel_start: int = 0
    show_help: bool = False
    dirty: bool = True
    quit_requested: bool = False

    def geometry(self) -> ScreenGeometry:
        return ScreenGeometry(
            width=self.width,
            height=self.height,
            tree_width=self.tree_width,
            tree_scroll=self.tree_scroll,
        )

    def max_tree_scroll(self) -> int:
        return max(0, self.layout.canvas_height() - self.geometry().content_rows)

    def scroll_tree(self, delta: int) -> bool:
        """Scroll the tree pane by ``delta`` rows; return whether it moved."""
        previous = self.tree_scroll
        self.tree_scroll = max(0, min(self.tree_scroll + delta, self.max_tree_scroll()))
        return self.tree_scroll != previous
