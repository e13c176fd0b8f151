"""Validated tree wrapper with an id index."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .traversal import iter_nodes, iter_nodes_with_depth, node_ids, order_ids
from .types import DuplicateNodeIdError, TreeNode

logger = logging.getLogger(__name__)


class Tree:
    """Read-only tree whose node ids are unique across every depth.

    Construction walks the whole tree once and raises
    ``DuplicateNodeIdError`` on the first repeated id, so downstream code can
    use ids as the only correlation key between data, layout, and selection.
    """

    def __init__(self, root: TreeNode) -> None:
        index: dict[str, TreeNode] = {}
        for node in iter_nodes(root):
            if node.id in index:
                raise DuplicateNodeIdError(node.id)
            index[node.id] = node
        self._root = root
        self._index = index
        logger.debug("tree built with %d nodes (root=%r)", len(index), root.id)

    @property
    def root(self) -> TreeNode:
        return self._root

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._index

    def __iter__(self) -> Iterator[TreeNode]:
        return iter_nodes(self._root)

    def walk(self) -> Iterator[tuple[TreeNode, int]]:
        """Yield ``(node, depth)`` in display order."""
        return iter_nodes_with_depth(self._root)

    def get(self, node_id: str) -> TreeNode | None:
        return self._index.get(node_id)

    def ids(self) -> list[str]:
        return list(node_ids(self._root))

    def ordered(self, ids: Iterable[str]) -> list[str]:
        """Return ``ids`` in display order."""
        return order_ids(self._root, ids)
