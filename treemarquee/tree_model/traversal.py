"""Depth-first traversal helpers over immutable tree nodes.

Every helper walks children in display order and returns fresh generators, so
callers can re-traverse as often as they like.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .types import Group, TreeNode


def iter_nodes_with_depth(root: TreeNode, depth: int = 0) -> Iterator[tuple[TreeNode, int]]:
    """Yield ``(node, depth)`` pairs in pre-order, starting with ``root``."""
    stack: list[tuple[TreeNode, int]] = [(root, depth)]
    while stack:
        node, node_depth = stack.pop()
        yield node, node_depth
        if isinstance(node, Group):
            for child in reversed(node.children):
                stack.append((child, node_depth + 1))


def iter_nodes(root: TreeNode) -> Iterator[TreeNode]:
    """Yield every node in pre-order."""
    for node, _depth in iter_nodes_with_depth(root):
        yield node


def node_ids(root: TreeNode) -> Iterator[str]:
    for node in iter_nodes(root):
        yield node.id


def count_nodes(root: TreeNode) -> int:
    return sum(1 for _ in iter_nodes(root))


def find_node(root: TreeNode, node_id: str) -> TreeNode | None:
    """Return the first node with ``node_id`` or ``None``."""
    for node in iter_nodes(root):
        if node.id == node_id:
            return node
    return None


def order_ids(root: TreeNode, ids: Iterable[str]) -> list[str]:
    """Return ``ids`` sorted by tree pre-order; unknown ids are dropped."""
    wanted = set(ids)
    if not wanted:
        return []
    return [node_id for node_id in node_ids(root) if node_id in wanted]
