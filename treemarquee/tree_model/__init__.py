"""Immutable tree model: node types, validation, traversal, and loading.

Groups hold ordered children; items are leaves. Ids are unique across the
whole tree and are checked once when a ``Tree`` is constructed.
"""

from __future__ import annotations

from .build import load_tree, node_from_data, node_to_data, sample_tree, tree_from_data
from .traversal import count_nodes, find_node, iter_nodes, iter_nodes_with_depth, node_ids, order_ids
from .tree import Tree
from .types import DuplicateNodeIdError, Group, InvalidTreeDataError, Item, TreeModelError, TreeNode

__all__ = [
    "Tree",
    "TreeNode",
    "Item",
    "Group",
    "TreeModelError",
    "DuplicateNodeIdError",
    "InvalidTreeDataError",
    "iter_nodes",
    "iter_nodes_with_depth",
    "node_ids",
    "count_nodes",
    "find_node",
    "order_ids",
    "node_from_data",
    "node_to_data",
    "tree_from_data",
    "load_tree",
    "sample_tree",
]
