"""Tree construction from JSON-shaped data, files, and the built-in sample."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path

from .tree import Tree
from .types import Group, InvalidTreeDataError, Item, TreeNode

logger = logging.getLogger(__name__)

NODE_TYPES = ("group", "item")


def node_from_data(data: object, path: str = "$") -> TreeNode:
    """Convert one JSON-decoded mapping into a node, recursing into children.

    ``type`` may be omitted, in which case a node with a ``children`` key is a
    group. ``path`` is a JSON-path-like location used in error messages.
    """
    if not isinstance(data, Mapping):
        raise InvalidTreeDataError(f"{path}: expected an object, got {type(data).__name__}")

    node_id = data.get("id")
    if isinstance(node_id, int) and not isinstance(node_id, bool):
        node_id = str(node_id)
    if not isinstance(node_id, str) or not node_id:
        raise InvalidTreeDataError(f"{path}.id: expected a non-empty string")

    name = data.get("name", node_id)
    if not isinstance(name, str):
        raise InvalidTreeDataError(f"{path}.name: expected a string")

    node_type = data.get("type")
    if node_type is None:
        node_type = "group" if "children" in data else "item"
    if node_type not in NODE_TYPES:
        raise InvalidTreeDataError(f"{path}.type: expected one of {', '.join(NODE_TYPES)}")

    if node_type == "item":
        if data.get("children"):
            raise InvalidTreeDataError(f"{path}.children: items cannot have children")
        return Item(id=node_id, name=name)

    raw_children = data.get("children", [])
    if not isinstance(raw_children, list):
        raise InvalidTreeDataError(f"{path}.children: expected a list")
    children = tuple(
        node_from_data(child, f"{path}.children[{idx}]") for idx, child in enumerate(raw_children)
    )
    return Group(id=node_id, name=name, children=children)


def node_to_data(node: TreeNode) -> dict[str, object]:
    """Serialize ``node`` into the same JSON shape ``node_from_data`` accepts."""
    if isinstance(node, Group):
        return {
            "type": "group",
            "id": node.id,
            "name": node.name,
            "children": [node_to_data(child) for child in node.children],
        }
    return {"type": "item", "id": node.id, "name": node.name}


def tree_from_data(data: object) -> Tree:
    return Tree(node_from_data(data))


def load_tree(path: Path) -> Tree:
    """Read and validate a JSON tree file.

    Raises ``OSError`` when the file cannot be read and ``InvalidTreeDataError``
    for malformed JSON or node data. Duplicate ids raise
    ``DuplicateNodeIdError``.
    """
    text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidTreeDataError(f"{path}: invalid JSON ({exc.msg} at line {exc.lineno})") from exc
    tree = tree_from_data(data)
    logger.info("loaded tree from %s (%d nodes)", path, len(tree))
    return tree


def _sample_group(group_id: str, item_ids: tuple[str, str], children: tuple[TreeNode, ...] = ()) -> Group:
    items = tuple(Item(id=item_id, name=f"Item {item_id}") for item_id in item_ids)
    return Group(id=group_id, name=f"Group {group_id}", children=items + children)


def sample_tree() -> Tree:
    """Return the demo tree shown when no tree file is given."""
    root = Group(
        id="1",
        name="Group 1",
        children=(
            Item(id="111", name="Item 111"),
            Item(id="211", name="Item 211"),
            _sample_group("2", ("3", "4"), (_sample_group("5", ("7", "8")),)),
            _sample_group("9", ("10", "11"), (_sample_group("12", ("13", "14")),)),
            _sample_group("15", ("16", "17"), (_sample_group("18", ("19", "20")),)),
        ),
    )
    return Tree(root)
