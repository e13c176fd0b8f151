"""Tree node datatypes and model errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


class TreeModelError(ValueError):
    """Base class for tree construction failures."""


class DuplicateNodeIdError(TreeModelError):
    """Raised when two nodes anywhere in one tree share an id."""

    def __init__(self, node_id: str) -> None:
        super().__init__(f"duplicate node id: {node_id!r}")
        self.node_id = node_id


class InvalidTreeDataError(TreeModelError):
    """Raised when serialized tree data does not describe a valid node."""


@dataclass(frozen=True)
class Item:
    """Leaf node."""

    id: str
    name: str

    @property
    def is_group(self) -> bool:
        return False


@dataclass(frozen=True)
class Group:
    """Interior node; ``children`` keep their display order."""

    id: str
    name: str
    children: tuple[TreeNode, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    @property
    def is_group(self) -> bool:
        return True


TreeNode = Union[Item, Group]
