"""Node datatypes for the in-memory path tree used by the tree format."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FileNode:
    """Leaf node for one matched file."""

    name: str


@dataclass
class DirectoryNode:
    """Directory node owning its children keyed by segment name.

    Children are stored unordered; rendering sorts them by name.
    """

    name: str
    children: dict[str, "TreeNode"] = field(default_factory=dict)


TreeNode = DirectoryNode | FileNode


__all__ = [
    "FileNode",
    "DirectoryNode",
    "TreeNode",
]
