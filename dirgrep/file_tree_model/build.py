"""Construction of path trees from flat relative paths."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence

from .types import DirectoryNode, FileNode


def split_path(relative_path: str) -> list[str]:
    """Split a relative path into non-empty segments on either separator."""
    normalized = relative_path.replace(os.sep, "/")
    return [part for part in normalized.split("/") if part and part != "."]


def insert_path(tree: DirectoryNode, segments: Sequence[str], is_file: bool) -> None:
    """Insert ``segments`` below ``tree``.

    Missing intermediate segments are created as directories, and an
    intermediate segment previously seen as a file is promoted to a directory.
    The last segment becomes a file only when no directory already sits at
    that position. Inserting the same path twice changes nothing.
    """
    if not segments:
        return
    node = tree
    for segment in segments[:-1]:
        child = node.children.get(segment)
        if not isinstance(child, DirectoryNode):
            child = DirectoryNode(segment)
            node.children[segment] = child
        node = child

    last = segments[-1]
    existing = node.children.get(last)
    if isinstance(existing, DirectoryNode):
        return
    if is_file:
        if existing is None:
            node.children[last] = FileNode(last)
        return
    node.children[last] = DirectoryNode(last)


def build_tree(relative_paths: Iterable[str], name: str = "") -> DirectoryNode:
    """Build a tree whose leaves are the given relative file paths."""
    root = DirectoryNode(name)
    for relative_path in relative_paths:
        insert_path(root, split_path(relative_path), is_file=True)
    return root


__all__ = [
    "split_path",
    "insert_path",
    "build_tree",
]
