"""Path-segment tree model used by the tree output format.

This package contains:
- file/directory node datatypes
- insertion of relative paths into a tree
- indented, name-sorted text rendering
"""

from __future__ import annotations

from .types import DirectoryNode, FileNode, TreeNode
from .build import build_tree, insert_path, split_path
from .text import DEFAULT_INDENT, render_tree

__all__ = [
    "DirectoryNode",
    "FileNode",
    "TreeNode",
    "build_tree",
    "insert_path",
    "split_path",
    "DEFAULT_INDENT",
    "render_tree",
]
