"""Indented text rendering for path trees."""

from __future__ import annotations

from .types import DirectoryNode

DEFAULT_INDENT = "  "


def render_tree(tree: DirectoryNode, indent_unit: str = DEFAULT_INDENT, level: int = 0) -> str:
    """Render the children of ``tree`` one per line, sorted by name.

    Directories are suffixed with ``/`` and their children are indented by one
    more ``indent_unit``. The returned text has no trailing newline.
    """
    return "\n".join(_render_lines(tree, indent_unit, level))


def _render_lines(tree: DirectoryNode, indent_unit: str, level: int) -> list[str]:
    lines: list[str] = []
    prefix = indent_unit * level
    for name in sorted(tree.children):
        child = tree.children[name]
        if isinstance(child, DirectoryNode):
            lines.append(f"{prefix}{name}/")
            lines.extend(_render_lines(child, indent_unit, level + 1))
        else:
            lines.append(f"{prefix}{name}")
    return lines


__all__ = [
    "DEFAULT_INDENT",
    "render_tree",
]
