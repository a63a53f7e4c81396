"""``tree`` format: one indented tree per root."""

from __future__ import annotations

from ..collector import CollectedFiles, FilterSpec
from ..file_tree_model import DEFAULT_INDENT, build_tree, render_tree
from ..paths import substring_matches
from .text import normalize_section


def root_header(root: str) -> str:
    """Return the header line for ``root``, always ending in ``/``."""
    return root if root.endswith("/") else f"{root}/"


def render_tree_section(collected: CollectedFiles, filter_spec: FilterSpec) -> str:
    """Render matching entries as a per-root tree.

    Substrings are tested against paths only. Roots left without a matching
    entry are omitted.
    """
    blocks: list[str] = []
    for root, entries in collected.by_root().items():
        relative_paths = [
            entry.relative_path
            for entry in entries
            if substring_matches(filter_spec.substrings, entry.path)
        ]
        if not relative_paths:
            continue
        tree = build_tree(relative_paths, name=root)
        body = render_tree(tree, indent_unit=DEFAULT_INDENT, level=1)
        blocks.append(f"{root_header(root)}\n{body}")
    return normalize_section("\n".join(blocks))


__all__ = [
    "root_header",
    "render_tree_section",
]
