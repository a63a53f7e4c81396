"""``list`` format: sorted matching paths, one per line."""

from __future__ import annotations

from ..collector import CollectedFiles, FilterSpec
from ..paths import substring_matches
from .text import normalize_section


def render_list_section(collected: CollectedFiles, filter_spec: FilterSpec) -> str:
    """Return every path-matching entry across all roots, sorted."""
    paths = sorted(entry.path for entry in collected if substring_matches(filter_spec.substrings, entry.path))
    return normalize_section("\n".join(paths))


__all__ = ["render_list_section"]
