"""Whitespace normalization shared by every output section."""

from __future__ import annotations

import re
from collections.abc import Iterable

THREE_OR_MORE_NEWLINES_RE = re.compile(r"\n{3,}")
SECTION_SEPARATOR = "\n\n"


def normalize_section(text: str) -> str:
    """Collapse runs of three or more newlines to two, then trim the ends."""
    return THREE_OR_MORE_NEWLINES_RE.sub("\n\n", text).strip()


def join_sections(sections: Iterable[str]) -> str:
    """Join non-empty sections with exactly one blank line between them."""
    return SECTION_SEPARATOR.join(section for section in sections if section)


__all__ = [
    "THREE_OR_MORE_NEWLINES_RE",
    "SECTION_SEPARATOR",
    "normalize_section",
    "join_sections",
]
