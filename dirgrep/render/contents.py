"""``contents`` format: each matching file's text under a ``# <path>`` header.

Files are read one at a time. A file that cannot be read is reported through
the warning callback and left out; the rest of the section still renders.
"""

from __future__ import annotations

from collections.abc import Callable

from ..collector import CollectedFiles, FileEntry, FilterSpec
from ..paths import decode_content, substring_matches
from .text import normalize_section

WarningReporter = Callable[..., None]


def read_entry_text(entry: FileEntry) -> str:
    """Read ``entry`` fully and decode it, releasing the handle right away."""
    with open(entry.path, "rb") as handle:
        data = handle.read()
    return decode_content(data)


def format_contents_block(path: str, content: str) -> str:
    return f"# {path}\n{content}\n\n"


def render_contents_section(
    collected: CollectedFiles,
    filter_spec: FilterSpec,
    report_warning: WarningReporter,
) -> str:
    """Concatenate matching files, testing substrings against path or content."""
    blocks: list[str] = []
    for entry in collected:
        try:
            content = read_entry_text(entry)
        except OSError as exc:
            report_warning("failed to read file", path=entry.path, error=str(exc))
            continue
        if substring_matches(filter_spec.substrings, entry.path, content):
            blocks.append(format_contents_block(entry.path, content))
    return normalize_section("".join(blocks))


__all__ = [
    "WarningReporter",
    "read_entry_text",
    "format_contents_block",
    "render_contents_section",
]
