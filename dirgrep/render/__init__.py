"""Renderers turning collected files into text sections.

Each format re-applies the substring filter with the evidence it has:
paths for ``tree`` and ``list``, paths or file contents for ``contents``.
"""

from __future__ import annotations

from .contents import format_contents_block, read_entry_text, render_contents_section
from .formats import FORMAT_NAMES, OutputFormat, render_formats, render_section
from .listing import render_list_section
from .text import SECTION_SEPARATOR, join_sections, normalize_section
from .tree import render_tree_section, root_header

__all__ = [
    "FORMAT_NAMES",
    "OutputFormat",
    "SECTION_SEPARATOR",
    "format_contents_block",
    "join_sections",
    "normalize_section",
    "read_entry_text",
    "render_contents_section",
    "render_formats",
    "render_list_section",
    "render_section",
    "render_tree_section",
    "root_header",
]
