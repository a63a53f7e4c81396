"""Output format names and dispatch to the section renderers."""

from __future__ import annotations

import enum
from collections.abc import Sequence

from ..collector import CollectedFiles, FilterSpec
from .contents import WarningReporter, render_contents_section
from .listing import render_list_section
from .text import join_sections
from .tree import render_tree_section


class OutputFormat(str, enum.Enum):
    TREE = "tree"
    LIST = "list"
    CONTENTS = "contents"


FORMAT_NAMES: tuple[str, ...] = tuple(fmt.value for fmt in OutputFormat)


def render_section(
    fmt: OutputFormat,
    collected: CollectedFiles,
    filter_spec: FilterSpec,
    report_warning: WarningReporter,
) -> str:
    """Render one format's section; the text is already normalized."""
    if fmt is OutputFormat.TREE:
        return render_tree_section(collected, filter_spec)
    if fmt is OutputFormat.LIST:
        return render_list_section(collected, filter_spec)
    return render_contents_section(collected, filter_spec, report_warning)


def render_formats(
    formats: Sequence[OutputFormat],
    collected: CollectedFiles,
    filter_spec: FilterSpec,
    report_warning: WarningReporter,
) -> str:
    """Render ``formats`` in the given order and join their sections."""
    return join_sections(render_section(fmt, collected, filter_spec, report_warning) for fmt in formats)


__all__ = [
    "OutputFormat",
    "FORMAT_NAMES",
    "render_section",
    "render_formats",
]
