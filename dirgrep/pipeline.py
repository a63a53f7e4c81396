"""Run orchestration: collect, confirm, render, dispatch.

``run_pipeline`` takes one immutable ``GrepConfig`` plus the collaborators it
needs for interaction and output, so tests can drive it without a terminal
or clipboard.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from dataclasses import dataclass

from .collector import CollectedFiles, FilterSpec, collect
from .errors import ClipboardError
from .paths import encode_content
from .prompt import LARGE_BATCH_THRESHOLD
from .render import OutputFormat, render_formats

logger = logging.getLogger(__name__)


class Sink(str, enum.Enum):
    PRINT = "print"
    COPY = "copy"


SINK_NAMES: tuple[str, ...] = tuple(sink.value for sink in Sink)


@dataclass(frozen=True)
class GrepConfig:
    """Validated settings for one run."""

    roots: tuple[str, ...]
    filter_spec: FilterSpec
    formats: tuple[OutputFormat, ...] = (OutputFormat.CONTENTS,)
    sinks: tuple[Sink, ...] = (Sink.PRINT, Sink.COPY)


@dataclass(frozen=True)
class Collaborators:
    """Side-effecting hooks used by the pipeline."""

    confirm_large_batch: Callable[[int], bool]
    write_clipboard: Callable[[bytes], None]
    report_warning: Callable[..., None]
    print_text: Callable[[str], None]


class RunStatus(enum.Enum):
    COMPLETED = "completed"
    NO_FILES = "no_files"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class PipelineResult:
    status: RunStatus
    output: str = ""
    file_count: int = 0
    delivered: tuple[Sink, ...] = ()


def needs_confirmation(file_count: int, threshold: int = LARGE_BATCH_THRESHOLD) -> bool:
    return file_count > threshold


def dispatch(output: str, sinks: tuple[Sink, ...], collaborators: Collaborators) -> tuple[Sink, ...]:
    """Send ``output`` to each sink in order; one failing sink never blocks another.

    Returns the sinks that succeeded.
    """
    delivered: list[Sink] = []
    for sink in sinks:
        if sink is Sink.PRINT:
            try:
                collaborators.print_text(output)
            except OSError as exc:
                collaborators.report_warning("failed to print output", error=str(exc))
                continue
        else:
            try:
                collaborators.write_clipboard(encode_content(output))
            except ClipboardError as exc:
                collaborators.report_warning(str(exc))
                continue
        delivered.append(sink)
    return tuple(delivered)


def run_pipeline(config: GrepConfig, collaborators: Collaborators) -> PipelineResult:
    """Collect files, confirm large batches, render formats, and dispatch.

    Collection errors propagate before anything is rendered or dispatched.
    """
    collected: CollectedFiles = collect(config.roots, config.filter_spec)
    file_count = len(collected)
    logger.debug("collected %d candidate files", file_count, extra={"context": {"roots": list(config.roots)}})
    if file_count == 0:
        return PipelineResult(RunStatus.NO_FILES)

    if needs_confirmation(file_count) and not collaborators.confirm_large_batch(file_count):
        return PipelineResult(RunStatus.CANCELLED, file_count=file_count)

    output = render_formats(config.formats, collected, config.filter_spec, collaborators.report_warning)
    if not output:
        return PipelineResult(RunStatus.NO_FILES, file_count=file_count)

    delivered = dispatch(output, config.sinks, collaborators)
    return PipelineResult(RunStatus.COMPLETED, output=output, file_count=file_count, delivered=delivered)


__all__ = [
    "Sink",
    "SINK_NAMES",
    "GrepConfig",
    "Collaborators",
    "RunStatus",
    "PipelineResult",
    "needs_confirmation",
    "dispatch",
    "run_pipeline",
]
