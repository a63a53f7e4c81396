"""Interactive y/N confirmation before rendering a large batch of files."""

from __future__ import annotations

import sys
from typing import TextIO

LARGE_BATCH_THRESHOLD = 50

_BOLD_RED = "\033[1;31m"
_RESET = "\033[0m"


def confirm_large_batch(count: int, stdin: TextIO | None = None, stderr: TextIO | None = None) -> bool:
    """Ask on stderr whether to go on with ``count`` files; only ``y``/``Y`` accepts.

    End of input counts as a refusal.
    """
    source = stdin if stdin is not None else sys.stdin
    target = stderr if stderr is not None else sys.stderr
    message = f"WARNING: Processing {count} files. Proceed? [y/N] "
    if target.isatty():
        message = f"{_BOLD_RED}{message}{_RESET}"
    target.write(message)
    target.flush()
    response = source.readline()
    return response.strip().lower() == "y"


__all__ = [
    "LARGE_BATCH_THRESHOLD",
    "confirm_large_batch",
]
