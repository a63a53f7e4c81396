"""Clipboard writes through the platform's clipboard command."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys

from .errors import ClipboardError

logger = logging.getLogger(__name__)


def clipboard_commands() -> list[list[str]]:
    """Return candidate clipboard commands for the current platform, in order."""
    if sys.platform == "darwin":
        return [["pbcopy"]]
    if os.name == "nt":
        return [["clip"]]
    return [
        ["wl-copy"],
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    ]


def write_clipboard(data: bytes) -> None:
    """Pipe ``data`` into the first clipboard command that accepts it.

    Raises ``ClipboardError`` when no candidate command is installed or every
    installed one fails.
    """
    failures: list[str] = []
    for command in clipboard_commands():
        if shutil.which(command[0]) is None:
            continue
        try:
            proc = subprocess.run(
                command,
                input=data,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
                check=False,
            )
        except OSError as exc:
            failures.append(f"{command[0]}: {exc}")
            continue
        if proc.returncode == 0:
            logger.debug("copied %d bytes with %s", len(data), command[0])
            return
        detail = proc.stderr.decode("utf-8", errors="replace").strip() if proc.stderr else ""
        failures.append(f"{command[0]}: exit status {proc.returncode}" + (f" ({detail})" if detail else ""))

    if not failures:
        names = ", ".join(command[0] for command in clipboard_commands())
        raise ClipboardError(f"failed to copy to clipboard: no clipboard command found (tried {names})")
    raise ClipboardError("failed to copy to clipboard: " + "; ".join(failures))


__all__ = [
    "clipboard_commands",
    "write_clipboard",
]
