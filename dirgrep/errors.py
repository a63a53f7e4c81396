"""Exception taxonomy shared by the collector, pipeline, and CLI.

Configuration and traversal problems abort a run.
Clipboard failures are reported and the run carries on.
"""

from __future__ import annotations

from pathlib import Path


class DirgrepError(Exception):
    """Base class for all errors raised by dirgrep."""


class ConfigurationError(DirgrepError):
    """Invalid flag or config value detected before any traversal."""


class HomeResolutionError(DirgrepError):
    """The user's home directory could not be determined."""


class RootNotFoundError(DirgrepError):
    """A traversal root does not exist or is not a directory."""

    def __init__(self, root: str | Path, reason: str = "directory does not exist") -> None:
        self.root = str(root)
        self.reason = reason
        super().__init__(f"{reason}: {self.root}")


class TraversalError(DirgrepError):
    """A directory below a root could not be listed."""

    def __init__(self, path: str | Path, cause: OSError) -> None:
        self.path = str(path)
        self.cause = cause
        super().__init__(f"failed to walk directory: {self.path}: {cause}")


class ClipboardError(DirgrepError):
    """No clipboard command accepted the text."""


__all__ = [
    "DirgrepError",
    "ConfigurationError",
    "HomeResolutionError",
    "RootNotFoundError",
    "TraversalError",
    "ClipboardError",
]
