"""Path and content matching helpers.

Extension matching compares the final dot-suffix case-insensitively.
Substring matching is case-insensitive against both path and content.
"""

from __future__ import annotations

import os
from pathlib import Path

from .errors import HomeResolutionError


def _home_directory() -> str:
    try:
        home = str(Path.home())
    except (KeyError, RuntimeError) as exc:
        raise HomeResolutionError(f"failed to get user's home directory: {exc}") from exc
    if not home or home == "~":
        raise HomeResolutionError("failed to get user's home directory")
    return home


def expand_home(path: str) -> str:
    """Replace a leading ``~`` with the user's home directory.

    Only the bare ``~`` and ``~/...`` forms are expanded; other paths pass
    through unchanged. Raises ``HomeResolutionError`` when the home directory
    is unknown.
    """
    if path != "~" and not path.startswith("~" + os.sep) and not path.startswith("~/"):
        return path
    return _home_directory() + path[1:]


def contract_home(path: str) -> str:
    """Replace the home directory prefix of ``path`` with ``~``."""
    home = _home_directory()
    if path == home:
        return "~"
    if path.startswith(home.rstrip(os.sep) + os.sep):
        return "~" + path[len(home.rstrip(os.sep)):]
    return path


def normalize_extension(ext: str) -> str:
    """Return ``ext`` lowercased without its leading dot."""
    return ext.lstrip(".").lower()


def file_extension(filename: str) -> str:
    """Return the normalized final dot-suffix of ``filename`` or ``""``."""
    name = os.path.basename(filename)
    _stem, dot, suffix = name.rpartition(".")
    if not dot:
        return ""
    return suffix.lower()


def extension_matches(filename: str, extensions: frozenset[str] | set[str]) -> bool:
    """Return whether ``filename`` carries one of ``extensions``.

    An empty extension set matches every name; a name without an extension
    matches only the empty set.
    """
    if not extensions:
        return True
    ext = file_extension(filename)
    if not ext:
        return False
    return any(normalize_extension(candidate) == ext for candidate in extensions)


def substring_matches(substrings: tuple[str, ...] | list[str], path: str, content: str | None = None) -> bool:
    """Return whether any substring occurs in ``path`` or ``content``.

    Both comparisons ignore case. ``content=None`` restricts the test to the
    path, which is what the tree and list formats use.
    """
    if not substrings:
        return True
    lowered_path = path.lower()
    lowered_content = content.lower() if content is not None else ""
    for sub in substrings:
        needle = sub.lower()
        if needle in lowered_path:
            return True
        if content is not None and needle in lowered_content:
            return True
    return False


CONTENT_ENCODING = "utf-8"
CONTENT_ERRORS = "surrogateescape"


def decode_content(data: bytes) -> str:
    """Decode file bytes as UTF-8, carrying invalid bytes as lone surrogates.

    ``encode_content`` restores the original bytes exactly.
    """
    return data.decode(CONTENT_ENCODING, errors=CONTENT_ERRORS)


def encode_content(text: str) -> bytes:
    return text.encode(CONTENT_ENCODING, errors=CONTENT_ERRORS)


__all__ = [
    "expand_home",
    "contract_home",
    "normalize_extension",
    "file_extension",
    "extension_matches",
    "substring_matches",
    "decode_content",
    "encode_content",
]
