"""Depth-bounded directory traversal and extension filtering.

Walks each root in lexical order and records matching files grouped by root.
Substring filtering is left to the renderers since only the contents format
needs to read files.
"""

from __future__ import annotations

import enum
import logging
import os
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass

from .errors import RootNotFoundError, TraversalError
from .paths import extension_matches, normalize_extension

logger = logging.getLogger(__name__)

UNBOUNDED_DEPTH = -1


@dataclass(frozen=True)
class FilterSpec:
    """Extension, substring, and depth filters applied to one run."""

    extensions: frozenset[str] = frozenset()
    substrings: tuple[str, ...] = ()
    max_depth: int = UNBOUNDED_DEPTH

    @classmethod
    def create(
        cls,
        extensions: Iterable[str] = (),
        substrings: Iterable[str] = (),
        max_depth: int = UNBOUNDED_DEPTH,
    ) -> FilterSpec:
        """Build filters with extensions normalized to lowercase without dots."""
        normalized = frozenset(filter(None, (normalize_extension(ext) for ext in extensions)))
        return cls(extensions=normalized, substrings=tuple(substrings), max_depth=max_depth)

    @property
    def depth_bounded(self) -> bool:
        return self.max_depth != UNBOUNDED_DEPTH

    def depth_allows(self, depth: int) -> bool:
        return not self.depth_bounded or depth <= self.max_depth


@dataclass(frozen=True)
class FileEntry:
    """One matched file with the root it was found under."""

    path: str
    root: str
    depth: int
    relative_path: str


@dataclass(frozen=True)
class CollectedFiles:
    """Matched files in traversal order, roots in the order they were given."""

    roots: tuple[str, ...]
    entries: tuple[FileEntry, ...]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[FileEntry]:
        return iter(self.entries)

    def by_root(self) -> dict[str, list[FileEntry]]:
        """Group entries per root; roots without matches map to empty lists."""
        groups: dict[str, list[FileEntry]] = {root: [] for root in self.roots}
        for entry in self.entries:
            groups.setdefault(entry.root, []).append(entry)
        return groups


class WalkAction(enum.Enum):
    """Visitor verdict for one traversed entry."""

    CONTINUE = "continue"
    SKIP_SUBTREE = "skip_subtree"
    ABORT = "abort"


@dataclass(frozen=True)
class WalkItem:
    """One directory or file seen while walking a root."""

    path: str
    relative_path: str
    depth: int
    is_dir: bool


def _sorted_children(directory: str) -> list[os.DirEntry[str]]:
    try:
        with os.scandir(directory) as entries:
            children = list(entries)
    except OSError as exc:
        raise TraversalError(directory, exc) from exc
    children.sort(key=lambda child: child.name)
    return children


def walk_root(root: str, visit: Callable[[WalkItem], WalkAction]) -> bool:
    """Walk ``root`` depth-first in lexical name order, calling ``visit``.

    Directory symlinks are never descended into. Returns ``False`` when the
    visitor aborted the walk. Raises ``TraversalError`` when a directory
    cannot be listed.
    """

    def walk(directory: str, relative_dir: str) -> bool:
        for child in _sorted_children(directory):
            path = os.path.normpath(os.path.join(directory, child.name))
            relative_path = os.path.join(relative_dir, child.name) if relative_dir else child.name
            depth = relative_path.count(os.sep)
            try:
                is_dir = child.is_dir(follow_symlinks=False)
                is_dir_link = not is_dir and child.is_symlink() and child.is_dir()
            except OSError:
                is_dir, is_dir_link = False, False
            if is_dir_link:
                logger.debug("skipping directory symlink %s", path)
                continue

            action = visit(WalkItem(path=path, relative_path=relative_path, depth=depth, is_dir=is_dir))
            if action is WalkAction.ABORT:
                return False
            if is_dir and action is WalkAction.CONTINUE:
                if not walk(path, relative_path):
                    return False
        return True

    return walk(root, "")


def _check_root(root: str) -> None:
    if not os.path.exists(root):
        raise RootNotFoundError(root)
    if not os.path.isdir(root):
        raise RootNotFoundError(root, "not a directory")


def collect(roots: Sequence[str], filter_spec: FilterSpec) -> CollectedFiles:
    """Collect files under ``roots`` passing the depth and extension filters.

    Raises ``RootNotFoundError`` for a missing root and ``TraversalError`` for
    an unreadable directory; either aborts the whole collection.
    """
    entries: list[FileEntry] = []

    for root in roots:
        _check_root(root)

        def visit(item: WalkItem, root: str = root) -> WalkAction:
            if item.is_dir:
                # Children of a directory at max_depth would all be too deep.
                if filter_spec.depth_bounded and item.depth >= filter_spec.max_depth:
                    return WalkAction.SKIP_SUBTREE
                return WalkAction.CONTINUE
            if filter_spec.depth_allows(item.depth) and extension_matches(item.path, filter_spec.extensions):
                entries.append(
                    FileEntry(path=item.path, root=root, depth=item.depth, relative_path=item.relative_path)
                )
            return WalkAction.CONTINUE

        walk_root(root, visit)
        logger.debug("collected files under %s", root, extra={"context": {"total": len(entries)}})

    return CollectedFiles(roots=tuple(roots), entries=tuple(entries))


__all__ = [
    "UNBOUNDED_DEPTH",
    "FilterSpec",
    "FileEntry",
    "CollectedFiles",
    "WalkAction",
    "WalkItem",
    "walk_root",
    "collect",
]
