"""Tests for the tree, list, and contents output formats."""

from __future__ import annotations

import contextlib
import os
import tempfile
import unittest
from collections.abc import Iterator
from pathlib import Path
from unittest import mock

from dirgrep.collector import CollectedFiles, FileEntry, FilterSpec, collect
from dirgrep.render import (
    OutputFormat,
    join_sections,
    normalize_section,
    render_contents_section,
    render_formats,
    render_list_section,
    render_tree_section,
    root_header,
)


def _write(root: Path, relative: str, text: str = "x\n") -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@contextlib.contextmanager
def _working_directory(root: Path) -> Iterator[None]:
    previous_cwd = Path.cwd()
    try:
        os.chdir(root)
        yield
    finally:
        os.chdir(previous_cwd)


def _collect_in(root: Path, filter_spec: FilterSpec) -> CollectedFiles:
    with _working_directory(root):
        return collect(["."], filter_spec)


class SectionTextTests(unittest.TestCase):
    def test_normalize_section_collapses_newline_runs_and_trims(self) -> None:
        self.assertEqual(normalize_section("\n\n a\n\n\n\nb\n\n\nc \n\n"), "a\n\nb\n\nc")
        self.assertEqual(normalize_section("a\n\nb"), "a\n\nb")

    def test_join_sections_uses_one_blank_line_and_drops_empty(self) -> None:
        self.assertEqual(join_sections(["one", "", "two"]), "one\n\ntwo")
        self.assertEqual(join_sections([]), "")

    def test_root_header_always_ends_with_single_slash(self) -> None:
        self.assertEqual(root_header("."), "./")
        self.assertEqual(root_header("src"), "src/")
        self.assertEqual(root_header("/"), "/")


class ListFormatTests(unittest.TestCase):
    def test_list_is_sorted_and_filtered_by_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _write(root, "lib/storeUtils.js")
            _write(root, "app/store.js")
            _write(root, "app/view.js", "uses store internally\n")

            collected = _collect_in(root, FilterSpec.create(substrings=["store"]))
            output = render_list_section(collected, FilterSpec.create(substrings=["store"]))

            self.assertEqual(output, "app/store.js\nlib/storeUtils.js")

    def test_list_merges_roots_without_headers(self) -> None:
        entries = (
            FileEntry(path="b/z.txt", root="b", depth=0, relative_path="z.txt"),
            FileEntry(path="a/y.txt", root="a", depth=0, relative_path="y.txt"),
        )
        collected = CollectedFiles(roots=("b", "a"), entries=entries)
        self.assertEqual(render_list_section(collected, FilterSpec()), "a/y.txt\nb/z.txt")


class TreeFormatTests(unittest.TestCase):
    def test_tree_renders_root_header_and_nested_entries(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _write(root, "README.md")
            _write(root, "docs/guide.md")
            _write(root, "notes.txt")
            spec = FilterSpec.create(extensions=[".md"])

            output = render_tree_section(_collect_in(root, spec), spec)

            self.assertEqual(output, "./\n  README.md\n  docs/\n    guide.md")

    def test_tree_omits_roots_without_matches(self) -> None:
        entries = (
            FileEntry(path="one/app/store.js", root="one", depth=1, relative_path="app/store.js"),
            FileEntry(path="two/misc.js", root="two", depth=0, relative_path="misc.js"),
            FileEntry(path="three/store.py", root="three", depth=0, relative_path="store.py"),
        )
        collected = CollectedFiles(roots=("one", "two", "three"), entries=entries)

        output = render_tree_section(collected, FilterSpec.create(substrings=["store"]))

        self.assertEqual(output, "one/\n  app/\n    store.js\nthree/\n  store.py")

    def test_tree_ignores_file_contents(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _write(root, "a.txt", "store\n")
            spec = FilterSpec.create(substrings=["store"])

            self.assertEqual(render_tree_section(_collect_in(root, spec), spec), "")


class ContentsFormatTests(unittest.TestCase):
    def test_contents_matches_path_or_content(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _write(root, "a.txt", "mentions STORE here\n")
            _write(root, "b.txt", "unrelated\n")
            _write(root, "store.txt", "plain\n")
            spec = FilterSpec.create(substrings=["store"])
            warn = mock.Mock()

            with _working_directory(root):
                output = render_contents_section(collect(["."], spec), spec, warn)

            self.assertEqual(output, "# a.txt\nmentions STORE here\n\n# store.txt\nplain")
            warn.assert_not_called()

    def test_contents_collapses_blank_runs_inside_files(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _write(root, "a.txt", "\n\nfirst\n\n\n\nsecond\n\n\n")
            spec = FilterSpec()

            with _working_directory(root):
                output = render_contents_section(collect(["."], spec), spec, mock.Mock())

            self.assertEqual(output, "# a.txt\n\nfirst\n\nsecond")

    def test_unreadable_file_is_reported_and_skipped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _write(root, "a.txt", "alpha\n")
            _write(root, "b.txt", "beta\n")
            _write(root, "c.txt", "gamma\n")
            spec = FilterSpec()
            collected = _collect_in(root, spec)
            (root / "b.txt").unlink()
            warn = mock.Mock()

            with _working_directory(root):
                output = render_contents_section(collected, spec, warn)

            self.assertEqual(output, "# a.txt\nalpha\n\n# c.txt\ngamma")
            warn.assert_called_once()
            self.assertEqual(warn.call_args.kwargs["path"], "b.txt")


class RenderFormatsTests(unittest.TestCase):
    def test_sections_follow_requested_order(self) -> None:
        entries = (FileEntry(path="r/a.txt", root="r", depth=0, relative_path="a.txt"),)
        collected = CollectedFiles(roots=("r",), entries=entries)

        output = render_formats(
            [OutputFormat.LIST, OutputFormat.TREE],
            collected,
            FilterSpec(),
            mock.Mock(),
        )

        self.assertEqual(output, "r/a.txt\n\nr/\n  a.txt")


if __name__ == "__main__":
    unittest.main()
