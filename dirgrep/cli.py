"""Command-line front door for dirgrep.

Parses flags, merges persisted defaults, and validates everything into one
``GrepConfig``. Then runs the pipeline with terminal/clipboard collaborators
and maps errors to exit statuses.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from collections.abc import Iterable, Sequence

from . import config as user_config
from .clipboard import write_clipboard
from .collector import UNBOUNDED_DEPTH, FilterSpec
from .errors import ConfigurationError, DirgrepError, HomeResolutionError
from .logutils import LOGGER_NAME, configure, report_warning
from .paths import contract_home, encode_content, expand_home
from .pipeline import SINK_NAMES, Collaborators, GrepConfig, RunStatus, Sink, run_pipeline
from .prompt import confirm_large_batch
from .render import FORMAT_NAMES, OutputFormat

logger = logging.getLogger(LOGGER_NAME)

ACTION_BOTH = "both"
DEFAULT_DIRS: tuple[str, ...] = (".",)
DEFAULT_FORMATS: tuple[str, ...] = (OutputFormat.CONTENTS.value,)
DEFAULT_ACTIONS: tuple[str, ...] = (ACTION_BOTH,)

_BOLD_GREEN = "\033[1;92m"
_BOLD_WHITE = "\033[1;97m"
_BLUE = "\033[34m"
_CYAN = "\033[96m"
_FAINT = "\033[2m"
_RESET = "\033[0m"


def _paint(text: str, code: str, color: bool) -> str:
    return f"{code}{text}{_RESET}" if color else text


def _color_enabled(stream) -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _depth_int(value: str) -> int:
    """argparse type for ``-1`` or a non-negative depth."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < UNBOUNDED_DEPTH:
        raise argparse.ArgumentTypeError("depth must be -1 (unbounded) or >= 0")
    return parsed


def split_values(values: Iterable[str] | None) -> tuple[str, ...] | None:
    """Flatten repeated, comma-separated flag values; ``None`` when unset."""
    if values is None:
        return None
    return tuple(part.strip() for value in values for part in value.split(",") if part.strip())


def _tilde_cwd() -> str:
    cwd = os.getcwd()
    try:
        return contract_home(cwd)
    except HomeResolutionError:
        return cwd


def help_text(color: bool = False) -> str:
    """Return the usage message shown for ``--help`` or a bare invocation."""
    rows = [
        ("--dir", "Directories to search (comma-separated)", 'default ["."]'),
        ("--ext", "File extensions to include, e.g. .go (comma-separated)", "default []"),
        ("--substring", "Substrings to filter by (comma-separated)", "default []"),
        ("--depth", "Maximum directory depth (-1 for unbounded)", "default -1"),
        ("--format", "Output formats: tree, list, contents", 'default ["contents"]'),
        ("--action", "Actions: print, copy, or both", 'default "both"'),
        ("--yes", "Skip the large-batch confirmation", ""),
        ("--json-logs", "Write logs as JSON lines", ""),
        ("--save-defaults", "Store the given flags as future defaults", ""),
    ]
    examples = [
        ("dirgrep --dir=.", "Print and copy every file in the current directory"),
        ('dirgrep --substring="store" --action=print', 'Print files containing "store"'),
        ('dirgrep --dir="app" --ext=".js" --action=copy', "Copy .js files in app/ to clipboard"),
        ('dirgrep --ext=".md" --format=tree,contents', "Tree of .md files followed by their contents"),
        ("dirgrep --depth=0 --format=list", "List files directly in the current directory"),
    ]
    flag_width = max(len(flag) for flag, _desc, _default in rows)
    desc_width = max(len(desc) for _flag, desc, _default in rows)
    example_width = max(len(example) for example, _desc in examples)

    lines = [
        f"{_paint('dirgrep', _BOLD_GREEN, color)} greps files in specified directories "
        f"{_paint('(' + _tilde_cwd() + ')', _FAINT, color)}",
        "",
        _paint("Usage: dirgrep [flags]", _BOLD_WHITE, color),
        "",
        _paint("Flags:", _BOLD_WHITE, color),
    ]
    for flag, desc, default in rows:
        line = f"  {_paint(flag.ljust(flag_width), _CYAN, color)}  {desc.ljust(desc_width)}"
        if default:
            line += f"  {_paint(default, _FAINT, color)}"
        lines.append(line.rstrip())
    lines.extend(["", _paint("Examples:", _BOLD_WHITE, color)])
    for example, desc in examples:
        lines.append(f"  {_paint(example.ljust(example_width), _BLUE, color)}  {_paint(desc, _FAINT, color)}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirgrep",
        description="Collect files by extension and substring, then print or copy them.",
        add_help=False,
    )
    parser.add_argument("-h", "--help", action="store_true", help="Show this message and exit.")
    parser.add_argument("--dir", action="append", dest="dirs", metavar="DIRS", help="Directories to search.")
    parser.add_argument("--ext", action="append", dest="exts", metavar="EXTS", help="File extensions to include.")
    parser.add_argument(
        "--substring",
        action="append",
        dest="substrings",
        metavar="SUBSTRINGS",
        help="Substrings to filter files by.",
    )
    parser.add_argument("--depth", type=_depth_int, default=None, help="Maximum depth, -1 for unbounded.")
    parser.add_argument(
        "--format",
        action="append",
        dest="formats",
        metavar="FORMATS",
        help=f"Output formats ({', '.join(FORMAT_NAMES)}).",
    )
    parser.add_argument(
        "--action",
        action="append",
        dest="actions",
        metavar="ACTIONS",
        help=f"Actions to perform ({', '.join(SINK_NAMES)}, {ACTION_BOTH}).",
    )
    parser.add_argument("--yes", action="store_true", help="Do not ask before processing many files.")
    parser.add_argument("--json-logs", action="store_true", default=None, help="Write logs as JSON.")
    parser.add_argument("--save-defaults", action="store_true", help="Persist the given flags as defaults.")
    return parser


def resolve_roots(dirs: Sequence[str]) -> tuple[str, ...]:
    """Tilde-expand ``dirs`` and report every one that is not a directory."""
    roots = tuple(expand_home(value) for value in dirs)
    invalid = [value for value in roots if not os.path.isdir(value)]
    if invalid:
        raise ConfigurationError("one or more directories do not exist: " + ", ".join(invalid))
    return roots


def validate_extensions(exts: Sequence[str]) -> tuple[str, ...]:
    """Require ``.suffix`` values; only a file's final suffix is ever compared."""
    invalid = [ext for ext in exts if not ext.startswith(".") or ext == "."]
    if invalid:
        raise ConfigurationError("one or more extensions must start with a period: " + ", ".join(invalid))
    compound = [ext for ext in exts if ext.count(".") > 1]
    if compound:
        raise ConfigurationError("extensions must be a single suffix: " + ", ".join(compound))
    return tuple(exts)


def parse_formats(names: Sequence[str]) -> tuple[OutputFormat, ...]:
    invalid = [name for name in names if name not in FORMAT_NAMES]
    if invalid:
        raise ConfigurationError(f"format must be {', '.join(FORMAT_NAMES)}: " + ", ".join(invalid))
    if not names:
        raise ConfigurationError("at least one format is required")
    return tuple(dict.fromkeys(OutputFormat(name) for name in names))


def parse_actions(names: Sequence[str]) -> tuple[Sink, ...]:
    """Map action names to sinks in order; ``both`` means print then copy."""
    invalid = [name for name in names if name != ACTION_BOTH and name not in SINK_NAMES]
    if invalid:
        raise ConfigurationError("action must be print, copy, or both: " + ", ".join(invalid))
    if not names:
        raise ConfigurationError("at least one action is required")
    sinks: list[Sink] = []
    for name in names:
        sinks.extend([Sink.PRINT, Sink.COPY] if name == ACTION_BOTH else [Sink(name)])
    return tuple(dict.fromkeys(sinks))


def validate_depth(depth: int) -> int:
    if depth < UNBOUNDED_DEPTH:
        raise ConfigurationError(f"depth must be -1 (unbounded) or >= 0: {depth}")
    return depth


def build_config(args: argparse.Namespace, defaults: user_config.UserDefaults) -> GrepConfig:
    """Merge flags over persisted defaults and validate the result."""

    def pick(flag_value: tuple[str, ...] | None, default_value: tuple[str, ...] | None, fallback: tuple[str, ...]):
        if flag_value is not None:
            return flag_value
        if default_value is not None:
            return default_value
        return fallback

    dirs = pick(split_values(args.dirs), defaults.dirs, DEFAULT_DIRS)
    exts = pick(split_values(args.exts), defaults.exts, ())
    substrings = pick(split_values(args.substrings), defaults.substrings, ())
    formats = pick(split_values(args.formats), defaults.formats, DEFAULT_FORMATS)
    actions = pick(split_values(args.actions), defaults.actions, DEFAULT_ACTIONS)
    depth = args.depth if args.depth is not None else defaults.depth
    depth = validate_depth(UNBOUNDED_DEPTH if depth is None else depth)

    filter_spec = FilterSpec.create(
        extensions=validate_extensions(exts),
        substrings=substrings,
        max_depth=depth,
    )
    return GrepConfig(
        roots=resolve_roots(dirs),
        filter_spec=filter_spec,
        formats=parse_formats(formats),
        sinks=parse_actions(actions),
    )


def _flags_to_save(args: argparse.Namespace) -> dict[str, object]:
    values: dict[str, object] = {}
    for key in ("dirs", "exts", "substrings", "formats", "actions"):
        flattened = split_values(getattr(args, key))
        if flattened is not None:
            values[key] = list(flattened)
    if args.depth is not None:
        values["depth"] = args.depth
    if args.json_logs is not None:
        values["log_json"] = bool(args.json_logs)
    return values


def _print_text(text: str) -> None:
    """Write ``text`` to stdout, restoring raw file bytes where the stream allows it."""
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is None:
        sys.stdout.write(text + "\n")
        sys.stdout.flush()
        return
    sys.stdout.flush()
    buffer.write(encode_content(text + "\n"))
    buffer.flush()


def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI arguments, run the pipeline, and exit non-zero on fatal errors.

    A bare invocation prints the help message, as ``--help`` does.
    """
    started = time.monotonic()
    arguments = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()
    args = parser.parse_args(arguments)

    if not arguments or args.help:
        sys.stdout.write(help_text(color=_color_enabled(sys.stdout)) + "\n")
        return

    defaults = user_config.load_defaults()
    log_json = args.json_logs if args.json_logs is not None else bool(defaults.log_json)
    configure(json_enabled=log_json)

    try:
        grep_config = build_config(args, defaults)
    except ConfigurationError as exc:
        parser.error(str(exc))
    except HomeResolutionError as exc:
        logger.error(str(exc))
        raise SystemExit(1) from exc

    if args.save_defaults:
        user_config.save_defaults(_flags_to_save(args))

    collaborators = Collaborators(
        confirm_large_batch=(lambda _count: True) if args.yes else confirm_large_batch,
        write_clipboard=write_clipboard,
        report_warning=report_warning,
        print_text=_print_text,
    )
    try:
        result = run_pipeline(grep_config, collaborators)
    except DirgrepError as exc:
        logger.error(str(exc))
        raise SystemExit(1) from exc

    if result.status is RunStatus.NO_FILES:
        sys.stderr.write("No files found.\n")
    elif result.status is RunStatus.CANCELLED:
        sys.stderr.write("Operation cancelled.\n")
    elif Sink.COPY in result.delivered:
        elapsed_ms = round((time.monotonic() - started) * 1000)
        color = _color_enabled(sys.stderr)
        sys.stderr.write(
            f"{_paint('Copied to clipboard!', _BOLD_GREEN, color)} {_paint(f'({elapsed_ms}ms)', _FAINT, color)}\n"
        )


if __name__ == "__main__":
    main()
