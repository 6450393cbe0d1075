"""CLI entry and startup wiring."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .command_index import CommandIndex
from .completion import complete
from .constants import DEFAULT_PLACEHOLDER_PREFIX, DOC_SUFFIX
from .corpus_driver import run_generate
from .errors import CommandIndexError, LsfDocsError, StartupValidationError
from .hover import hover_for_word
from .logging_utils import setup_logging
from .merger import placeholder_predicate
from .path_mapping import map_path_argument, resolve_generate_paths
from .presenters import render_completion_rows, render_error, render_run_summary


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    app_root_abs = Path(__file__).resolve().parent
    base_dir = Path.cwd()

    try:
        if args.command == "generate":
            return _run_generate(args, app_root_abs=app_root_abs, base_dir=base_dir)
        index = _open_index(args, app_root_abs=app_root_abs, base_dir=base_dir)
        if args.command == "show":
            return _run_show(index, args.name)
        return _run_complete(index, args.prefix)
    except LsfDocsError as exc:
        print(render_error(str(exc)), file=sys.stderr)
        return 1


def _run_generate(args: argparse.Namespace, *, app_root_abs: Path, base_dir: Path) -> int:
    suffix = args.suffix if args.suffix.startswith(".") else f".{args.suffix}"
    if suffix == ".":
        raise StartupValidationError("--suffix must not be empty.")

    resolved_paths = resolve_generate_paths(
        baseline_arg_raw=args.baseline,
        docs_arg_raw=args.docs,
        output_arg_raw=args.output,
        log_arg_raw=args.log,
        app_root_abs=app_root_abs,
        base_dir=base_dir,
    )
    setup_logging(resolved_paths.log_file_abs, verbose=args.verbose)

    summary = run_generate(
        resolved_paths,
        suffix=suffix,
        is_placeholder=placeholder_predicate(args.placeholder_prefix),
    )
    for line in render_run_summary(summary):
        print(line)
    return 0


def _open_index(
    args: argparse.Namespace, *, app_root_abs: Path, base_dir: Path
) -> CommandIndex:
    setup_logging(verbose=args.verbose)
    data_path = map_path_argument(
        args.data, "--data", app_root_abs=app_root_abs, base_dir=base_dir
    )
    baseline_path = (
        map_path_argument(
            args.baseline, "--baseline", app_root_abs=app_root_abs, base_dir=base_dir
        )
        if args.baseline is not None
        else None
    )
    index = CommandIndex(data_path, baseline_path)
    if not index.load():
        raise CommandIndexError(f"No command data could be loaded from {data_path}")
    return index


def _run_show(index: CommandIndex, name: str) -> int:
    text = hover_for_word(index, name)
    if text is None:
        print(render_error(f"Unknown command: {name}"), file=sys.stderr)
        return 1
    print(text)
    return 0


def _run_complete(index: CommandIndex, prefix: str) -> int:
    for row in render_completion_rows(complete(index, prefix, prefix)):
        print(row)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lsfdocs",
        description="Build and query Lumerical script command documentation.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser(
        "generate",
        help="Merge documentation pages into the baseline command data.",
    )
    generate.add_argument(
        "--baseline",
        required=True,
        help="Baseline commands JSON (absolute, relative, or mapped with ~ / @).",
    )
    generate.add_argument(
        "--docs",
        required=True,
        help="Directory of per-command documentation pages.",
    )
    generate.add_argument(
        "--output",
        required=True,
        help="Path of the enhanced commands JSON to write.",
    )
    generate.add_argument(
        "--suffix",
        default=DOC_SUFFIX,
        help=f"Documentation file extension (default: {DOC_SUFFIX}).",
    )
    generate.add_argument(
        "--placeholder-prefix",
        default=DEFAULT_PLACEHOLDER_PREFIX,
        help=(
            "Prefix of generated default descriptions, as in '<prefix>: <name>' "
            f"(default: {DEFAULT_PLACEHOLDER_PREFIX!r})."
        ),
    )
    generate.add_argument("--log", help="Optional structured log file.")
    generate.add_argument(
        "--verbose", action="store_true", help="Print progress events to stderr."
    )

    show = subparsers.add_parser("show", help="Print hover text for one command.")
    show.add_argument("name")
    _add_index_arguments(show)

    completion = subparsers.add_parser(
        "complete", help="List commands whose names start with a prefix."
    )
    completion.add_argument("prefix", nargs="?", default="")
    _add_index_arguments(completion)

    return parser


def _add_index_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--data",
        required=True,
        help="Enhanced commands JSON produced by 'generate'.",
    )
    parser.add_argument(
        "--baseline",
        help="Baseline commands JSON used when --data is missing or unreadable.",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Print load events to stderr."
    )
