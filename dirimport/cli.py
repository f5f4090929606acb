"""CLI entrypoint for dirimport."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, TransformOptions, load_config
from .logging import configure_logging, get_logger
from .parser import SourceParseError
from .rewriter import RewriteOutcome, SourceRewriter


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirimport",
        description="Rewrite directory imports (./dir, ./dir/*, ./dir/**) into per-file imports.",
    )
    parser.add_argument(
        "files",
        nargs="+",
        help="JavaScript modules to transform.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a .dirimport.yml file or the directory holding it (defaults to the current directory).",
    )
    parser.add_argument(
        "--ext",
        dest="exts",
        action="append",
        default=None,
        help="File extension to aggregate; repeat to allow several (replaces the configured list).",
    )
    parser.add_argument(
        "--snake-case",
        dest="snake_case",
        action="store_true",
        default=None,
        help="Name aggregated properties in snake_case instead of camelCase.",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--write",
        action="store_true",
        help="Rewrite files in place.",
    )
    output.add_argument(
        "--out-dir",
        default=None,
        help="Write transformed copies into this directory instead of printing them.",
    )
    output.add_argument(
        "--check",
        action="store_true",
        help="Exit with status 1 when any file contains a directory import to rewrite.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        dest="verbosity",
        action="count",
        default=0,
        help="Log skipped imports and scan details (repeatable).",
    )
    verbosity.add_argument(
        "-q",
        "--quiet",
        dest="verbosity",
        action="store_const",
        const=-1,
        help="Only log errors.",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write log records to this file.",
    )
    return parser


def _load_options(args: argparse.Namespace) -> TransformOptions:
    config_path = Path(args.config) if args.config else Path.cwd()
    options = load_config(config_path)
    return options.with_overrides(exts=args.exts, snake_case=args.snake_case)


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for dirimport."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbosity, args.log_file)
    logger = get_logger("cli")

    try:
        options = _load_options(args)
    except ConfigError as exc:
        parser.exit(1, f"dirimport: {exc}\n")

    rewriter = SourceRewriter(options)
    pending: list[str] = []
    for raw_path in args.files:
        path = Path(raw_path)
        try:
            outcome = rewriter.rewrite_file(path)
        except SourceParseError as exc:
            parser.exit(1, f"dirimport: {exc}\n")
        except (OSError, UnicodeDecodeError) as exc:
            parser.exit(1, f"dirimport: {raw_path}: {exc}\nRun with --verbose for more details.\n")

        if outcome.changed:
            logger.info("%s: rewrote %d directory import(s)", raw_path, outcome.rewritten)
            pending.append(raw_path)

        if args.check:
            continue
        if args.write:
            if outcome.changed:
                path.write_text(outcome.code, encoding="utf-8")
        elif args.out_dir:
            _write_copy(Path(args.out_dir), path, outcome)
        else:
            sys.stdout.write(outcome.code)

    if args.check and pending:
        parser.exit(1, "Directory imports found in: " + ", ".join(pending) + "\n")


def _write_copy(out_dir: Path, path: Path, outcome: RewriteOutcome) -> None:
    target = out_dir / path.name
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(outcome.code, encoding="utf-8")


if __name__ == "__main__":
    main(sys.argv[1:])
