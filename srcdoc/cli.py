"""CLI entrypoint for srcdoc."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from .config import ConfigError, SrcDocConfig, load_config
from .emitters import IndexEmitter
from .logging import configure_logging
from .orchestrator import Orchestrator, OutputPathError
from .scanner import ScanError

EXIT_USAGE = 1
EXIT_SCAN_ERROR = 2


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="srcdoc",
        description=(
            "Extract markdown from javadoc style comments and create *markdown* files from it."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Where to place the generated files (defaults to src-doc/).",
    )
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .srcdoc.yml or the directory containing it.",
    )
    parser.add_argument(
        "--allow-bang",
        action="store_true",
        default=None,
        help="Also extract /*! ... */ comments.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Scan inputs and list the files that would be written.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="Source files to scan, in processing order.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for srcdoc."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        parser.exit(EXIT_USAGE, f"{exc}\n")

    configure_logging(verbose=bool(args.verbose), log_file=config.log_file)
    orchestrator = _build_orchestrator(config, allow_bang=args.allow_bang)
    output_dir = args.output_dir or config.output_dir

    try:
        result = orchestrator.run(args.files, output_dir, dry_run=bool(args.dry_run))
    except ScanError as exc:
        parser.exit(EXIT_SCAN_ERROR, f"srcdoc: fatal: {exc}\n")
    except (ConfigError, OutputPathError, OSError) as exc:
        parser.exit(EXIT_USAGE, f"srcdoc failed: {exc}\nRun with --verbose for more details.\n")

    if result.dry_run:
        print("Files that would be written (dry-run):")
        for path in result.paths:
            print(f"  {path}")
    else:
        print(f"Wrote {len(result.paths)} files to {result.output_dir}")


def _build_orchestrator(config: SrcDocConfig, *, allow_bang: bool | None) -> Orchestrator:
    index_emitter = IndexEmitter(config.index.template, title=config.index.title)
    return Orchestrator(
        allow_bang=config.scanner.allow_bang if allow_bang is None else allow_bang,
        index_emitter=index_emitter,
        index_filename=config.index.filename,
    )


if __name__ == "__main__":
    main(sys.argv[1:])
