"""Command line interface.

    layercheck --project-root PATH --config PATH [--format text|json|rich]
               [--verbose] [--strict] [--fail-fast]

Exit codes:
    0  check completed (violations are reported, not used as status)
    1  violations found and --strict given
    2  usage error, fatal error, or files that could not be scanned
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from layercheck import __version__
from layercheck.application.reporters import (
    ConsoleConfig,
    ConsoleReporter,
    JSONReporter,
    PlainTextReporter,
)
from layercheck.domain.exceptions import LayerCheckError
from layercheck.infrastructure.config import load_config
from layercheck.presentation.factory import create_go_checker

if TYPE_CHECKING:
    from collections.abc import Sequence

    from layercheck.domain.model.check_result import CheckResult

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2

FORMATS = ("text", "json", "rich")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="layercheck",
        description="Check that a Go project respects its declared layering",
    )
    parser.add_argument(
        "--project-root",
        type=Path,
        required=True,
        help="Root directory of the project to analyse",
    )
    parser.add_argument(
        "--config",
        type=Path,
        required=True,
        help="Path to the YAML configuration file",
    )
    parser.add_argument(
        "--format",
        choices=FORMATS,
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Include debug diagnostics (classification and layer edges)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when violations are found",
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Abort on the first file that cannot be parsed",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(
    argv: Sequence[str] | None = None,
    *,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run the checker.

    Args:
        argv: Arguments (default: sys.argv[1:])
        stdout: Report stream (default: sys.stdout)
        stderr: Error stream (default: sys.stderr)

    Returns:
        Process exit code
    """
    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr

    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
        checker = create_go_checker(config, fail_fast=args.fail_fast)
        result = checker.check(args.project_root)
    except LayerCheckError as e:
        print(f"layercheck: error: {e}", file=err)
        return EXIT_ERROR

    _report(result, args.format, verbose=args.verbose, output=out)

    if result.has_issues:
        return EXIT_ERROR
    if args.strict and not result.passed:
        return EXIT_VIOLATIONS
    return EXIT_OK


def _report(result: CheckResult, fmt: str, *, verbose: bool, output: TextIO) -> None:
    match fmt:
        case "json":
            JSONReporter(output).report(result)
        case "rich":
            console = ConsoleReporter(ConsoleConfig(verbose=verbose, color=output.isatty()))
            output.write(console.report(result))
        case _:
            PlainTextReporter(output, verbose=verbose).report(result)
