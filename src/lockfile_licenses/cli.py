"""Command-line entrypoint.

Usage:
  lockfile-licenses MANAGER PATH [OUTPUT] [--format json|jsonl]
                    [--summary FILE] [--config FILE]

MANAGER is one of npm, yarn, pnpm, ios, android or all. OUTPUT defaults to
``dependencies-licenses.json`` and is resolved against PATH.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import structlog

from .core import scan_managers
from .logging import setup_logging
from .managers import ALL_MANAGERS, ManagerKind, expand_managers, normalize_path
from .report import REPORT_FORMATS, aggregate, collect_records, write_report
from .settings import ConfigError, load_settings
from .summary import render_summary
from .validators.report_schema import ReportValidationError, validate_report

logger = structlog.get_logger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_UNSUPPORTED = 3


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lockfile-licenses",
        description="Report license metadata for the dependencies in a project's lockfile.",
    )
    parser.add_argument(
        "manager",
        type=str.lower,
        choices=[kind.value for kind in ManagerKind] + [ALL_MANAGERS],
        help="Package manager whose lockfile should be scanned",
    )
    parser.add_argument("path", type=Path, help="Project root directory")
    parser.add_argument(
        "output",
        type=Path,
        nargs="?",
        default=None,
        help="Report file, relative to the project root (default: dependencies-licenses.json)",
    )
    parser.add_argument("--format", dest="fmt", choices=REPORT_FORMATS, default="json")
    parser.add_argument("--summary", type=Path, default=None, help="Write a Markdown summary here")
    parser.add_argument("--config", type=Path, default=None, help="JSON settings file")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        settings = load_settings(args.config)
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_ERROR

    setup_logging(settings.log_level, settings.log_format)

    root = normalize_path(args.path)
    if not root.is_dir():
        logger.error("project_root_missing", root=str(root))
        return EXIT_ERROR

    output = normalize_path(root / (args.output or settings.output_name))
    managers = expand_managers(args.manager)

    results = scan_managers(root, managers, max_workers=settings.max_workers)

    try:
        validate_report(aggregate(collect_records(results)))
    except ReportValidationError as exc:
        logger.error("report_invalid", errors=str(exc))
        return EXIT_ERROR

    report = write_report(output, results, fmt=args.fmt)
    logger.info("report_written", output=str(output), packages=len(report), format=args.fmt)

    if args.summary is not None:
        summary_path = normalize_path(args.summary)
        summary_path.parent.mkdir(parents=True, exist_ok=True)
        summary_path.write_text(render_summary(results), encoding="utf-8")

    if args.manager != ALL_MANAGERS and any(result.unsupported for result in results):
        return EXIT_UNSUPPORTED
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
