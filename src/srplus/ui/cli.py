# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from srplus.adapters.csv_export import CsvExportFetcher
from srplus.app import EmptyPeriodError, audit_event, audit_event_history
from srplus.config import configure_logging
from srplus.domain.validation import RECENT_WINDOW
from srplus.ui.report import format_report, format_summary

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from srplus.domain.model import ValidationReport
    from srplus.domain.ports.fetching import PeriodFetcher

log = logging.getLogger(__name__)

EXIT_REPORT_ERRORS = 3

_EPILOG = """\
The first raid id is the week to validate. Subsequent ids are previous weeks
(newest first) used for SR+ history comparison.

examples:
  srplus SNDQJT
  srplus SNDQJT 2ECMWK MKJWXC 6TEQQ7
  srplus --csv-dir exports SNDQJT 2ECMWK MKJWXC
"""


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="srplus",
        description="SR+ validation tool for raid reserves",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("current_id", help="Raid id to validate")
    parser.add_argument(
        "previous_ids",
        nargs="*",
        help="Previous raid ids for comparison, newest to oldest",
    )
    parser.add_argument(
        "--csv-dir",
        type=Path,
        help="Read <id>.csv exports from this directory instead of the raidres API",
    )
    parser.add_argument(
        "--rolling",
        action="store_true",
        help="Validate every given raid against the raids after it and print a summary",
    )
    parser.add_argument(
        "--recent-window",
        type=int,
        default=RECENT_WINDOW,
        help="Number of previous weeks that can continue an SR+ streak (default: %(default)s)",
    )
    parser.add_argument(
        "--fail-on-error",
        action="store_true",
        help=f"Exit with status {EXIT_REPORT_ERRORS} when any player fails validation",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(list(argv))


def _check_args(args: argparse.Namespace) -> None:
    if args.recent_window < 1:
        raise ValueError("--recent-window must be at least 1")
    if args.csv_dir is not None and not args.csv_dir.is_dir():
        raise ValueError(f"CSV directory not found: {args.csv_dir}")


def _build_fetcher(args: argparse.Namespace) -> PeriodFetcher | None:
    if args.csv_dir is not None:
        return CsvExportFetcher(args.csv_dir)
    return None


def _run_audit(args: argparse.Namespace) -> list[ValidationReport]:
    fetcher = _build_fetcher(args)
    event_ids = [args.current_id, *args.previous_ids]

    if args.rolling:
        reports = audit_event_history(
            event_ids,
            fetcher=fetcher,
            recent_window=args.recent_window,
        )
        if not reports:
            raise EmptyPeriodError(args.current_id)
        for report in reports:
            print(format_report(report))
        print(format_summary(reports))
        return reports

    log.info("Current raid to validate: %s", args.current_id)
    if args.previous_ids:
        log.info("Previous raids for comparison: %s", ", ".join(args.previous_ids))
    else:
        log.info("No previous raids provided - every SR+ counter is expected to be 0")

    report = audit_event(
        args.current_id,
        args.previous_ids,
        fetcher=fetcher,
        recent_window=args.recent_window,
    )
    print(format_report(report))
    return [report]


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    parsed_args: argparse.Namespace
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        _check_args(parsed_args)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    if parsed_args.verbose:
        configure_logging(verbose=True, force=True)

    try:
        reports = _run_audit(parsed_args)
    except EmptyPeriodError as exc:
        log.error("%s. Please check if the raid id is correct and the page is accessible.", exc)  # noqa: TRY400
        sys.exit(1)
    except Exception:
        log.exception("Fatal error during validation")
        sys.exit(1)

    if parsed_args.fail_on_error and any(report.error_count for report in reports):
        sys.exit(EXIT_REPORT_ERRORS)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
