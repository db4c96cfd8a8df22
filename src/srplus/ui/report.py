"""Plain-text rendering of validation reports."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from srplus.domain.model import OutcomeStatus

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from srplus.domain.model import ValidationOutcome, ValidationReport

RULE_WIDTH: Final[int] = 80
NAME_WIDTH: Final[int] = 18
ITEM_WIDTH: Final[int] = 30
SR_WIDTH: Final[int] = 5
EXPECTED_WIDTH: Final[int] = 8
STATUS_WIDTH: Final[int] = 16
COLUMN_SEPARATOR: Final[str] = " | "

_STATUS_ORDER: Final[dict[OutcomeStatus, int]] = {
    OutcomeStatus.ERROR: 0,
    OutcomeStatus.WARNING: 1,
    OutcomeStatus.OK: 2,
}


def truncate(value: str, max_len: int) -> str:
    if len(value) <= max_len:
        return value
    return value[: max_len - 3] + "..."


def sort_outcomes(outcomes: Iterable[ValidationOutcome]) -> list[ValidationOutcome]:
    """Errors first, then warnings, then OK; alphabetical within each group."""

    return sorted(
        outcomes,
        key=lambda outcome: (_STATUS_ORDER[outcome.status], outcome.participant_name.casefold()),
    )


def format_status(outcome: ValidationOutcome) -> str:
    if outcome.status is OutcomeStatus.OK:
        return f"OK ({outcome.reason})" if outcome.reason else "OK"
    if outcome.status is OutcomeStatus.WARNING:
        return f"WARN: {outcome.reason or 'check needed'}"
    return f"ERROR: {outcome.reason or 'mismatch'}"


def _summary_parts(report: ValidationReport) -> list[str]:
    parts: list[str] = []
    if report.warning_count > 0:
        parts.append(f"{report.warning_count} warnings")
    if report.error_count > 0:
        parts.append(f"{report.error_count} errors")
    return parts


def format_report(report: ValidationReport) -> str:
    header = COLUMN_SEPARATOR.join(
        [
            "Player Name".ljust(NAME_WIDTH),
            "Item".ljust(ITEM_WIDTH),
            "SR+".rjust(SR_WIDTH),
            "Expected".rjust(EXPECTED_WIDTH),
            "Status".ljust(STATUS_WIDTH),
        ]
    )
    lines = [
        "",
        f"SR+ Validation Report - Raid {report.period_id}",
        "=" * RULE_WIDTH,
        "",
        header,
        "-" * len(header),
    ]

    for outcome in sort_outcomes(report.outcomes):
        lines.append(
            COLUMN_SEPARATOR.join(
                [
                    truncate(outcome.participant_name, NAME_WIDTH).ljust(NAME_WIDTH),
                    truncate(outcome.item_name, ITEM_WIDTH).ljust(ITEM_WIDTH),
                    str(outcome.actual_counter).rjust(SR_WIDTH),
                    str(outcome.expected_counter).rjust(EXPECTED_WIDTH),
                    format_status(outcome),
                ]
            )
        )

    summary = [f"{report.ok_count}/{report.total_participants} OK", *_summary_parts(report)]
    lines.extend(["", "-" * RULE_WIDTH, f"Summary: {', '.join(summary)}", ""])
    return "\n".join(lines)


def format_summary(reports: Sequence[ValidationReport]) -> str:
    """Summarise several reports, one line each plus a grand total."""

    lines = ["", "=" * RULE_WIDTH, "OVERALL SUMMARY", "=" * RULE_WIDTH, ""]

    for report in reports:
        status = ", ".join(_summary_parts(report)) or "OK"
        lines.append(f"  Raid {report.period_id}: {report.total_participants} players, {status}")

    total_players = sum(report.total_participants for report in reports)
    total_warnings = sum(report.warning_count for report in reports)
    total_errors = sum(report.error_count for report in reports)
    lines.extend(
        [
            "",
            f"Total: {total_players} players, {total_warnings} warnings, {total_errors} errors",
            "",
        ]
    )
    return "\n".join(lines)
