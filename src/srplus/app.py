"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from srplus.adapters.raidres import RaidresFetcher
from srplus.domain.validation import RECENT_WINDOW, validate

if TYPE_CHECKING:
    from collections.abc import Sequence

    from srplus.domain.model import Period, ValidationReport
    from srplus.domain.ports.fetching import PeriodFetcher


log = getLogger(__name__)


class EmptyPeriodError(RuntimeError):
    """Raised when the period to validate has no participants at all."""

    def __init__(self, period_id: str) -> None:
        super().__init__(f"No reservations found for raid {period_id}")
        self.period_id = period_id


def audit_periods(
    periods: Sequence[Period],
    *,
    recent_window: int = RECENT_WINDOW,
) -> ValidationReport:
    """Validate the first of ``periods`` against the rest (newest first)."""

    if not periods:
        raise ValueError("At least one period is required")
    current, *history = periods
    if current.is_empty:
        raise EmptyPeriodError(current.period_id)

    log.info("Found %s players in current raid %s", len(current.participants), current.period_id)
    for index, period in enumerate(history, start=1):
        log.info("Previous week %s (%s): %s players", index, period.period_id, len(period.participants))

    return validate(current, history, recent_window=recent_window)


def audit_rolling(
    periods: Sequence[Period],
    *,
    recent_window: int = RECENT_WINDOW,
) -> list[ValidationReport]:
    """Validate every period against the periods that follow it.

    The newest period must have participants; older empty periods are skipped
    as they have nothing to validate.
    """

    if periods and periods[0].is_empty:
        raise EmptyPeriodError(periods[0].period_id)

    reports: list[ValidationReport] = []
    for index, period in enumerate(periods):
        if period.is_empty:
            log.warning("Skipping raid %s: no reservations", period.period_id)
            continue
        reports.append(validate(period, periods[index + 1 :], recent_window=recent_window))
    return reports


def fetch_periods(
    event_ids: Sequence[str],
    *,
    fetcher: PeriodFetcher | None = None,
) -> list[Period]:
    effective_fetcher = fetcher or RaidresFetcher()
    log.info("Fetching %s raid(s): %s", len(event_ids), ", ".join(event_ids))
    return effective_fetcher(event_ids)


def audit_event(
    current_id: str,
    previous_ids: Sequence[str] = (),
    *,
    fetcher: PeriodFetcher | None = None,
    recent_window: int = RECENT_WINDOW,
) -> ValidationReport:
    """Fetch ``current_id`` and its history and validate the current raid."""

    periods = fetch_periods([current_id, *previous_ids], fetcher=fetcher)
    return audit_periods(periods, recent_window=recent_window)


def audit_event_history(
    event_ids: Sequence[str],
    *,
    fetcher: PeriodFetcher | None = None,
    recent_window: int = RECENT_WINDOW,
) -> list[ValidationReport]:
    """Fetch ``event_ids`` (newest first) and validate each one against its successors."""

    periods = fetch_periods(event_ids, fetcher=fetcher)
    return audit_rolling(periods, recent_window=recent_window)
