"""Cross-week SR+ validation.

For every participant of the current period the validator looks up their most
recent tracked claim in the recent window of history, derives the counter they
should carry now and classifies the observed counter against it.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Final

from .claims import resolve_tracked_claim
from .model import (
    OutcomeStatus,
    ValidationOutcome,
    ValidationReport,
    normalize_key,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .model import ItemClaim, ParticipantRoster, Period

log = getLogger(__name__)

RECENT_WINDOW: Final[int] = 3
"""Number of history periods that can continue an SR+ streak."""

EXALTED_COUNTER: Final[int] = 2
"""Counter an exalted reputation bonus may force onto a fresh reservation."""

MISSING_ITEM_NAME: Final[str] = "N/A"


@dataclass(slots=True, frozen=True)
class PriorClaim:
    """A tracked claim found in history and how many periods back it was."""

    claim: ItemClaim
    week_index: int


@dataclass(slots=True, frozen=True)
class Expectation:
    expected_counter: int
    is_reset: bool
    annotation: str = ""


def find_prior_claim(
    participant_name: str,
    history: Sequence[Period],
    *,
    max_periods: int | None = None,
) -> PriorClaim | None:
    """Return the newest tracked claim of ``participant_name`` in ``history``.

    Only the first ``max_periods`` entries are searched when a bound is given.
    """

    searched = history if max_periods is None else history[:max_periods]
    for week_index, period in enumerate(searched):
        roster = period.find_participant(participant_name)
        if roster is None:
            continue
        claim = resolve_tracked_claim(roster)
        if claim is not None:
            return PriorClaim(claim=claim, week_index=week_index)
    return None


def expect_counter(
    current: ItemClaim,
    participant_name: str,
    history: Sequence[Period],
    *,
    recent_window: int = RECENT_WINDOW,
) -> Expectation:
    """Derive the counter ``current`` should carry from ``history`` alone."""

    prior = find_prior_claim(participant_name, history, max_periods=recent_window)

    if prior is None:
        # Only picks the wording; the expectation is a reset either way.
        older = find_prior_claim(participant_name, history[recent_window:])
        annotation = "4+ week gap" if older is not None else "New player"
        return Expectation(expected_counter=0, is_reset=True, annotation=annotation)

    if normalize_key(current.item_name) == normalize_key(prior.claim.item_name):
        annotation = (
            f"Continued from {prior.week_index + 1} weeks ago" if prior.week_index > 0 else ""
        )
        return Expectation(
            expected_counter=prior.claim.counter_value + 1,
            is_reset=False,
            annotation=annotation,
        )

    return Expectation(
        expected_counter=0,
        is_reset=True,
        annotation=f'Item changed from "{prior.claim.item_name}"',
    )


def classify(
    actual_counter: int,
    expectation: Expectation,
) -> tuple[OutcomeStatus, str | None]:
    """Return the status and reason for an observed counter."""

    annotation = expectation.annotation
    if actual_counter == expectation.expected_counter:
        return OutcomeStatus.OK, annotation or None

    if expectation.is_reset and actual_counter == EXALTED_COUNTER:
        return OutcomeStatus.WARNING, f"Check for Exalted Status ({annotation})"

    reason = f"Expected {expectation.expected_counter}, got {actual_counter}"
    if annotation:
        reason = f"{reason} ({annotation})"
    return OutcomeStatus.ERROR, reason


def validate_participant(
    roster: ParticipantRoster,
    history: Sequence[Period],
    *,
    recent_window: int = RECENT_WINDOW,
) -> ValidationOutcome:
    current = resolve_tracked_claim(roster)
    if current is None:
        return ValidationOutcome(
            participant_name=roster.participant_name,
            item_name=MISSING_ITEM_NAME,
            actual_counter=0,
            expected_counter=0,
            status=OutcomeStatus.ERROR,
            reason="No items found",
        )

    expectation = expect_counter(
        current,
        roster.participant_name,
        history,
        recent_window=recent_window,
    )
    status, reason = classify(current.counter_value, expectation)
    return ValidationOutcome(
        participant_name=roster.participant_name,
        item_name=current.item_name,
        actual_counter=current.counter_value,
        expected_counter=expectation.expected_counter,
        status=status,
        reason=reason,
    )


def validate(
    current: Period,
    history: Sequence[Period],
    *,
    recent_window: int = RECENT_WINDOW,
) -> ValidationReport:
    """Validate every participant of ``current`` against ``history``.

    ``history`` must be ordered newest to oldest. The function never raises for
    roster content: each participant yields exactly one outcome.
    """

    if recent_window < 1:
        raise ValueError("Recent window must cover at least one period")

    history = tuple(history)
    outcomes = tuple(
        validate_participant(roster, history, recent_window=recent_window)
        for roster in current.participants
    )
    report = ValidationReport(period_id=current.period_id, outcomes=outcomes)
    log.debug(
        "Validated %s against %s previous period(s): ok=%s, warnings=%s, errors=%s",
        current.period_id,
        len(history),
        report.ok_count,
        report.warning_count,
        report.error_count,
    )
    return report


__all__ = [
    "EXALTED_COUNTER",
    "RECENT_WINDOW",
    "Expectation",
    "PriorClaim",
    "classify",
    "expect_counter",
    "find_prior_claim",
    "validate",
    "validate_participant",
]
