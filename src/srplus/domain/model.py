"""Immutable value records describing rosters and their validation results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


def normalize_key(value: str) -> str:
    """Return the comparison key used for participant and item names."""

    return value.strip().casefold()


class OutcomeStatus(StrEnum):
    OK = "OK"
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass(slots=True, frozen=True)
class ItemClaim:
    """One reserved item and the SR+ counter attached to it.

    A counter of ``0`` is a plain reservation; a positive counter marks the
    tracked claim.
    """

    item_name: str
    counter_value: int = 0

    def __post_init__(self) -> None:
        if self.counter_value < 0:
            raise ValueError(
                f"Counter for {self.item_name!r} must be non-negative, got {self.counter_value}"
            )


@dataclass(slots=True, frozen=True)
class ParticipantRoster:
    """All claims of one participant within a single period."""

    participant_name: str
    claims: tuple[ItemClaim, ...] = ()

    def matches(self, participant_name: str) -> bool:
        return normalize_key(self.participant_name) == normalize_key(participant_name)


@dataclass(slots=True, frozen=True)
class Period:
    """One event occurrence (a weekly raid reserve)."""

    period_id: str
    participants: tuple[ParticipantRoster, ...] = ()
    url: str | None = None

    def find_participant(self, participant_name: str) -> ParticipantRoster | None:
        for roster in self.participants:
            if roster.matches(participant_name):
                return roster
        return None

    @property
    def is_empty(self) -> bool:
        return not self.participants


@dataclass(slots=True, frozen=True)
class ValidationOutcome:
    participant_name: str
    item_name: str
    actual_counter: int
    expected_counter: int
    status: OutcomeStatus
    reason: str | None = None


@dataclass(slots=True, frozen=True)
class ValidationReport:
    """Per-period aggregate of validation outcomes.

    Counts are derived from ``outcomes`` so they cannot drift from them.
    """

    period_id: str
    outcomes: tuple[ValidationOutcome, ...] = field(default_factory=tuple)

    @property
    def total_participants(self) -> int:
        return len(self.outcomes)

    @property
    def error_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status is OutcomeStatus.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status is OutcomeStatus.WARNING)

    @property
    def ok_count(self) -> int:
        return self.total_participants - self.error_count - self.warning_count

    @property
    def is_clean(self) -> bool:
        return self.error_count == 0 and self.warning_count == 0


__all__ = [
    "ItemClaim",
    "OutcomeStatus",
    "ParticipantRoster",
    "Period",
    "ValidationOutcome",
    "ValidationReport",
    "normalize_key",
]
