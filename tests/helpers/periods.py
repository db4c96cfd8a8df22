"""Builders and fakes for roster-period tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from srplus.domain.model import ItemClaim, ParticipantRoster, Period
from srplus.domain.ports.fetching import PeriodFetcher

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

ClaimSpec = tuple[str, int]


def make_roster(name: str, *claims: ClaimSpec) -> ParticipantRoster:
    return ParticipantRoster(
        participant_name=name,
        claims=tuple(ItemClaim(item_name=item, counter_value=value) for item, value in claims),
    )


def make_period(period_id: str, rosters: Mapping[str, Sequence[ClaimSpec]] | None = None) -> Period:
    """Create a period from ``{player: [(item, sr_plus), ...]}``."""

    participants = tuple(make_roster(name, *claims) for name, claims in (rosters or {}).items())
    return Period(period_id=period_id, participants=participants)


class FakePeriodFetcher(PeriodFetcher):
    """In-memory ``PeriodFetcher`` returning pre-built periods by id."""

    def __init__(self, periods: Iterable[Period]) -> None:
        self._periods = {period.period_id: period for period in periods}
        self.calls: list[list[str]] = []

    def __call__(self, event_ids: Sequence[str]) -> list[Period]:
        self.calls.append(list(event_ids))
        return [self._periods.get(event_id, Period(period_id=event_id)) for event_id in event_ids]
