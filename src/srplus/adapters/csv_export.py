"""Read raidres.top "Export to CSV" files into roster periods."""

from __future__ import annotations

import csv
import re
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING, Final

from srplus.domain.model import ItemClaim, ParticipantRoster, Period

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

log = getLogger(__name__)

ITEM_COLUMN: Final[int] = 1
ATTENDEE_COLUMN: Final[int] = 3
SR_PLUS_COLUMN: Final[int] = 8
MIN_FIELDS: Final[int] = SR_PLUS_COLUMN + 1
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_counter(raw: str) -> int:
    # Reads a leading integer ("3abc" is 3); anything else counts as 0.
    match = _LEADING_INT.match(raw)
    if match is None:
        return 0
    return max(int(match.group(1)), 0)


def parse_rows(period_id: str, rows: Iterable[Sequence[str]]) -> Period:
    """Build a period from CSV rows without the header row."""

    claims_by_name: dict[str, list[ItemClaim]] = {}
    for row in rows:
        if len(row) < MIN_FIELDS:
            continue
        claim = ItemClaim(
            item_name=row[ITEM_COLUMN],
            counter_value=_parse_counter(row[SR_PLUS_COLUMN]),
        )
        claims_by_name.setdefault(row[ATTENDEE_COLUMN], []).append(claim)

    participants = tuple(
        ParticipantRoster(participant_name=name, claims=tuple(claims))
        for name, claims in claims_by_name.items()
    )
    return Period(period_id=period_id, participants=participants)


def load_period_csv(path: Path, *, period_id: str | None = None) -> Period:
    with path.open(newline="", encoding="utf-8") as handle:
        reader = csv.reader(handle)
        next(reader, None)
        period = parse_rows(period_id or path.stem, reader)
    log.info("Loaded %s: %s players", period.period_id, len(period.participants))
    return period


def load_periods_csv(directory: Path, event_ids: Sequence[str]) -> list[Period]:
    """Load ``<directory>/<id>.csv`` per id; unreadable files become empty periods."""

    periods: list[Period] = []
    for event_id in event_ids:
        path = directory / f"{event_id}.csv"
        try:
            periods.append(load_period_csv(path, period_id=event_id))
        except (OSError, UnicodeError, csv.Error) as exc:
            log.warning("Could not read export for %s: %s", event_id, exc)
            periods.append(Period(period_id=event_id))
    return periods


class CsvExportFetcher:
    """``PeriodFetcher`` reading exports from a local directory."""

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)

    def __call__(self, event_ids: Sequence[str]) -> list[Period]:
        return load_periods_csv(self.directory, event_ids)
