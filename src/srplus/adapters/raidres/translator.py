"""Translate raidres.top payloads into roster periods."""

from __future__ import annotations

from typing import TYPE_CHECKING

from srplus.domain.model import ItemClaim, ParticipantRoster, Period

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .schema import EventResponse


def unknown_item_name(raid_item_id: int) -> str:
    return f"Unknown Item ({raid_item_id})"


def parse_period(
    event_id: str,
    payload: EventResponse,
    item_names: Mapping[int, str],
    *,
    url: str | None = None,
) -> Period:
    """Group the event's reservations per character, keeping first-seen order."""

    claims_by_name: dict[str, list[ItemClaim]] = {}
    for reservation in payload.reservations:
        item_name = item_names.get(reservation.raid_item_id) or unknown_item_name(
            reservation.raid_item_id
        )
        claims_by_name.setdefault(reservation.character.name, []).append(
            ItemClaim(item_name=item_name, counter_value=reservation.counter_value)
        )

    participants = tuple(
        ParticipantRoster(participant_name=name, claims=tuple(claims))
        for name, claims in claims_by_name.items()
    )
    return Period(period_id=event_id, participants=participants, url=url)
