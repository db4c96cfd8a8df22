"""Pick the tracked (SR+) claim out of a participant's reservations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .model import ItemClaim

if TYPE_CHECKING:
    from .model import ParticipantRoster


def resolve_tracked_claim(roster: ParticipantRoster) -> ItemClaim | None:
    """Return the claim carrying the SR+ counter for ``roster``.

    The first claim with a positive counter wins, even if a later one also has
    one. A roster with only plain reservations is a fresh start: its first claim
    is returned with a counter of ``0``. ``None`` means the roster is empty.
    """

    for claim in roster.claims:
        if claim.counter_value > 0:
            return claim

    if roster.claims:
        first = roster.claims[0]
        return ItemClaim(item_name=first.item_name, counter_value=0)

    return None


__all__ = ["resolve_tracked_claim"]
