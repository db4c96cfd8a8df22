"""Public interface for the raidres.top adapter."""

from __future__ import annotations

from .client import RaidresAPIError, RaidresFetcher
from .schema import EventResponse, RaidItemsResponse, ReservationPayload
from .translator import parse_period

__all__ = [
    "EventResponse",
    "RaidItemsResponse",
    "RaidresAPIError",
    "RaidresFetcher",
    "ReservationPayload",
    "parse_period",
]
