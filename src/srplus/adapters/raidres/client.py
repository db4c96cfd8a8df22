"""HTTP client for the raidres.top API."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from srplus.adapters.http_resilience import ResilientClient
from srplus.config.raidres import RaidresConfig, get_raidres_config
from srplus.domain.model import Period
from srplus.domain.ports.fetching import PeriodFetcher

from .schema import EventResponse, RaidItemsResponse
from .translator import parse_period

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from srplus.config.http_resilience import ResilienceConfig

log = getLogger(__name__)


def _should_cache_payload(payload: object) -> bool:
    # Item tables are static per raid; reservations change until the raid starts.
    return isinstance(payload, dict) and "raidItems" in payload


def _default_config() -> RaidresConfig:
    return get_raidres_config(cache_predicate=_should_cache_payload)


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


class RaidresAPIError(RuntimeError):
    """Raised when an event cannot be fetched or its payload is unusable."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(slots=True)
class RaidresFetcher:
    """Fetch raid reserve events and turn them into ``Period`` records.

    Item name tables are cached per raid id for the lifetime of the fetcher.
    """

    config: RaidresConfig = field(default_factory=_default_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )
    _item_names: dict[int, dict[int, str]] = field(default_factory=dict, init=False, repr=False)

    def __call__(self, event_ids: Sequence[str]) -> list[Period]:
        return self.fetch_periods(event_ids)

    def fetch_periods(self, event_ids: Sequence[str]) -> list[Period]:
        """Fetch every event in order; failed events become empty periods."""

        return asyncio.run(self._fetch_periods_async(list(event_ids)))

    def fetch_period(self, event_id: str) -> Period:
        """Fetch a single event, raising ``RaidresAPIError`` on failure."""

        return asyncio.run(self._fetch_period_async(event_id))

    async def _fetch_periods_async(self, event_ids: list[str]) -> list[Period]:
        periods: list[Period] = []
        async with self.client_factory(self.config.resilience) as client:
            for event_id in event_ids:
                try:
                    period = await self._fetch_period(client, event_id)
                except RaidresAPIError:
                    log.exception("Failed to fetch event %s", event_id)
                    period = Period(period_id=event_id, url=self.config.event_page_url(event_id))
                periods.append(period)
        return periods

    async def _fetch_period_async(self, event_id: str) -> Period:
        async with self.client_factory(self.config.resilience) as client:
            return await self._fetch_period(client, event_id)

    async def _fetch_period(self, client: ResilientClient, event_id: str) -> Period:
        payload = await self._get_json(client, self.config.event_path(event_id))
        try:
            event = EventResponse.model_validate(payload)
            item_names = await self._get_item_names(client, event.raid_id)
            period = parse_period(
                event_id,
                event,
                item_names,
                url=self.config.event_page_url(event_id),
            )
        except ValueError as exc:
            raise RaidresAPIError(f"Unusable payload for event {event_id}: {exc}") from exc

        log.info(
            "Fetched %s: %s players, %s reservations",
            event_id,
            len(period.participants),
            len(event.reservations),
        )
        return period

    async def _get_item_names(self, client: ResilientClient, raid_id: int) -> dict[int, str]:
        cached = self._item_names.get(raid_id)
        if cached is not None:
            return cached

        try:
            payload = await self._get_json(client, self.config.raid_items_path(raid_id))
            names = RaidItemsResponse.model_validate(payload).name_map()
        except (RaidresAPIError, ValueError) as exc:
            log.warning("Could not fetch item names for raid %s: %s", raid_id, exc)
            return {}

        self._item_names[raid_id] = names
        return names

    async def _get_json(self, client: ResilientClient, path: str) -> object:
        try:
            response = await client.get(path)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise RaidresAPIError(f"GET {path} failed: {status}", status_code=status) from exc
        except httpx.HTTPError as exc:
            raise RaidresAPIError(f"GET {path} failed: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            raise RaidresAPIError(f"GET {path} returned invalid JSON") from exc


if TYPE_CHECKING:
    _fetcher_check: PeriodFetcher = RaidresFetcher()
