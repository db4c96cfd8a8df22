"""raidres.top configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import read_env_choice, read_env_float, read_env_var
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, ShouldCacheHook
from .storage import StorageConfig, get_storage_config

RAIDRES_BASE_URL = "https://raidres.top"
RAIDRES_TIMEOUT_SECONDS = 10.0
RAIDRES_CACHE_CHOICES = ("memory", "sqlite", "off")


@dataclass(frozen=True)
class RaidresConfig:
    """Holds raidres.top endpoint configuration values."""

    base_url: str
    resilience: ResilienceConfig

    def event_path(self, event_id: str) -> str:
        return f"/api/events/{event_id}"

    def raid_items_path(self, raid_id: int) -> str:
        return f"/raids/raid_{raid_id}.json"

    def event_page_url(self, event_id: str) -> str:
        return f"{self.base_url}/res/{event_id}"


def _build_cache_config(
    mode: str,
    *,
    storage: StorageConfig | None,
    cache_predicate: ShouldCacheHook | None,
) -> CacheConfig | None:
    if mode == "off":
        return None
    if mode == "sqlite":
        storage_config = storage or get_storage_config()
        return CacheConfig(
            backend="sqlite",
            sqlite_path=str(storage_config.http_cache_path()),
            should_cache=cache_predicate,
        )
    return CacheConfig(backend="memory", should_cache=cache_predicate)


def get_raidres_config(
    *,
    resilience: ResilienceConfig | None = None,
    cache_predicate: ShouldCacheHook | None = None,
    storage: StorageConfig | None = None,
) -> RaidresConfig:
    base_url = read_env_var("RAIDRES_BASE_URL", default=RAIDRES_BASE_URL).rstrip("/")
    if resilience is None:
        timeout = read_env_float("RAIDRES_TIMEOUT_SECONDS", default=RAIDRES_TIMEOUT_SECONDS)
        cache_mode = read_env_choice(
            "RAIDRES_HTTP_CACHE",
            choices=RAIDRES_CACHE_CHOICES,
            default="memory",
        )
        resilience = ResilienceConfig(
            name="raidres",
            base_url=base_url,
            timeout_seconds=timeout,
            ratelimit=RateLimit(max_calls=4, per_seconds=1.0),
            cache=_build_cache_config(
                cache_mode,
                storage=storage,
                cache_predicate=cache_predicate,
            ),
            default_headers={"Accept": "application/json"},
        )
    return RaidresConfig(base_url=base_url, resilience=resilience)
