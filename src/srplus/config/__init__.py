"""Application configuration helpers."""

from __future__ import annotations

from .env import read_env_choice, read_env_float, read_env_var
from .errors import ConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .raidres import RaidresConfig, get_raidres_config
from .storage import StorageConfig, get_storage_config

__all__ = [
    "CacheConfig",
    "ConfigurationError",
    "RaidresConfig",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "StorageConfig",
    "configure_logging",
    "get_raidres_config",
    "get_storage_config",
    "read_env_choice",
    "read_env_float",
    "read_env_var",
]
