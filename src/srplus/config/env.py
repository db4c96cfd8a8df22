"""Environment variable readers for configuration."""

from __future__ import annotations

import os

from .errors import ConfigurationError


def read_env_var(name: str, *, default: str) -> str:
    """Return ``name`` from the environment, falling back on missing or blank values."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def read_env_float(name: str, *, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {raw!r}")
    return value


def read_env_choice(name: str, *, choices: tuple[str, ...], default: str) -> str:
    value = read_env_var(name, default=default).lower()
    if value not in choices:
        allowed = ", ".join(choices)
        raise ConfigurationError(f"{name} must be one of: {allowed} (got {value!r})")
    return value
