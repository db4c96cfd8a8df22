"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import PeriodFetcher

__all__ = ["PeriodFetcher"]
