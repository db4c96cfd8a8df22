"""Ports for fetching roster periods from an external source."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from srplus.domain.model import Period


@runtime_checkable
class PeriodFetcher(Protocol):
    """Callable port returning one ``Period`` per requested event id.

    Implementations keep the requested order and degrade a failed event to an
    empty ``Period`` instead of raising.
    """

    def __call__(self, event_ids: Sequence[str]) -> list[Period]: ...


__all__ = ["PeriodFetcher"]
