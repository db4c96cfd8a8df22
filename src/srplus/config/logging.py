"""Logging setup for the srplus command line."""

from __future__ import annotations

import logging

_CHATTY_LOGGERS = ("httpx", "httpcore", "hishel")


def configure_logging(*, verbose: bool = False, force: bool = False) -> None:
    """Configure the root logger for CLI runs.

    INFO by default, DEBUG with ``verbose``. The HTTP libraries log every request
    at INFO, so they stay at WARNING unless ``verbose`` is set.
    """

    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(level if verbose else logging.WARNING)
