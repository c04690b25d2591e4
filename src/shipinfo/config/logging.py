"""Logging setup for the shipinfo command."""

from __future__ import annotations

import logging

from .env import env_or_default
from .errors import ConfigurationError

LOG_LEVEL_ENV = "SHIPINFO_LOG_LEVEL"

# httpx reports every request at INFO, which buries the per-vessel progress lines.
_REQUEST_LOGGERS = ("httpx", "httpcore")


def resolve_log_level(value: str) -> int:
    """Map a level name such as ``debug`` or ``WARNING`` to its number."""

    level = logging.getLevelNamesMapping().get(value.strip().upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level: {value!r}", variable=LOG_LEVEL_ENV)
    return level


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger for CLI output.

    Without ``level`` the threshold comes from ``SHIPINFO_LOG_LEVEL`` (default
    INFO). HTTP client request logs stay at WARNING unless the run is at DEBUG.
    Pass ``force=True`` to reconfigure during tests.
    """

    if level is None:
        level = resolve_log_level(env_or_default(LOG_LEVEL_ENV, "INFO"))

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    for name in _REQUEST_LOGGERS:
        logging.getLogger(name).setLevel(level if level <= logging.DEBUG else max(level, logging.WARNING))
