"""Logging setup for the fedsync command line and embedding services."""

from __future__ import annotations

import logging

from .env import optional_env_str
from .errors import ConfigurationError

DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def resolve_log_level(name: str | None = None) -> int:
    """Map a level name to its numeric value; ``None`` reads ``FEDSYNC_LOG_LEVEL``."""

    raw = name if name is not None else optional_env_str("FEDSYNC_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    level = logging.getLevelNamesMapping().get(raw.strip().upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level: {raw!r}")
    return level


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Configure the root logger with a terse single-line format.

    Without an explicit ``level`` the ``FEDSYNC_LOG_LEVEL`` environment variable
    applies (INFO when unset). ``force=True`` replaces handlers installed earlier.
    """

    logging.basicConfig(
        level=level if level is not None else resolve_log_level(),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        force=force,
    )
