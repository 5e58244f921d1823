"""Logging setup scoped to the planet duel package."""
from __future__ import annotations

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_HANDLER_NAME = "planet_duel"


def configure_logging(level: str | int = "INFO", stream: TextIO | None = None) -> logging.Logger:
    """Attach a single stream handler to the ``planet_duel`` logger.

    Calling this again replaces the previous handler instead of stacking a
    second one, so repeated runs in one process do not duplicate lines.
    """

    if isinstance(level, str):
        level_name = level.upper()
        if level_name not in LOG_LEVELS:
            raise ValueError(f"unknown log level {level!r}; expected one of {', '.join(LOG_LEVELS)}")
        level = getattr(logging, level_name)

    package_logger = logging.getLogger("planet_duel")
    for handler in list(package_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return package_logger


__all__ = ["LOG_FORMAT", "LOG_LEVELS", "configure_logging"]
