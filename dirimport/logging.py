"""Logging setup for dirimport; records go to stderr so stdout only carries code."""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

_LOGGER_NAME = "dirimport"

# -q maps to -1, no flag to 0, each -v adds one.
_LEVELS = {-1: logging.ERROR, 0: logging.INFO}


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the dirimport hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def level_for(verbosity: int) -> int:
    if verbosity > 0:
        return logging.DEBUG
    return _LEVELS.get(verbosity, logging.ERROR)


def configure_logging(
    verbosity: int = 0,
    log_file: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Install the CLI handlers on the ``dirimport`` logger.

    ``verbosity`` and ``log_file`` are the parsed ``-v``/``-q`` and
    ``--log-file`` values. The file sink always records at debug level so a
    log file is useful even for a quiet run.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.handlers.clear()
    logger.propagate = False

    console_level = level_for(verbosity)
    console = logging.StreamHandler(stream or sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter("dirimport: %(message)s"))
    logger.addHandler(console)
    logger.setLevel(console_level)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)
        logger.setLevel(logging.DEBUG)

    return logger


__all__ = ["configure_logging", "get_logger", "level_for"]
