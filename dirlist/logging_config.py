"""Logging setup for dirlist.

All records go to stderr so that the listing on stdout stays exact. Modules
obtain loggers through ``get_logger(__name__)``; the CLI calls
``configure_logging`` once at startup.

Level resolution order: explicit argument, then ``DIRLIST_LOG_LEVEL``, then
``WARNING``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

ROOT_LOGGER_NAME = "dirlist"
LOG_LEVEL_ENV = "DIRLIST_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

VALID_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_HANDLER_ATTR = "_dirlist_handler"


def resolve_level(level: str | None = None) -> int:
    """Map a level name (or the environment default) to a ``logging`` level."""
    name = level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL
    return VALID_LEVELS.get(name.strip().upper(), logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(level: str | None = None, stream: TextIO | None = None) -> logging.Logger:
    """Install a single stderr handler on the package logger.

    Repeated calls replace the previously installed handler instead of adding
    another one.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(resolve_level(level))

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    setattr(handler, _HANDLER_ATTR, True)
    logger.addHandler(handler)
    logger.propagate = False
    return logger


__all__ = [
    "ROOT_LOGGER_NAME",
    "LOG_LEVEL_ENV",
    "VALID_LEVELS",
    "resolve_level",
    "get_logger",
    "configure_logging",
]
