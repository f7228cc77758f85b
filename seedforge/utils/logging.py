"""Logging setup shared by ``seedforge serve`` and ``seedforge cli``."""

from __future__ import annotations

import logging
import sys

NAMESPACE = "seedforge"

# Per-request loggers from the HTTP stack.
CHATTY_LOGGERS = ("uvicorn.access", "httpx")

_FORMAT = "%(asctime)s [%(levelname)-5s] %(name)-30s | %(message)s"


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: str | int = "INFO") -> logging.Logger:
    """Send log records to stdout through one handler and return the package logger.

    Unknown level names fall back to INFO, and a repeated call replaces the
    handler instead of stacking another. The chatty third-party loggers stay
    at WARNING or above unless DEBUG is requested.
    """
    numeric_level = _resolve_level(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric_level)

    quiet_level = numeric_level if numeric_level <= logging.DEBUG else max(numeric_level, logging.WARNING)
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)

    package_logger = logging.getLogger(NAMESPACE)
    package_logger.setLevel(numeric_level)
    return package_logger
