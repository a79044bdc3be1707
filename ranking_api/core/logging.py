"""Logger setup shared by every module."""

from __future__ import annotations

import logging
import os
import sys

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(name: str | None) -> int:
    level = logging.getLevelName((name or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logger(name: str) -> logging.Logger:
    """Setup a logger with consistent formatting"""

    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    level = _resolve_level(os.getenv("LOG_LEVEL"))
    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    logger.addHandler(handler)

    return logger


def set_log_level(level: str) -> None:
    """Apply ``level`` to every logger created through :func:`setup_logger`."""

    numeric = _resolve_level(level)
    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if name.startswith("ranking_api") and isinstance(logger, logging.Logger):
            logger.setLevel(numeric)
            for handler in logger.handlers:
                handler.setLevel(numeric)


__all__ = ["set_log_level", "setup_logger"]
