"""
Logging setup for contactbook.

Modules call `get_logger(__name__)`; everything hangs off the "contactbook"
logger so uvicorn's own handlers stay untouched.
"""

import logging
import sys

from .config import get_settings

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_PACKAGE_LOGGER = "contactbook"


def resolve_level(name: str | None) -> int:
    """Map LOG_LEVEL to a logging level, falling back to INFO for unknown names."""
    level = logging.getLevelName((name or "").strip().upper())
    return level if isinstance(level, int) else logging.INFO


def _package_logger() -> logging.Logger:
    logger = logging.getLogger(_PACKAGE_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(resolve_level(get_settings().log_level))
    return logger


def get_logger(name: str) -> logging.Logger:
    _package_logger()
    return logging.getLogger(name)
