"""Logging helpers."""

from __future__ import annotations

import logging
import sys


def get_logger(name: str, level: str | None = None) -> logging.Logger:
    """Return a configured logger writing to stderr."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.WARNING)
    if level:
        logger.setLevel(level.upper())
    return logger
