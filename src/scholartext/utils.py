"""Logging helpers shared across scholartext modules."""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "scholartext"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Configure the root handler and return the package logger.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Unknown names fall back to WARNING.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(log_level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger, e.g. ``scholartext.classifier``."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
