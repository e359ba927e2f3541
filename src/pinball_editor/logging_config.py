"""Logger setup for the pinball editor namespace."""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOGGER_NAME = "pinball_editor"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Configure the package logger with a console handler and an optional file handler."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Re-running setup must not stack handlers.
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized")
    return logger


__all__ = ["LOGGER_NAME", "setup_logging"]
