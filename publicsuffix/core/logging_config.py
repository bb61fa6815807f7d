"""Logging configuration for PublicSuffix."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .constants import DEBUG_LOG_BACKUP_COUNT, DEBUG_LOG_MAX_BYTES

# Format strings
DEBUG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"


def setup_logging(debug_mode: bool = False, log_file: Path | None = None) -> None:
    """
    Configure application logging.

    Sets up up to two log targets:
    1. Console: WARNING and above, or DEBUG in debug mode
    2. Debug log: Rotating file handler with DEBUG level, when log_file is given

    Args:
        debug_mode: If True, output DEBUG to console
        log_file: Optional path of the rotating debug log
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Clear any existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if debug_mode else logging.WARNING)
    console_handler.setFormatter(logging.Formatter(DEBUG_FORMAT if debug_mode else CONSOLE_FORMAT))
    root_logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        debug_handler = RotatingFileHandler(
            log_file,
            maxBytes=DEBUG_LOG_MAX_BYTES,
            backupCount=DEBUG_LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        debug_handler.setLevel(logging.DEBUG)
        debug_handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
        root_logger.addHandler(debug_handler)
