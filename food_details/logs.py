"""Debug log file setup."""

from __future__ import annotations

import logging
from pathlib import Path

from food_details.config import DEBUG_LOG_PATH

_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(path: str = DEBUG_LOG_PATH, level: int = logging.DEBUG) -> None:
    """Send package logs to a debug file; the terminal belongs to the UI."""
    package_logger = logging.getLogger("food_details")
    package_logger.setLevel(level)
    package_logger.propagate = False
    try:
        log_file = Path(path)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError:
        # Logging must never interfere with app flow.
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    package_logger.handlers = [handler]
