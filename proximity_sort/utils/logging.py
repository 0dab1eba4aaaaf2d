"""Logging for proximity-sort.

Sorted paths own stdout, so log records only ever go to stderr or a file.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from proximity_sort.utils.config import LoggingConfig


def setup_logging(config: LoggingConfig) -> logging.Logger:
    """Attach stderr and file handlers to the ``proximity_sort`` logger.

    Existing handlers are replaced, so repeated runs in one process do not
    duplicate output. Unknown level names fall back to WARNING.
    """
    logger = logging.getLogger("proximity_sort")
    logger.setLevel(getattr(logging, config.level.upper(), logging.WARNING))
    logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if config.console:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    if config.file:
        log_path = Path(config.file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_path))
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the ``proximity_sort.<name>`` logger, e.g. ``ranking.ranker``."""
    return logging.getLogger(f"proximity_sort.{name}")
