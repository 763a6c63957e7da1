"""glauber_nucleus/logging_config.py
Author: Sabin Thapa <sthapa3@kent.edu>

Console (and optional file) logging for scripts and notebooks.

Library modules only call logging.getLogger(__name__); nothing is printed
until a driver calls setup_logging(). Use DEBUG to see table builds.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Attach handlers to the package logger and return it.

    Safe to call again (e.g. on notebook re-runs): old handlers are replaced.
    """
    logger = logging.getLogger("glauber_nucleus")
    logger.setLevel(level)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to %s", ", ".join(type(h).__name__ for h in handlers))
    return logger
