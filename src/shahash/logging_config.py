# src/shahash/logging_config.py
from __future__ import annotations
import logging
import sys

_FORMAT = "%(asctime)s - %(levelname)s - %(module)s::%(funcName)s - %(message)s"


def setup_logging(verbosity: int = 0) -> None:
    """
    Configure the root logger.
    verbosity: 0 = silent, 1 = INFO, 2+ = DEBUG. Logs go to stderr so the
    hash line on stdout stays clean.
    """
    if verbosity <= 0:
        level = logging.CRITICAL + 1  # disables all log output
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers.clear()

    if verbosity > 0:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler.setLevel(level)
        logger.addHandler(handler)
