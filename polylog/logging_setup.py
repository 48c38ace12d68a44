"""Diagnostic logging for polylog (stderr only)."""

import logging
import sys

LOG_FORMAT = (
    "%(asctime)s [%(levelname)s] %(name)s "
    "(%(filename)s:%(lineno)d): %(message)s"
)
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    """Attach a stderr handler to the package logger and return it."""
    logger = logging.getLogger("polylog")
    logger.setLevel(level)

    # Avoid duplicate handlers on repeated calls
    if logger.handlers:
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    return logger
