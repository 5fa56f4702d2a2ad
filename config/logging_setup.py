"""
Logging initialization with labeled prefixes.

Every module logs through a child of the ``csv_mapper`` logger
(``logging.getLogger("csv_mapper.<module>")``). ``setup_logging`` attaches a
single stdout handler that prints ``LABEL message`` lines, e.g.::

    INFO Smart Parser: Detected delimiter -> ";"
    WARN Mapping for 'brand' ignored: unknown column 'Maker'
"""

from __future__ import annotations

import logging
import sys

from .settings import LOG_LEVEL

__all__ = [
    "LOGGER_NAME",
    "setup_logging",
    "get_logger",
    "reset_logging",
]

LOGGER_NAME = "csv_mapper"

_logger: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """Formatter that prefixes each message with a short level label."""

    LEVEL_LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
    }

    def format(self, record: logging.LogRecord) -> str:
        level_label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        message = f"{level_label} {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


def setup_logging(level: str | int = LOG_LEVEL) -> logging.Logger:
    """Configure the application logger (idempotent) and return it."""
    global _logger

    if _logger is not None:
        return _logger

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate handlers when Streamlit re-runs the script
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)
    logger.propagate = False

    _logger = logger
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the application logger, or one of its children when `name` is given.

    Does not configure handlers; records propagate to the ``csv_mapper``
    logger, which prints them once ``setup_logging`` has run.
    """
    if not name:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def reset_logging() -> None:
    """Reset the global logger state. Mainly for testing purposes."""
    global _logger
    if _logger is not None:
        for handler in _logger.handlers[:]:
            _logger.removeHandler(handler)
        _logger.propagate = True
    _logger = None
