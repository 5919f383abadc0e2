"""Logging setup for the engine and its CLI.

Library modules log through `logging.getLogger(__name__)`, i.e. under `src.*`.
`configure_logging` attaches one stderr handler to both the application logger
and the `src` tree so stdout stays reserved for JSON command output.
"""

import logging
import sys
from typing import TextIO

LOGGER_NAME = "career_engine"
ENGINE_LOGGERS = (LOGGER_NAME, "src")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler: logging.Handler | None = None


def _resolve_level(level: str | None) -> int:
    return getattr(logging, (level or "INFO").upper(), logging.INFO)


def configure_logging(
    level: str | None = None,
    format_string: str = LOG_FORMAT,
    date_format: str = DATE_FORMAT,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure engine logging and return the application logger.

    The first call installs the handler; later calls only change the level.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL. Unknown or missing
            levels fall back to INFO.
        format_string: Format string for log records.
        date_format: Format string for timestamps.
        stream: Where records are written; stderr by default.

    Returns:
        The `career_engine` logger.
    """
    global _handler

    log_level = _resolve_level(level)

    if _handler is None:
        _handler = logging.StreamHandler(stream or sys.stderr)
        _handler.setFormatter(logging.Formatter(format_string, datefmt=date_format))
        for name in ENGINE_LOGGERS:
            logger = logging.getLogger(name)
            logger.handlers.clear()
            logger.addHandler(_handler)
            logger.propagate = False

    _handler.setLevel(log_level)
    for name in ENGINE_LOGGERS:
        logging.getLogger(name).setLevel(log_level)

    return logging.getLogger(LOGGER_NAME)


def get_logger(name: str) -> logging.Logger:
    """Return `career_engine.<name>`, a child of the application logger."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def reset_logging() -> None:
    """Detach the handler and restore default logger state (for tests)."""
    global _handler

    for name in ENGINE_LOGGERS:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True

    _handler = None
