"""
Logging configuration for the application.

Sets up structured logging with a consistent format.
Logging must not change program behavior.
Never logs sensitive data (request bodies, secrets, raw payloads).
"""

import logging
import sys
from typing import Any

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

TRACE = 5
ERROR_LOGGER_NAME = "error_translator.requests"

logging.addLevelName(TRACE, "TRACE")


def configure_logging(level: str = "INFO") -> None:
    """Configure structured logging for the application.

    Args:
        level: The log level string (TRACE, DEBUG, INFO, WARNING, ERROR).
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # Suppress noisy third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)


class TraceLoggerAdapter(logging.LoggerAdapter):
    """Stdlib logger with a ``trace`` method.

    ``logging.Logger`` has no trace level, so it does not satisfy the
    translator's logger port on its own. Wrap it with this adapter.
    """

    def trace(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        """Log ``msg`` at the TRACE level."""
        self.log(TRACE, msg, *args, **kwargs)


def get_error_logger(name: str = ERROR_LOGGER_NAME) -> TraceLoggerAdapter:
    """Return a trace-capable logger suitable for the error translator."""
    return TraceLoggerAdapter(logging.getLogger(name), {})
