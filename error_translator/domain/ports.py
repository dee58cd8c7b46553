"""
Port interfaces for error translation.

The translator borrows a logger from the embedding application.
Any object exposing ``trace``, ``info`` and ``error`` satisfies the port;
no base class is required.
"""

from typing import Any, Protocol, runtime_checkable

REQUIRED_LOGGER_METHODS = ("trace", "info", "error")


@runtime_checkable
class ErrorLogger(Protocol):
    """Capability set the translator needs from a logger."""

    def trace(self, msg: Any) -> None:
        ...

    def info(self, msg: Any) -> None:
        ...

    def error(self, msg: Any) -> None:
        ...


def implements_error_logger(candidate: object) -> bool:
    """Return True if every required logger method is present and callable.

    ``isinstance(candidate, ErrorLogger)`` only checks attribute presence,
    so callability is verified here as well.
    """
    return all(
        callable(getattr(candidate, name, None)) for name in REQUIRED_LOGGER_METHODS
    )
