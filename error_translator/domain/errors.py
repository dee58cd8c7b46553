"""
Domain-specific errors for error translation.

Only configuration problems are raised. Errors that reach the
handler at request time are translated, never re-raised.
No framework imports allowed.
"""

from error_translator.domain.entities import ConfigFailure, ConfigFailureKind


class ErrorTranslatorConfigError(ValueError):
    """Raised when the translator is built from an invalid configuration.

    The message is one of four fixed strings so callers and tests
    can match on it; ``kind`` tells them apart programmatically.
    """

    def __init__(self, kind: ConfigFailureKind, message: str) -> None:
        self.kind = kind
        self.message = message
        super().__init__(self.message)

    @classmethod
    def from_failure(cls, failure: ConfigFailure) -> "ErrorTranslatorConfigError":
        """Build the exception from a validation outcome."""
        return cls(failure.kind, failure.message)
