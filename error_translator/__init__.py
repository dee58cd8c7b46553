"""
Error Translator — HTTP error translation for FastAPI pipelines.

Package root. Turns any exception that reaches the application's
catch-all handler into a JSON response, using a mapping table from
error message text to an HTTP status/message pair.

Layers:
    - domain: Response entities, capability ports, pure error resolution.
    - application: Configuration DTOs and validation.
    - interfaces: Handler factory and wire schemas.
    - shared: Cross-cutting concerns (logging, request context).
"""

from error_translator.domain.entities import (
    DEFAULT_BAD_REQUEST,
    DEFAULT_INTERNAL_ERROR,
    ResolvedResponse,
)
from error_translator.domain.errors import ErrorTranslatorConfigError
from error_translator.interfaces.handler import (
    create_error_handler,
    install_error_translator,
)

__all__ = [
    "DEFAULT_BAD_REQUEST",
    "DEFAULT_INTERNAL_ERROR",
    "ErrorTranslatorConfigError",
    "ResolvedResponse",
    "create_error_handler",
    "install_error_translator",
]
