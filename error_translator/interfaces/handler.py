"""
Error translator handler for FastAPI.

Builds the catch-all exception handler from a mapping table.
Known errors get their configured status and message; anything else
becomes a generic 500 and is reported to the configured logger.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging
from collections.abc import Awaitable, Callable, Mapping
from http import HTTPStatus
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from error_translator.application.validate_options import freeze_options
from error_translator.domain.entities import DEFAULT_INTERNAL_ERROR, ResolvedResponse
from error_translator.domain.resolution import is_json_syntax_error, resolve_error
from error_translator.interfaces.schemas import ErrorResponse
from error_translator.shared.context import get_request_context

logger = logging.getLogger(__name__)

HTTP_422 = 422

ErrorHandler = Callable[[Request, Exception], Awaitable[JSONResponse]]


def _error_response(resolved: ResolvedResponse) -> JSONResponse:
    """Build the JSON error response: a single ``message`` field."""
    body = ErrorResponse(message=resolved.message)
    return JSONResponse(status_code=resolved.code, content=body.model_dump())


def _reason_phrase(code: int) -> str:
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return "Error"


def _fallback_for(exc: Exception) -> ResolvedResponse:
    """Return the response used when ``exc`` has no mapping.

    HTTP exceptions keep their own status, and a validation failure other
    than malformed JSON stays a 422. Everything else is a 500.
    """
    if isinstance(exc, StarletteHTTPException):
        detail = exc.detail if isinstance(exc.detail, str) and exc.detail else None
        return ResolvedResponse(
            code=exc.status_code,
            message=detail or _reason_phrase(exc.status_code),
        )
    if isinstance(exc, RequestValidationError) and not is_json_syntax_error(exc):
        return ResolvedResponse(
            code=HTTP_422, message=_reason_phrase(HTTP_422)
        )
    return DEFAULT_INTERNAL_ERROR


def build_log_payload(key: Optional[str], request: Request) -> dict[str, Any]:
    """Build the structured payload reported for an unexpected error."""
    return {
        "message": key,
        "additional_info": get_request_context(request),
    }


def create_error_handler(options: Optional[Mapping[str, Any]]) -> ErrorHandler:
    """Validate ``options`` and return an exception handler bound to them.

    Args:
        options: Mapping with ``errorMappings`` and an optional ``logger``.

    Returns:
        An async handler with the Starlette exception handler signature.

    Raises:
        ErrorTranslatorConfigError: If the options are invalid.
    """
    translator_options = freeze_options(options)
    error_mappings = translator_options.error_mappings
    error_logger = translator_options.logger

    async def handle_error(request: Request, exc: Exception) -> JSONResponse:
        """Translate ``exc`` into its configured JSON response."""
        resolution = resolve_error(exc, error_mappings, _fallback_for(exc))
        if resolution.should_log and error_logger is not None:
            try:
                error_logger.error(build_log_payload(resolution.key, request))
            except Exception:
                logger.warning("Error logger failed while reporting", exc_info=True)
        return _error_response(resolution.response)

    logger.debug(
        "Error handler created with %d mapping(s), logger=%s",
        len(error_mappings),
        "yes" if error_logger is not None else "no",
    )
    return handle_error


def install_error_translator(
    app: FastAPI, options: Optional[Mapping[str, Any]]
) -> ErrorHandler:
    """Register the translator as the application's error handler.

    Installed for every exception, and also for the HTTP and request
    validation exceptions FastAPI would otherwise answer itself.

    Args:
        app: The FastAPI application instance.
        options: Mapping with ``errorMappings`` and an optional ``logger``.

    Returns:
        The installed handler.
    """
    handler = create_error_handler(options)
    for exc_class in (Exception, StarletteHTTPException, RequestValidationError):
        app.add_exception_handler(exc_class, handler)
    logger.info("Error translator installed on %s", app.title)
    return handler
