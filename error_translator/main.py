"""
Application entry point.

Creates the FastAPI application and wires together:
- Request context middleware
- Error translator (catch-all exception handler)
- Logging configuration

No business logic belongs here.
"""

from collections.abc import Mapping
from typing import Any, Optional

from fastapi import FastAPI

from error_translator.core.config import load_error_mappings, settings
from error_translator.interfaces.handler import install_error_translator
from error_translator.shared.context import RequestContextMiddleware
from error_translator.shared.logging import configure_logging, get_error_logger


def _options_from_settings() -> dict[str, Any]:
    """Build translator options from the configured mappings file."""
    return {
        "errorMappings": load_error_mappings(settings.error_mappings_file),
        "logger": get_error_logger(),
    }


def create_app(options: Optional[Mapping[str, Any]] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application.

    Args:
        options: Translator options. Read from settings when omitted.

    Returns:
        A fully configured FastAPI application instance.

    Raises:
        ErrorTranslatorConfigError: If the translator options are invalid.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # --- Request Context ---
    app.add_middleware(
        RequestContextMiddleware, request_id_header=settings.request_id_header
    )

    # --- Error Translation ---
    install_error_translator(
        app, options if options is not None else _options_from_settings()
    )

    return app
