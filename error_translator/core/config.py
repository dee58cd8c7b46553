"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

import json
from pathlib import Path
from typing import Any, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (TRACE, DEBUG, INFO, WARNING, ERROR).
        error_mappings_file: JSON file holding the error mapping table.
        request_id_header: Header carrying the caller's request id.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ERROR_TRANSLATOR_",
    )

    project_name: str = "Error Translator"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    error_mappings_file: Optional[Path] = None
    request_id_header: str = "x-request-id"


def load_error_mappings(path: Optional[Path]) -> Any:
    """Read the mapping table from a JSON file.

    The content is returned as parsed; shape checks are left to the
    translator's validator so the usual configuration errors apply.

    Args:
        path: Location of the JSON file, or None.

    Returns:
        The parsed JSON document, or None when no path is configured.
    """
    if path is None:
        return None
    return json.loads(Path(path).read_text(encoding="utf-8"))


settings = Settings()
