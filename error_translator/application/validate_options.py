"""
Use case: Validate and freeze translator options.

Input: options mapping with ``errorMappings`` (or ``error_mappings``)
and an optional ``logger``.
Output: ConfigFailure or None; TranslatorOptions once frozen.
Side effects: None.
Failure cases: missing table, non-mapping table, bad entry schema,
incomplete logger. Checked in that order; the first failure wins.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Optional

from pydantic import ValidationError

from error_translator.application.dtos import ErrorMappingEntry, TranslatorOptions
from error_translator.domain.entities import ConfigFailure, ConfigFailureKind
from error_translator.domain.errors import ErrorTranslatorConfigError
from error_translator.domain.ports import (
    REQUIRED_LOGGER_METHODS,
    implements_error_logger,
)

logger = logging.getLogger(__name__)

ERROR_MAPPINGS_KEYS = ("errorMappings", "error_mappings")
LOGGER_KEY = "logger"

MISSING_MAPPINGS_MESSAGE = "errorMappings object is required"
MAPPINGS_NOT_OBJECT_MESSAGE = "errorMappings must be an object"
INVALID_SCHEMA_MESSAGE = "invalid errorMappings object schema"
INCOMPLETE_LOGGER_MESSAGE = (
    "logger is missing one or more of the required implementations: "
    + ",".join(f"logger.{name}" for name in REQUIRED_LOGGER_METHODS)
)


def _get_error_mappings(options: Mapping[str, Any]) -> Any:
    for key in ERROR_MAPPINGS_KEYS:
        if options.get(key) is not None:
            return options[key]
    return None


def _is_missing(value: Any) -> bool:
    """None and falsy scalars count as absent; an empty mapping does not."""
    if value is None:
        return True
    return not value and not isinstance(value, Mapping)


def _parse_entries(
    error_mappings: Mapping[Any, Any],
) -> Optional[dict[str, ErrorMappingEntry]]:
    parsed: dict[str, ErrorMappingEntry] = {}
    for key, entry in error_mappings.items():
        try:
            parsed[str(key)] = ErrorMappingEntry.model_validate(entry)
        except ValidationError as exc:
            logger.debug("Rejected errorMappings entry %r: %s", key, exc)
            return None
    return parsed


def validate_options(options: Optional[Mapping[str, Any]]) -> Optional[ConfigFailure]:
    """Check translator options without raising.

    Args:
        options: Raw options supplied by the embedding application.

    Returns:
        None when the options are valid, otherwise the first failure found.
    """
    if options is None or not isinstance(options, Mapping):
        return ConfigFailure(ConfigFailureKind.MISSING_MAPPINGS, MISSING_MAPPINGS_MESSAGE)

    error_mappings = _get_error_mappings(options)
    if _is_missing(error_mappings):
        return ConfigFailure(ConfigFailureKind.MISSING_MAPPINGS, MISSING_MAPPINGS_MESSAGE)

    if not isinstance(error_mappings, Mapping):
        return ConfigFailure(
            ConfigFailureKind.MAPPINGS_NOT_OBJECT, MAPPINGS_NOT_OBJECT_MESSAGE
        )

    if not error_mappings or _parse_entries(error_mappings) is None:
        return ConfigFailure(ConfigFailureKind.INVALID_SCHEMA, INVALID_SCHEMA_MESSAGE)

    candidate_logger = options.get(LOGGER_KEY)
    if candidate_logger and not implements_error_logger(candidate_logger):
        return ConfigFailure(
            ConfigFailureKind.INCOMPLETE_LOGGER, INCOMPLETE_LOGGER_MESSAGE
        )

    return None


def freeze_options(options: Optional[Mapping[str, Any]]) -> TranslatorOptions:
    """Validate options and capture them as immutable state.

    The mapping table is copied, so later changes to the caller's dict
    are not seen by the handler.

    Args:
        options: Raw options supplied by the embedding application.

    Returns:
        The frozen, validated options.

    Raises:
        ErrorTranslatorConfigError: If any validation rule fails.
    """
    failure = validate_options(options)
    if failure is not None:
        raise ErrorTranslatorConfigError.from_failure(failure)

    entries = _parse_entries(_get_error_mappings(options))
    return TranslatorOptions(
        error_mappings=MappingProxyType(entries),
        logger=options.get(LOGGER_KEY) or None,
    )
