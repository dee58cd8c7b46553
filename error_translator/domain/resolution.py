"""
Error resolution rules.

Input: an exception and the frozen mapping table.
Output: Resolution (response to write, lookup key, whether to log).
Side effects: None.

The lookup key is the error's message text. Two unrelated errors that
happen to share a message resolve to the same entry; callers keying
the table on free-form messages should keep that in mind.
"""

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Optional, Protocol

from error_translator.domain.entities import (
    DEFAULT_BAD_REQUEST,
    DEFAULT_INTERNAL_ERROR,
    HTTP_500,
    ResolvedResponse,
)

JSON_POSITION_MARKER = "in JSON at position"
JSON_INVALID_ERROR_TYPE = "json_invalid"


class MappedEntry(Protocol):
    """Shape of a mapping table entry as seen by the resolver."""

    code: float
    message: str


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving a single error.

    Attributes:
        response: What to write back to the client.
        key: The message text used for the table lookup (may be None).
        should_log: True when the error is an unexpected server error.
    """

    response: ResolvedResponse
    key: Optional[str]
    should_log: bool


def _text_attribute(exc: BaseException, name: str) -> Optional[str]:
    value = getattr(exc, name, None)
    return value if isinstance(value, str) and value else None


def extract_error_key(exc: BaseException) -> Optional[str]:
    """Return the message text used to look the error up.

    Prefers an explicit ``message`` attribute, then an HTTP exception's
    ``detail``, then the exception text, then a legacy ``msg`` attribute.
    Attributes that are not strings are ignored.
    """
    return (
        _text_attribute(exc, "message")
        or _text_attribute(exc, "detail")
        or str(exc)
        or _text_attribute(exc, "msg")
    )


def _is_invalid_json_report(exc: BaseException) -> bool:
    """Return True for validation errors whose first item is ``json_invalid``."""
    errors = getattr(exc, "errors", None)
    if not callable(errors):
        return False
    items = errors()
    if not isinstance(items, Sequence) or not items:
        return False
    first = items[0]
    return isinstance(first, Mapping) and first.get("type") == JSON_INVALID_ERROR_TYPE


def is_json_syntax_error(exc: BaseException) -> bool:
    """Return True for errors raised while parsing malformed JSON text."""
    if isinstance(exc, json.JSONDecodeError):
        return True
    if _is_invalid_json_report(exc):
        return True
    if not isinstance(exc, SyntaxError):
        return False
    return JSON_POSITION_MARKER in (extract_error_key(exc) or "")


def resolve_error(
    exc: BaseException,
    mappings: Mapping[str, MappedEntry],
    fallback: ResolvedResponse = DEFAULT_INTERNAL_ERROR,
) -> Resolution:
    """Resolve an error against the mapping table.

    The JSON syntax override is decided on the candidate's code, not on
    whether a mapping was found: an explicit entry with code 500 is
    overridden too when the error is a JSON syntax error.

    Args:
        exc: The error raised upstream in the pipeline.
        mappings: Read-only table from message text to entry.
        fallback: Candidate used when the key is not mapped.

    Returns:
        The resolved response, the lookup key and the logging decision.
    """
    key = extract_error_key(exc)
    entry = mappings.get(key) if key is not None else None
    if entry is None:
        candidate = fallback
    else:
        candidate = ResolvedResponse(code=int(entry.code), message=entry.message)

    if candidate.code != HTTP_500:
        return Resolution(response=candidate, key=key, should_log=False)
    if is_json_syntax_error(exc):
        return Resolution(response=DEFAULT_BAD_REQUEST, key=key, should_log=False)
    return Resolution(response=candidate, key=key, should_log=True)
