"""
Domain entities for error translation.

Plain value objects: the resolved response written to the client
and the outcome of configuration validation.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from enum import Enum

HTTP_400 = 400
HTTP_500 = 500


@dataclass(frozen=True)
class ResolvedResponse:
    """Status code and client-facing message for a translated error.

    Attributes:
        code: HTTP status code written to the response.
        message: Text placed in the JSON body's ``message`` field.
    """

    code: int
    message: str


DEFAULT_BAD_REQUEST = ResolvedResponse(
    code=HTTP_400, message="Request body must be in JSON syntax."
)
DEFAULT_INTERNAL_ERROR = ResolvedResponse(code=HTTP_500, message="Server Error")


class ConfigFailureKind(Enum):
    """Reason a translator configuration was rejected."""

    MISSING_MAPPINGS = "missing_mappings"
    MAPPINGS_NOT_OBJECT = "mappings_not_object"
    INVALID_SCHEMA = "invalid_schema"
    INCOMPLETE_LOGGER = "incomplete_logger"


@dataclass(frozen=True)
class ConfigFailure:
    """A rejected configuration: what went wrong and the exact message."""

    kind: ConfigFailureKind
    message: str
