"""
Data Transfer Objects for translator configuration.

Mapping entries are validated with pydantic so malformed tables are
rejected at startup. The options bundle is a frozen dataclass captured
by the handler for the life of the process.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Annotated, Optional

from pydantic import (
    AllowInfNan,
    BaseModel,
    ConfigDict,
    Strict,
    StrictStr,
    field_validator,
)

from error_translator.domain.ports import ErrorLogger

MIN_HTTP_STATUS = 100
MAX_HTTP_STATUS = 599


class ErrorMappingEntry(BaseModel):
    """A single mapping table entry.

    Attributes:
        code: HTTP status code between 100 and 599. Integral floats such
            as 404.0 are accepted; fractions, booleans and numeric strings
            are not.
        message: Text returned to the client.
    """

    model_config = ConfigDict(frozen=True)

    code: Annotated[float, Strict(), AllowInfNan(False)]
    message: StrictStr

    @field_validator("code")
    @classmethod
    def _check_status_code(cls, value: float) -> float:
        if not float(value).is_integer():
            raise ValueError("code must be a whole number")
        if not MIN_HTTP_STATUS <= value <= MAX_HTTP_STATUS:
            raise ValueError("code must be an HTTP status code")
        return value


@dataclass(frozen=True)
class TranslatorOptions:
    """Validated translator configuration.

    Attributes:
        error_mappings: Read-only table from error message text to entry.
        logger: Optional logger used to report unmapped errors.
    """

    error_mappings: Mapping[str, ErrorMappingEntry]
    logger: Optional[ErrorLogger] = None
