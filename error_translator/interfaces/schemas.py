"""
Pydantic schemas for the translator's wire format.

Every translated error is serialized as ErrorResponse: a JSON object
with exactly one field, ``message``.
"""

from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """Response body for a translated error."""

    model_config = ConfigDict(extra="forbid")

    message: str

