"""
Shared fixtures for the error translator tests.
"""

from typing import Any, Optional
from unittest.mock import MagicMock

import pytest
from starlette.requests import Request


def _make_request(context: Optional[Any] = None, path: str = "/") -> Request:
    """Build a bare Starlette request, optionally carrying contextual info."""
    request = Request(
        {
            "type": "http",
            "method": "GET",
            "path": path,
            "headers": [(b"x-request-id", b"requestId")],
            "query_string": b"",
        }
    )
    if context is not None:
        request.state.context = context
    return request


@pytest.fixture
def make_request():
    return _make_request


@pytest.fixture
def error_mappings() -> dict[str, dict[str, Any]]:
    return {
        "error1": {"code": 400, "message": "stam1"},
        "error2": {"code": 401, "message": "stam2"},
    }


@pytest.fixture
def error_logger() -> MagicMock:
    return MagicMock(spec=["trace", "info", "error"])
