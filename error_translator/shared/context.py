"""
Request context middleware.

Attaches contextual info to every request so that the error
translator can forward it verbatim into its log payloads.
Stored on ``request.state.context``.

No business logic. Pure cross-cutting concern.
"""

from typing import Any, Optional
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

CONTEXT_STATE_KEY = "context"
DEFAULT_REQUEST_ID_HEADER = "x-request-id"


def get_request_context(request: Request) -> Optional[Any]:
    """Return the contextual info attached to ``request``, if any."""
    return getattr(request.state, CONTEXT_STATE_KEY, None)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Middleware that records request id, method and path on the request.

    The request id is taken from the configured header when present,
    otherwise a new one is generated.
    """

    def __init__(
        self, app: ASGIApp, request_id_header: str = DEFAULT_REQUEST_ID_HEADER
    ) -> None:
        super().__init__(app)
        self.request_id_header = request_id_header

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Attach the context, then hand the request down the pipeline."""
        request_id = request.headers.get(self.request_id_header) or uuid4().hex
        setattr(
            request.state,
            CONTEXT_STATE_KEY,
            {
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
            },
        )
        return await call_next(request)
