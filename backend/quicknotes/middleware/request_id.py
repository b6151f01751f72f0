"""
QuickNotes Backend — Request ID Middleware
============================================

What:  Assigns a short ID to each incoming request and echoes it back.
How:   Reads X-Request-ID from the client or generates one, stores it in a
       ContextVar for loggers and error handlers, and returns it in the
       response headers.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local storage for the current request ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Behavior:
        1. Use the client's X-Request-ID header when present
        2. Otherwise generate an 8-character ID
        3. Store it in request_id_var and request.state
        4. Add it to the response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid

        return response
