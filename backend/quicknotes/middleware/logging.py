"""
QuickNotes Backend — Request Logging Middleware
=================================================

What:  One access log line per request with status and duration.
Who:   Applied to every request; runs after RequestIDMiddleware.

Levels:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

Form bodies (note titles and contents) are never logged. A redirect after
a create logs its Location so the access line shows where the client went.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from quicknotes.middleware.request_id import request_id_var

logger = logging.getLogger("quicknotes.access")

# Health probes are too frequent to log
QUIET_PATHS = frozenset({"/health"})


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status, duration and request ID."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        line = "%s %s -> %d in %.1fms [%s]"
        args = [
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request_id_var.get(""),
        ]
        location = response.headers.get("location")
        if location:
            line += " location=%s"
            args.append(location)

        logger.log(level_for_status(response.status_code), line, *args)
        return response
