"""
Wordbank Backend — Request Logging Middleware
==============================================

What:  One access-log line per HTTP request with status and duration.
Why:   The service only logs failures. The access line is the one record of
       every insert and listing, including the 400s that the service
       deliberately keeps out of its error log.
How:   Times the downstream call and logs method, path, status, duration,
       request ID and client IP.
When:  Runs inside RequestIDMiddleware so the request ID is already set.

Log line:
    GET /api/addWord/hello 200 3.1ms [a1b2c3d4] from 127.0.0.1

What we log vs what we DON'T log:
    ✅ Log: method, path, status, duration, IP, request ID
    ❌ Don't log: request bodies (POST /api/addWord payloads)
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from wordbank.middleware.request_id import request_id_var

logger = logging.getLogger("wordbank.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs structured information about each HTTP request and response.

    Level by status class:
        5xx → ERROR   (store down or a bug; needs a look)
        4xx → WARNING (client sent no word)
        else → INFO

    Why not uvicorn's access log:
        It has no request ID and no duration; it is turned down to WARNING
        in setup_logging() so lines are not doubled.
    """

    # What: Paths excluded from the access log
    # Why: Container probes hit /health every few seconds
    SKIPPED_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.SKIPPED_PATHS:
            return await call_next(request)

        # perf_counter: monotonic, unaffected by wall-clock adjustments
        start_time = time.perf_counter()
        # request.client is None under some ASGI test transports
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        path = request.url.path
        rid = request_id_var.get("")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
