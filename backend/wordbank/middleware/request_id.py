"""
Wordbank Backend — Request ID Middleware
=========================================

What:  Assigns a correlation ID to each incoming request and returns it in
       the X-Request-ID response header.
Why:   A failed insert logs its driver error from the service, the 500 from
       the exception handler, and the access line from the logging
       middleware. The shared ID ties those three lines to one request.
How:   Reuses the client's X-Request-ID header when present, otherwise
       generates a short UUID; stores it in a ContextVar for loggers.
When:  Outermost application middleware, so every later log line sees the ID.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# ── Context Variable ──────────────────────────────────────────────────────
# What: Coroutine-local storage for the current request ID
# Why ContextVar: concurrent requests share one thread and one event loop;
# each request's task sees only its own value
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that assigns a unique ID to each request for tracing.

    Behavior:
        1. Use the client's X-Request-ID header if present
        2. Otherwise generate the first 8 chars of a UUID4
        3. Store in ContextVar and request.state
        4. Add to response headers

    Why accept client-provided IDs:
        A caller that already tags its requests can grep our logs with its
        own ID instead of copying ours from the response.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 8 chars is enough to tell concurrent requests apart in a log tail
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            # Restore the previous value so the ID never outlives its request
            request_id_var.reset(token)

        response.headers["X-Request-ID"] = rid
        return response
