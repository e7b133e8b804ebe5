"""
Request Context Middleware

Binds per-request logging context and logs one line per request.

Every log entry emitted while handling a request carries:
    request_id   ← X-Request-ID header, or a fresh uuid4 hex
    method, path

The request id is echoed back in the X-Request-ID response header.
"""

import time
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from brain.shared.core.logging import clear_log_context, log_context, logger


REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Attach request_id/method/path to the structlog context."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        clear_log_context()
        log_context(request_id=request_id, method=request.method, path=request.url.path)

        started = time.perf_counter()
        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            logger.info(
                "Request completed",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            return response
        finally:
            clear_log_context()
