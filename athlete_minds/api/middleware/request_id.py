"""
Request ID middleware for request correlation.

- Accepts X-Request-ID from the client or generates one
- Exposes it on request.state and in the response headers
- Sets the logging context var so every log line of the request carries it
- Logs one access line per request, as a warning when the request was slow
"""

import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from athlete_minds.logging_config import get_logger, request_id_var

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Assign a request ID to each request for correlation across logs."""

    def __init__(self, app: ASGIApp, slow_request_ms: int = 1000):
        super().__init__(app)
        self.slow_request_ms = slow_request_ms

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        token = request_id_var.set(request_id)

        try:
            start = time.perf_counter()
            response = await call_next(request)
            duration_ms = round((time.perf_counter() - start) * 1000, 1)

            response.headers[REQUEST_ID_HEADER] = request_id

            fields = {
                "path": request.url.path,
                "method": request.method,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            }
            if duration_ms > self.slow_request_ms:
                logger.warning("Slow request", extra=fields)
            else:
                logger.info("%s %s %s", request.method, request.url.path, response.status_code, extra=fields)

            return response
        finally:
            request_id_var.reset(token)
