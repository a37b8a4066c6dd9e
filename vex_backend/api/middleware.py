"""
Access logging middleware.

Writes one line per request once the handler has finished:

    GET /test 200 0.41ms

The middleware only observes; responses and exceptions pass through
unchanged.
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import (
    BaseHTTPMiddleware,
    RequestResponseEndpoint,
)
from starlette.types import ASGIApp


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and latency of every request."""

    def __init__(self, app: ASGIApp, logger: logging.Logger) -> None:
        super().__init__(app)
        self.logger = logger

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # Starlette turns the exception into a 500 further out
            self._log(request, 500, start)
            raise
        self._log(request, response.status_code, start)
        return response

    def _log(self, request: Request, status_code: int, start: float) -> None:
        latency_ms = (time.perf_counter() - start) * 1000
        self.logger.info(
            f"{request.method} {request.url.path} {status_code} "
            f"{latency_ms:.2f}ms",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": status_code,
                "latency_ms": latency_ms,
            },
        )
