"""
Middleware: request timing/access logging and secure headers.
Timing wraps innermost so its duration excludes the header work.
"""

import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from utils.logging import get_logger

logger = get_logger(__name__)

SLOW_REQUEST_MS = 500


class RequestTimingMiddleware(BaseHTTPMiddleware):
    """
    Adds X-Response-Time-Ms, logs each request at debug and slow ones as warnings.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        response.headers["X-Response-Time-Ms"] = f"{duration_ms:.2f}"
        fields = {
            "path": request.url.path,
            "method": request.method,
            "duration_ms": round(duration_ms, 2),
            "status": response.status_code,
        }
        if duration_ms > SLOW_REQUEST_MS:
            logger.warning("slow_request", extra=fields)
        else:
            logger.debug("request", extra=fields)
        return response


class SecureHeadersMiddleware(BaseHTTPMiddleware):
    """Adds security headers. A reverse proxy in front may override them."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["X-XSS-Protection"] = "1; mode=block"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Cache-Control"] = "no-store"
        return response
