"""Logging middleware for HTTP requests."""
from time import perf_counter
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from core.config import get_settings
from core.logging import log_request, log_warning


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log each /api call with its status and duration.

    Request bodies carry connection strings, so only the method and path are
    logged. Calls slower than ``slow_request_ms`` get an extra warning, which
    usually points at a long-running query or an unreachable server.
    """

    async def dispatch(self, request: Request, call_next):
        if not request.url.path.startswith("/api"):
            return await call_next(request)

        start = perf_counter()
        response = await call_next(request)
        duration = (perf_counter() - start) * 1000

        log_request(request.method, request.url.path, response.status_code, duration)
        slow_ms = get_settings().slow_request_ms
        if slow_ms and duration >= slow_ms:
            log_warning(f"Slow request {request.url.path} took {duration:.0f}ms", "http")

        return response
