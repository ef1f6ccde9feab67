"""Request logging middleware: one line per request with status and latency."""


import logging
import time
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs `METHOD /path?query -> status (Nms)` after every request.

    Unhandled errors never produce a response here (the outer
    ServerErrorMiddleware renders the 500), so they are logged as
    `-> 500` at ERROR and re-raised. Other 5xx responses log at WARNING,
    everything else at INFO.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.monotonic()
        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"

        try:
            response = await call_next(request)
        except Exception:
            duration_ms = round((time.monotonic() - start) * 1000)
            logger.error("%s %s -> 500 (%dms)", request.method, path, duration_ms)
            raise

        duration_ms = round((time.monotonic() - start) * 1000)
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(level, "%s %s -> %s (%dms)", request.method, path, response.status_code, duration_ms)

        return response
