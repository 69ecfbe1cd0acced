"""
Anythink Market Backend — Request Logging Middleware
=====================================================

What:  One access log line per HTTP request.
How:   Measures time around the downstream call and logs method, route,
       status, duration, request ID and client address.
When:  Runs after RequestIDMiddleware, so the request ID is available.

Request and response bodies are never logged, and matched requests are logged
by route template (`/comments/{comment_id}`) rather than raw path, so comment
text, author names and ids stay out of the access log.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.middleware.request_id import request_id_var

logger = logging.getLogger("anythink.access")


def route_path(request: Request) -> str:
    """Template of the matched route, or the raw path when nothing matched (404s)."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs structured information about each HTTP request and response.

    Level by status class: 5xx → ERROR, 4xx → WARNING, otherwise INFO.
    `/health` is skipped; probes hit it every few seconds.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        # request.client is None under some test transports
        client_ip = getattr(request.client, "host", "unknown") if request.client else "unknown"
        method = request.method
        rid = request_id_var.get("")

        if request.url.path == "/health":
            return await call_next(request)

        response = await call_next(request)
        path = route_path(request)

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
