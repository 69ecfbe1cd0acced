"""
Anythink Market Backend — Request ID Middleware
================================================

What:  Assigns a correlation ID to each incoming request and returns it in
       the `X-Request-ID` response header.
How:   Takes the client's X-Request-ID header when it is a short token of
       safe characters, otherwise generates a short UUID. The ID is
       stored in a ContextVar for loggers and error handlers, and in
       `request.state` for route handlers.
"""

import re
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

# Client IDs end up in log lines and error bodies
_CLIENT_ID = re.compile(r"[A-Za-z0-9._\-]{1,64}")


def resolve_request_id(header: Optional[str]) -> str:
    """Return the client's ID if it is usable, else a fresh 8-character one."""
    if header and _CLIENT_ID.fullmatch(header):
        return header
    return str(uuid.uuid4())[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that assigns a unique ID to each request for tracing.

    Behavior:
        1. Use the client's X-Request-ID header when present and well-formed
        2. Otherwise generate the first 8 characters of a UUID4
        3. Store in ContextVar and request.state
        4. Echo it in the response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get("X-Request-ID"))

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)

        response.headers["X-Request-ID"] = rid
        return response
