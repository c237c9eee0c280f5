"""
AlgoTest Backend - Request ID Middleware
=========================================

What:  Assigns a correlation ID to each incoming request and echoes it in the response.
How:   Reuses the client's X-Request-ID header when it is a well-formed token
       (1-64 characters of letters, digits, '.', '_' or '-'), otherwise
       generates a short UUID; stores it in a ContextVar and in request.state.
Who:   Read by the access logger and by every exception handler in main.py.
"""

import re
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local storage for the current request ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 64

_REQUEST_ID_PATTERN = re.compile(rf"[A-Za-z0-9._-]{{1,{MAX_REQUEST_ID_LENGTH}}}")


def resolve_request_id(client_value: str | None) -> str:
    """Client-supplied ID if it is a safe token, else a fresh 8-char ID."""
    if client_value and _REQUEST_ID_PATTERN.fullmatch(client_value):
        return client_value
    return str(uuid.uuid4())[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware that tags every request and response with a request ID."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid

        return response
