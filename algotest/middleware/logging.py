"""
AlgoTest Backend - Access Log Middleware
=========================================

What:  One Apache "combined" access-log line per HTTP request.
How:   Builds the line from the request line, final status, response size,
       Referer and User-Agent, then appends duration and request ID.
       Level follows the status class (5xx → ERROR, 4xx → WARNING, else INFO).
When:  Runs inside RequestIDMiddleware so the request ID is already set.

Log line:
    127.0.0.1 - - [15/Jan/2024:12:00:00 +0000] "POST /api/run-algorithm HTTP/1.1" 200 161
    "-" "curl/8.4.0" 1.3ms [a1b2c3d4]

A route that raises never produces a response here; such requests are logged
as 500 with size "-" and the exception continues to the 500 handler.
Request bodies are never logged.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from algotest.middleware.request_id import request_id_var

logger = logging.getLogger("algotest.access")

CLF_DATE_FORMAT = "%d/%b/%Y:%H:%M:%S +0000"


def _level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Writes a combined-format access line for every request except health checks."""

    SILENT_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.SILENT_PATHS:
            return await call_next(request)

        started_at = datetime.now(timezone.utc)
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            self._log(request, 500, None, started_at, start_time)
            raise

        self._log(
            request,
            response.status_code,
            response.headers.get("content-length"),
            started_at,
            start_time,
        )
        return response

    def _log(
        self,
        request: Request,
        status: int,
        content_length: Optional[str],
        started_at: datetime,
        start_time: float,
    ) -> None:
        duration_ms = (time.perf_counter() - start_time) * 1000
        client_ip = request.client.host if request.client else "-"
        query = request.url.query
        url = f"{request.url.path}?{query}" if query else request.url.path
        http_version = request.scope.get("http_version", "1.1")
        referer = request.headers.get("referer", "-")
        user_agent = request.headers.get("user-agent", "-")
        rid = request_id_var.get("")

        logger.log(
            _level_for(status),
            '%s - - [%s] "%s %s HTTP/%s" %d %s "%s" "%s" %.1fms [%s]',
            client_ip,
            started_at.strftime(CLF_DATE_FORMAT),
            request.method,
            url,
            http_version,
            status,
            content_length or "-",
            referer,
            user_agent,
            duration_ms,
            rid,
            extra={
                "request_id": rid,
                "method": request.method,
                "url": url,
                "status": status,
                "content_length": content_length,
                "referer": referer,
                "user_agent": user_agent,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
