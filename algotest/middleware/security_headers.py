"""
AlgoTest Backend - Security Headers Middleware
===============================================

What:  Adds a conservative set of HTTP security headers to every response.
How:   Sets each header only if the route did not set it already.

Headers applied:
    Content-Security-Policy         (skipped for the interactive docs pages,
                                     which load Swagger/ReDoc assets from a CDN)
    Cross-Origin-Opener-Policy      same-origin
    Cross-Origin-Resource-Policy    same-origin
    Origin-Agent-Cluster            ?1
    Referrer-Policy                 no-referrer
    Strict-Transport-Security       max-age=15552000; includeSubDomains
    X-Content-Type-Options          nosniff
    X-DNS-Prefetch-Control          off
    X-Download-Options              noopen
    X-Frame-Options                 SAMEORIGIN
    X-Permitted-Cross-Domain-Policies none
    X-XSS-Protection                0
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

CONTENT_SECURITY_POLICY = "; ".join(
    [
        "default-src 'self'",
        "base-uri 'self'",
        "font-src 'self' https: data:",
        "form-action 'self'",
        "frame-ancestors 'self'",
        "img-src 'self' data:",
        "object-src 'none'",
        "script-src 'self'",
        "script-src-attr 'none'",
        "style-src 'self' https: 'unsafe-inline'",
        "upgrade-insecure-requests",
    ]
)

SECURITY_HEADERS = {
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Applies SECURITY_HEADERS, plus a CSP outside the docs pages."""

    DOCS_PATHS = {"/docs", "/docs/oauth2-redirect", "/redoc"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)

        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        if request.url.path not in self.DOCS_PATHS:
            response.headers.setdefault("Content-Security-Policy", CONTENT_SECURITY_POLICY)

        return response
