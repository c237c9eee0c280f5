# Middleware package init
"""
AlgoTest Backend - Middleware Package
======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [Request ID] → [Logging] → [Security Headers] → [CORS] → Route Handler

    - Request ID runs first so every later log line can be correlated
    - Logging measures the full downstream duration and final status
    - Security headers and CORS decorate the response on the way out
"""
