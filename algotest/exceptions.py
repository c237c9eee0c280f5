"""
AlgoTest Backend - Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the few ways a request can fail.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by the execution dispatcher and by the routing layer.

Exception Hierarchy:
    AlgoTestError (base)
    ├── ValidationError          → 400 Bad Request (missing or malformed fields)
    ├── UnknownAlgorithmError    → 400 Bad Request (identifier outside the catalog)
    └── RouteNotFoundError       → 404 Not Found

    Anything else that escapes a route is an unanticipated fault → 500.
"""

from typing import Any, Dict, Optional


class AlgoTestError(Exception):
    """
    Base exception for all AlgoTest application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional structured detail about the failure
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(AlgoTestError):
    """
    Raised when the request body is missing required fields or is malformed.

    When:    algorithmId/input absent, input of the wrong shape, input too long.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "Missing required fields: algorithmId and input",
            "details": {"fields": ["algorithmId", "input"]},
            "request_id": "a1b2c3d4"
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class UnknownAlgorithmError(AlgoTestError):
    """
    Raised when an algorithm identifier does not match any catalog entry.

    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        algorithm_id: Any = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["algorithm_id"] = algorithm_id
        super().__init__(message="Invalid algorithm ID", context=ctx)
        self.algorithm_id = algorithm_id


class RouteNotFoundError(AlgoTestError):
    """
    Raised when no route matches the request method and path.

    HTTP:    404 Not Found
    """

    def __init__(
        self,
        path: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["path"] = path
        super().__init__(message="Route not found", context=ctx)
        self.path = path
