"""
Doubler API - Custom Exception Hierarchy
=========================================

What:  Application-specific exceptions mapped to HTTP responses.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return the structured ErrorResponse envelope with the right status code.
Who:   Raised by the transformation service; caught by global handlers.

Exception Hierarchy:
    DoublerError (base)            → 500 Internal Server Error
    └── InvalidArgumentError       → 400 Bad Request (client can fix)
"""

from typing import Any, Dict, Optional


class DoublerError(Exception):
    """
    Base exception for all Doubler application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged server-side)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class InvalidArgumentError(DoublerError):
    """
    Raised when an input violates a semantic constraint.

    When:    param1 is not divisible by 2.
    HTTP:    400 Bad Request, error code "invalid_argument"

    Example response:
        {
            "error": "invalid_argument",
            "message": "invalid argument",
            "details": {"field": "param1", "value": 3},
            "request_id": "a1b2c3d4"
        }
    """

    def __init__(
        self,
        message: str = "invalid argument",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field
