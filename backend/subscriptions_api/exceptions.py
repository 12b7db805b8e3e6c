"""
Subscriptions API — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the failures a request can hit.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       answer with the matching status code and an EMPTY body; message and
       context only ever reach the server log.
Who:   Raised by the form parser and the service layer.

Exception Hierarchy:
    SubscriptionsError (base)
    ├── ValidationError   → 400 Bad Request (malformed form body)
    └── DatabaseError     → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class SubscriptionsError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Human-readable error description (logged)
        context:  Additional debug info (logged, never returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(SubscriptionsError):
    """
    Raised when the request body cannot be parsed into the expected form.

    When:    Missing `email`/`name`, non-text values, wrong content type.
    HTTP:    400 Bad Request
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


class DatabaseError(SubscriptionsError):
    """
    Raised when a database statement fails.

    When:    Connection lost mid-query, constraint violation, bad data
             reaching the driver.
    HTTP:    500 Internal Server Error

    The driver error is recorded in `context` for the log; the client
    only sees the status code.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
