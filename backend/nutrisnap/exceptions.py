"""
NutriSnap Backend - Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the two failure classes the API has.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return `{"error": message}` with the matching HTTP status code.
Who:   Raised by schemas, repositories and services; caught by global handlers.

Exception Hierarchy:
    NutriSnapError (base)        → 500 Internal Server Error
    ├── ValidationError          → 400 Bad Request (client can fix)
    └── RecordStoreError         → 500 Internal Server Error

The `message` is returned to the client verbatim, so it must never contain
file paths or raw OS errors. Those go into `context`, which is only logged.
"""

from typing import Any, Dict, Optional


class NutriSnapError(Exception):
    """
    Base exception for all NutriSnap application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NutriSnapError):
    """
    Raised when client input fails validation.

    When:    Missing meal name, missing or out-of-range index, non-numeric calories.
    HTTP:    400 Bad Request

    Example response:
        {"error": "Meal name required"}
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


class RecordStoreError(NutriSnapError):
    """
    Raised when a collection file cannot be read, parsed, or written.

    When:    File missing at read time, permission denied, disk full, malformed JSON,
             JSON of the wrong shape.
    HTTP:    500 Internal Server Error

    The store raises it with a generic message; services re-raise it with the
    operation-specific message ("Failed to delete meal") keeping the context.
    """

    def __init__(
        self,
        message: str = "Record store operation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
