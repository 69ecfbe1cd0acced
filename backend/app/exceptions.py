"""
Anythink Market Backend — Custom Exception Hierarchy
=====================================================

What:  Application-specific exceptions for the three failure kinds the
       comment gateway can report, plus the shared base class.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by the comment service and the text case utilities; caught by
       the global handlers.

Exception Hierarchy:
    AnythinkError (base)
    ├── ValidationError          → 400 Bad Request (client can fix)
    ├── NotFoundError            → 404 Not Found
    └── StorageUnavailableError  → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class AnythinkError(Exception):
    """
    Base exception for all application errors.

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


class ValidationError(AnythinkError):
    """
    Raised when caller-supplied data fails a precondition.

    What:    A required comment field is missing or empty, or a text case
             helper received input it cannot convert.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "'author' is required",
            "details": {"field": "author"}
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


class NotFoundError(AnythinkError):
    """
    Raised when a referenced resource does not exist.

    What:    No comment is stored under the requested id.
    HTTP:    404 Not Found

    SQLAlchemy returns None for missing rows; the service layer turns that
    None into this exception so routes stay free of lookup checks.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class StorageUnavailableError(AnythinkError):
    """
    Raised when the database is unreachable or a statement fails.

    What:    Connection refused, connection lost mid-query, constraint
             violation, failed commit.
    HTTP:    500 Internal Server Error

    Security Note:
        The message is a short per-operation summary ("Failed to fetch
        comments"). Driver details go into `context` and are logged
        server-side only.
    """

    def __init__(
        self,
        message: str = "A storage error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
