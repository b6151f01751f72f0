"""
QuickNotes Backend — Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions for the three failure classes of the
       note workflow.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by the store and services; caught by global handlers.

Exception Hierarchy:
    QuickNotesError (base)       → 500 Internal Server Error
    ├── ValidationError          → 400 Bad Request (user resubmits)
    ├── NotFoundError            → 404 Not Found
    └── StorageError             → 500 Internal Server Error (not retried)

Design Decision:
    A rejected submission is raised rather than returned as a result object.
    The handler in main.py converts it into the structured 400 payload, so
    the service never has to thread a success/failure value back through
    each caller.
"""

from typing import Any, Dict, Optional


class QuickNotesError(Exception):
    """
    Base exception for all QuickNotes application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client,
                  except for validation details)
    """

    status_code = 500
    error_code = "server_error"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(QuickNotesError):
    """
    Raised when a submitted note fails validation.

    When:    Title missing or shorter than the configured minimum,
             content missing or empty.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Invalid title - must be at least 5 characters long",
            "details": {"field": "title"}
        }
    """

    status_code = 400
    error_code = "validation_error"

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


class NotFoundError(QuickNotesError):
    """
    Raised when a requested note (or, under the "not_found" empty policy,
    any note at all) does not exist.

    HTTP:    404 Not Found
    """

    status_code = 404
    error_code = "not_found"

    def __init__(
        self,
        message: str = "The requested note was not found",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = "note"
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id


class StorageError(QuickNotesError):
    """
    Raised when the notes document cannot be read, parsed, or written.

    When:    Malformed JSON, unexpected document shape, permission denied,
             disk full, any OS-level I/O error.
    HTTP:    500 Internal Server Error

    Recovery:
        None. The create workflow is all-or-nothing; the caller sees a 500
        and the full context (path, OS error) is logged server-side only.
    """

    status_code = 500
    error_code = "storage_error"

    def __init__(
        self,
        message: str = "Note storage operation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
