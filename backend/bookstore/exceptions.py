"""
Bookstore Backend — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the rejected-request branches of
       the CRUD endpoints.
How:   Each exception carries a message and an optional context dict. The
       handle_request decorator (routes/handlers.py) and the global handlers
       in main.py translate them into HTTP status codes.
Who:   Raised by route handlers; caught by the decorator or global handlers.

Exception Hierarchy:
    BookstoreError (base)
    ├── BadRequestError    → 400 Bad Request (missing/malformed input)
    ├── NotFoundError      → 404 Not Found
    └── PersistenceError   → 500 Internal Server Error (write had no effect)

Anything else that escapes a handler is an unhandled fault and becomes a 500
whose message includes the exception text and its inner exception.
"""

from typing import Any, Dict, Optional


class BookstoreError(Exception):
    """
    Base exception for all Bookstore application errors.

    Attributes:
        message:  User-facing error description (returned in the API response)
        context:  Additional debug info (logged and returned as "details")
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


class BadRequestError(BookstoreError):
    """
    Raised when the request is missing data or the data does not validate.

    When:    Null body, body failing DTO validation, id < 1, path id != body id.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "bad_request",
            "message": "Authors - Update: Author update failed due to a bad data request.",
            "details": {"id": 3, "body_id": 4}
        }
    """

    status_code = 400
    error_code = "bad_request"

    def __init__(
        self,
        message: str = "Bad request",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(BookstoreError):
    """
    Raised when a requested resource does not exist.

    HTTP:    404 Not Found

    The repository returns None for missing rows; route handlers convert that
    None into this exception.
    """

    status_code = 404
    error_code = "not_found"

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            message = f"The requested {resource} was not found"
            if resource_id is not None:
                message = f"{resource} with id '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class PersistenceError(BookstoreError):
    """
    Raised when a repository write reports that nothing was changed.

    When:    Repository.create/update/delete returned False.
    HTTP:    500 Internal Server Error, generic message.
    """

    status_code = 500
    error_code = "persistence_error"

    def __init__(
        self,
        message: str = "The requested change was not saved.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
