"""
Bookstore Backend — Request Handling Decorator
================================================

What:  The try / log / status-code translation every CRUD endpoint shares.
How:   `handle_request(location)` wraps an async endpoint:

           BadRequestError   → 400, logged at WARNING
           NotFoundError     → 404, logged at WARNING
           PersistenceError  → 500, logged at ERROR, generic message
           any other error   → 500, logged at ERROR with traceback; message is
                               "<location>: <exception> - <inner exception>"

       Successful results pass through untouched.
Who:   Applied to every endpoint built by routes/crud.py.

`location` is "<Resource> - <Operation>" (e.g. "Books - Update") and prefixes
every log line an operation writes.
"""

import functools
import logging
from typing import Any, Awaitable, Callable, Optional, TypeVar

from fastapi.responses import JSONResponse

from bookstore.exceptions import BookstoreError
from bookstore.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)

EndpointT = TypeVar("EndpointT", bound=Callable[..., Awaitable[Any]])


def error_body(
    error: str,
    message: str,
    details: Optional[dict] = None,
) -> dict:
    """JSON body matching schemas.common.ErrorResponse."""
    return {
        "error": error,
        "message": message,
        "details": details or None,
        "request_id": request_id_var.get(""),
    }


def error_response(exc: BookstoreError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.error_code, exc.message, exc.context),
    )


def internal_error_message(location: str, exc: BaseException) -> str:
    """
    "<location>: <message> - <inner exception>".

    The inner exception is `__cause__` (set by `raise ... from ...`), empty
    when there is none.
    """
    inner = exc.__cause__ if exc.__cause__ is not None else ""
    return f"{location}: {exc} - {inner}"


def handle_request(location: str) -> Callable[[EndpointT], EndpointT]:
    """
    Decorate an async FastAPI endpoint with the shared error translation.

    functools.wraps keeps the original signature visible to FastAPI, so path
    parameters, bodies and dependencies are resolved as if undecorated.

    Example:
        @router.get("/{entity_id}", response_model=AuthorResponse)
        @handle_request("Authors - Get")
        async def get_author(entity_id: int, db=Depends(get_db_session)):
            ...
    """

    def decorator(endpoint: EndpointT) -> EndpointT:
        @functools.wraps(endpoint)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await endpoint(*args, **kwargs)
            except BookstoreError as exc:
                if exc.status_code >= 500:
                    logger.error("%s", exc.message)
                else:
                    logger.warning("%s", exc.message)
                return error_response(exc)
            except Exception as exc:
                message = internal_error_message(location, exc)
                logger.error("%s", message, exc_info=True)
                return JSONResponse(
                    status_code=500,
                    content=error_body("internal_server_error", message),
                )

        return wrapper  # type: ignore[return-value]

    return decorator
