"""
Error handling decorators for API endpoints.

Centralizes the translation of application exceptions into HTTP responses
so every route reports failures the same way.
"""

import inspect
import logging
from functools import wraps
from typing import Callable

from fastapi import HTTPException

from petclinic.constants import HTTPStatus
from petclinic.exceptions import ApplicationError, DatabaseError, NotFoundError

logger = logging.getLogger(__name__)


def to_http_exception(operation_name: str, error: Exception) -> HTTPException:
    """
    Map an exception raised while handling a request to an HTTPException.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Show owner")
        error: The exception raised

    Returns:
        HTTPException with the status code and detail for this error
    """
    if isinstance(error, NotFoundError):
        logger.warning(f"{operation_name} - Not found: {error.message}")
        return HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=error.message)
    if isinstance(error, DatabaseError):
        logger.error(f"{operation_name} - Database error: {error.message}", exc_info=error)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"{operation_name} failed: database error. Please check server logs."
        )
    if isinstance(error, ApplicationError):
        logger.error(f"{operation_name} - Application error: {error.message}", exc_info=error)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"{operation_name} failed: {error.message}"
        )
    logger.error(f"{operation_name} - Unexpected error: {error}", exc_info=error)
    return HTTPException(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        detail=f"{operation_name} failed. Please check server logs."
    )


def handle_api_errors(operation_name: str):
    """
    Decorator to handle application errors consistently across endpoints.

    HTTPExceptions raised by the endpoint pass through unchanged; any other
    exception is logged and converted by ``to_http_exception``.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Find owners")

    Returns:
        Decorated function that handles errors uniformly

    Example:
        @router.get("/owners/{owner_id}")
        @handle_api_errors("Show owner")
        def show_owner(owner_id: int, ...):
            ...
    """
    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                raise to_http_exception(operation_name, e) from e

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                raise to_http_exception(operation_name, e) from e

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
