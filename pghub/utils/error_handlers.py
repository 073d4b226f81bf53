"""
Error handling decorators and utilities for API endpoints.

This module centralizes the translation of application exceptions into
HTTP responses so that every endpoint reports failures the same way.
"""

from functools import wraps
from typing import Callable, Optional
from fastapi import HTTPException
import inspect
import logging

from pghub.constants import HTTPStatus
from pghub.exceptions import (
    ApplicationError,
    ConflictError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def to_http_exception(
    operation_name: str,
    error: Exception,
    failure_detail: Optional[str] = None
) -> HTTPException:
    """
    Map an exception raised below the API layer to an HTTPException.

    Args:
        operation_name: Human-readable name of the operation
        error: The exception to translate
        failure_detail: Client message used for server-side failures instead of the default

    Returns:
        HTTPException carrying the status code and client-facing detail
    """
    if isinstance(error, NotFoundError):
        logger.info(f"{operation_name} - Not found: {error.message}")
        return HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=error.message)
    if isinstance(error, ValidationError):
        logger.warning(f"{operation_name} - Validation error: {len(error.errors)} rule(s) violated")
        return HTTPException(
            status_code=HTTPStatus.BAD_REQUEST,
            detail={"message": error.message, "errors": error.errors}
        )
    if isinstance(error, ConflictError):
        logger.warning(f"{operation_name} - Conflict: {error.message}")
        return HTTPException(status_code=HTTPStatus.CONFLICT, detail=error.message)
    if isinstance(error, DatabaseError):
        logger.error(f"{operation_name} - Database error: {error.message}", exc_info=error)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=failure_detail or f"Database operation failed: {error.message}"
        )
    if isinstance(error, ApplicationError):
        logger.error(f"{operation_name} - Application error: {error.message}", exc_info=error)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=failure_detail or f"{operation_name} failed: {error.message}"
        )

    logger.error(f"{operation_name} - Unexpected error: {error}", exc_info=error)
    return HTTPException(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        detail=failure_detail or f"{operation_name} failed. Please check server logs or contact support."
    )


def handle_api_errors(operation_name: str, failure_detail: Optional[str] = None):
    """
    Decorator to handle common API errors consistently across endpoints.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Post creation")
        failure_detail: Fixed client message for 5xx failures, hiding internals

    Returns:
        Decorated function that handles errors uniformly

    Example:
        @router.delete("/posts/{post_id}")
        @handle_api_errors("Post deletion", failure_detail="An error occurred while deleting the post.")
        def delete_post(post_id: str, service: IPostService = Depends(get_post_service)):
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
                raise to_http_exception(operation_name, e, failure_detail) from e

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                raise to_http_exception(operation_name, e, failure_detail) from e

        # Return appropriate wrapper based on whether the function is async
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
