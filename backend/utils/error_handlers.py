"""
Error handling decorators and utilities for API endpoints.

This module centralizes the translation of application exceptions into HTTP
responses so each endpoint only deals with the success path.
"""

from functools import wraps
from typing import Callable
from fastapi import HTTPException
import inspect
import logging

from constants import HTTPStatus
from exceptions import (
    ConfigurationError,
    EntityNotFoundError,
    InvalidArgumentError,
    PersistenceError,
    ApplicationError
)

logger = logging.getLogger(__name__)


def to_http_exception(operation_name: str, error: Exception) -> HTTPException:
    """
    Convert an exception raised below the API layer into an HTTPException.

    Client errors are logged as warnings; server errors with a traceback.
    """
    if isinstance(error, EntityNotFoundError):
        logger.warning(f"{operation_name} - Not found: {error.message}")
        return HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=error.message)
    if isinstance(error, InvalidArgumentError):
        logger.warning(f"{operation_name} - Invalid argument: {error.message}")
        return HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=error.message)
    if isinstance(error, PersistenceError):
        if error.constraint_violation:
            logger.warning(f"{operation_name} - Constraint violation: {error.message}")
            return HTTPException(
                status_code=HTTPStatus.CONFLICT,
                detail=f"{operation_name} conflicts with existing data"
            )
        logger.error(f"{operation_name} - Database error: {error.message}", exc_info=error)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"Database operation failed during {operation_name}"
        )
    if isinstance(error, ConfigurationError):
        logger.error(f"{operation_name} - Configuration error: {error.message}", exc_info=error)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"{operation_name} failed: server misconfigured"
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
        detail=f"{operation_name} failed. Please check server logs or contact support."
    )


def handle_api_errors(operation_name: str):
    """
    Decorator to handle common API errors consistently across endpoints.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Create booking")

    Returns:
        Decorated function that handles errors uniformly

    Example:
        @router.get("/bookings/{booking_id}")
        @handle_api_errors("Get booking")
        def get_booking(booking_id: int, service = Depends(get_booking_service)):
            return service.get_by_id(booking_id)
    """
    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                # Re-raise HTTPException as-is to preserve status code and detail
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

        # Return appropriate wrapper based on whether the function is async
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        else:
            return sync_wrapper

    return decorator
