"""Mapping from pattern errors to HTTP errors."""

from fastapi import HTTPException, status
from loguru import logger

from sand_patterns.utils.errors import create_error, error_from_service_error
from sand_patterns.api.base.exceptions import ServiceError, ValidationError
from sand_patterns.api.pattern.exceptions import PatternNotFoundError, ThetaRhoFormatError


def to_http_error(error: Exception, action: str) -> HTTPException:
    """Convert an exception raised while handling a request."""
    if isinstance(error, HTTPException):
        return error
    if isinstance(error, PatternNotFoundError):
        return error_from_service_error(status.HTTP_404_NOT_FOUND, error)
    if isinstance(error, (ValidationError, ThetaRhoFormatError)):
        return error_from_service_error(status.HTTP_422_UNPROCESSABLE_ENTITY, error)

    error_msg = f"Failed to {action}: {str(error)}"
    logger.error(error_msg)
    if isinstance(error, ServiceError):
        return create_error(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=error_msg,
            details=error.context or None
        )
    return create_error(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message=error_msg
    )
