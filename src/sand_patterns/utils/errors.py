"""Error utilities."""

from typing import Optional, Dict, Any
from fastapi import HTTPException

from sand_patterns.api.base.exceptions import ServiceError


def create_error(
    status_code: int,
    message: str,
    details: Optional[Dict[str, Any]] = None
) -> HTTPException:
    """Create an HTTP error response.
    
    Args:
        status_code: HTTP status code
        message: Error message
        details: Optional error details
        
    Returns:
        HTTPException whose detail is {"status": "error", "message": ..., "details": ...}
    """
    error_content = {
        "status": "error",
        "message": message
    }
    if details:
        error_content["details"] = details
        
    return HTTPException(
        status_code=status_code,
        detail=error_content
    )


def error_from_service_error(status_code: int, error: ServiceError) -> HTTPException:
    """Wrap a service error, carrying its context as error details."""
    return create_error(
        status_code=status_code,
        message=error.message,
        details=error.context or None
    )
