"""Base exceptions for the application."""

from typing import Dict, Any, Optional


class ServiceError(Exception):
    """Base class for service errors.
    
    All service-specific exceptions should inherit from this class.
    The error context can be used to provide additional information
    that will be included in the error response.
    """
    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        """Initialize service error.
        
        Args:
            message: Error message
            context: Optional error context
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class ValidationError(ServiceError):
    """Raised when validation fails.
    
    Used for all validation-related errors including:
    - Pattern configuration limits
    - Theta-rho data format
    - Custom pattern metadata
    """
    pass


class ConfigurationError(ServiceError):
    """Raised when configuration is invalid.
    
    Used for all configuration-related errors including:
    - Invalid config format
    - Config loading errors
    """
    pass
