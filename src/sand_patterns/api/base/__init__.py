"""Base API components."""

from sand_patterns.api.base.exceptions import (
    ServiceError,
    ValidationError,
    ConfigurationError,
)

__all__ = [
    "ServiceError",
    "ValidationError",
    "ConfigurationError",
]
