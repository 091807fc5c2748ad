"""Pattern service exceptions."""

from typing import Dict, Any, Optional
from ..base.exceptions import ServiceError, ValidationError


class PatternError(ServiceError):
    """Base class for pattern errors."""
    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, context)


class ThetaRhoFormatError(PatternError):
    """Raised when theta-rho text cannot be parsed."""
    pass


class PatternNotFoundError(PatternError):
    """Raised when a preset or custom pattern id is unknown."""
    pass


class CustomPatternError(PatternError):
    """Raised when custom pattern storage fails."""
    pass


class ConfigValidationError(ValidationError):
    """Raised when a pattern configuration is outside the supported limits."""
    def __init__(self, errors, context: Optional[Dict[str, Any]] = None):
        self.errors = list(errors)
        context = dict(context or {})
        context.setdefault("errors", self.errors)
        super().__init__(f"Invalid pattern config: {'; '.join(self.errors)}", context)
