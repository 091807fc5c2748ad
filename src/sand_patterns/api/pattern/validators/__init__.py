"""Pattern validators."""

from sand_patterns.api.pattern.validators.config_validator import validate_config

__all__ = ["validate_config"]
