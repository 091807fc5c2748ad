"""Pattern sub-services."""

from sand_patterns.api.pattern.services.preset_service import PresetService
from sand_patterns.api.pattern.services.custom_pattern_service import CustomPatternService

__all__ = ["PresetService", "CustomPatternService"]
