"""Pattern API package."""

from sand_patterns.api.pattern.pattern_service import PatternService
from sand_patterns.api.pattern.dependencies import get_pattern_service


__all__ = [
    "PatternService",
    "get_pattern_service"
]
