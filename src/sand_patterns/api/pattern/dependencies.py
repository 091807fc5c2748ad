"""Pattern API dependencies."""

from fastapi import Request
from sand_patterns.api.pattern.pattern_service import PatternService


async def get_pattern_service(request: Request) -> PatternService:
    """Get pattern service from app state."""
    return request.app.state.service
