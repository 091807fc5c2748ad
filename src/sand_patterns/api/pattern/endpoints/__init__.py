"""Pattern API endpoints."""

from fastapi import APIRouter

from sand_patterns.api.pattern.endpoints.pattern_endpoints import router as pattern_router
from sand_patterns.api.pattern.endpoints.preset_endpoints import router as preset_router
from sand_patterns.api.pattern.endpoints.custom_endpoints import router as custom_router

router = APIRouter()
router.include_router(pattern_router)
router.include_router(preset_router)
router.include_router(custom_router)

__all__ = [
    "router",
    "pattern_router",
    "preset_router",
    "custom_router"
]
