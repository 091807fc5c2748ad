"""Preset endpoints."""

from fastapi import APIRouter, Depends

from sand_patterns.api.pattern.dependencies import get_pattern_service
from sand_patterns.api.pattern.endpoints.errors import to_http_error
from sand_patterns.api.pattern.pattern_service import PatternService
from sand_patterns.api.pattern.models import PatternPreset, PresetListResponse, ConfigResponse

router = APIRouter(prefix="/patterns/presets", tags=["presets"])


@router.get("", response_model=PresetListResponse)
async def list_presets(
    main_only: bool = False,
    service: PatternService = Depends(get_pattern_service)
) -> PresetListResponse:
    """List available presets."""
    try:
        service.require_running()
        return PresetListResponse(presets=service.preset_service.list_presets(main_only))
    except Exception as e:
        raise to_http_error(e, "list presets")


@router.get("/random", response_model=ConfigResponse)
async def random_preset_config(
    service: PatternService = Depends(get_pattern_service)
) -> ConfigResponse:
    """Roll a random pattern config."""
    try:
        service.require_running()
        return ConfigResponse(config=service.preset_service.random_config())
    except Exception as e:
        raise to_http_error(e, "generate random config")


@router.get("/{preset_id}", response_model=PatternPreset)
async def get_preset(
    preset_id: str,
    service: PatternService = Depends(get_pattern_service)
) -> PatternPreset:
    """Get preset by ID."""
    try:
        service.require_running()
        return service.preset_service.get_preset(preset_id)
    except Exception as e:
        raise to_http_error(e, f"get preset {preset_id}")


@router.get("/{preset_id}/config", response_model=ConfigResponse)
async def get_preset_config(
    preset_id: str,
    service: PatternService = Depends(get_pattern_service)
) -> ConfigResponse:
    """Pattern config for a preset."""
    try:
        service.require_running()
        return ConfigResponse(
            config=service.preset_service.get_config(preset_id),
            details={"presetId": preset_id}
        )
    except Exception as e:
        raise to_http_error(e, f"get preset config {preset_id}")
