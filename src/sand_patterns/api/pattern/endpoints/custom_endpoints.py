"""Custom pattern endpoints."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse, Response

from sand_patterns.api.pattern.dependencies import get_pattern_service
from sand_patterns.api.pattern.endpoints.errors import to_http_error
from sand_patterns.api.pattern.pattern_service import PatternService
from sand_patterns.utils.errors import create_error
from sand_patterns.api.pattern.models import (
    BaseResponse,
    CustomPattern,
    CustomPatternListResponse,
    SaveCustomPatternRequest
)

router = APIRouter(prefix="/patterns/custom", tags=["custom patterns"])


@router.get("", response_model=CustomPatternListResponse)
async def list_custom_patterns(
    service: PatternService = Depends(get_pattern_service)
) -> CustomPatternListResponse:
    """List saved custom patterns."""
    try:
        service.require_running()
        return CustomPatternListResponse(patterns=await service.custom_service.list_patterns())
    except Exception as e:
        raise to_http_error(e, "list custom patterns")


@router.post(
    "",
    response_model=CustomPattern,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_422_UNPROCESSABLE_ENTITY: {"description": "Invalid pattern data"}
    }
)
async def save_custom_pattern(
    request: SaveCustomPatternRequest,
    service: PatternService = Depends(get_pattern_service)
) -> CustomPattern:
    """Save a custom pattern."""
    try:
        service.require_running()
        return await service.custom_service.save_pattern(request)
    except Exception as e:
        raise to_http_error(e, "save custom pattern")


@router.get("/{pattern_id}", response_model=CustomPattern)
async def get_custom_pattern(
    pattern_id: str,
    service: PatternService = Depends(get_pattern_service)
) -> CustomPattern:
    """Get custom pattern by ID."""
    try:
        service.require_running()
        return await service.custom_service.get_pattern(pattern_id)
    except Exception as e:
        raise to_http_error(e, f"get custom pattern {pattern_id}")


@router.get("/{pattern_id}/data", response_class=PlainTextResponse)
async def get_custom_pattern_data(
    pattern_id: str,
    service: PatternService = Depends(get_pattern_service)
) -> PlainTextResponse:
    """Theta-rho data of a custom pattern."""
    try:
        service.require_running()
        data = await service.custom_service.get_pattern_data(pattern_id)
    except Exception as e:
        raise to_http_error(e, f"read custom pattern {pattern_id}")
    return PlainTextResponse(data)


@router.get(
    "/{pattern_id}/preview",
    response_class=Response,
    responses={status.HTTP_200_OK: {"content": {"image/svg+xml": {}}}}
)
async def get_custom_pattern_preview(
    pattern_id: str,
    service: PatternService = Depends(get_pattern_service)
) -> Response:
    """SVG preview of a custom pattern."""
    try:
        service.require_running()
        svg = await service.custom_service.get_preview(pattern_id)
    except Exception as e:
        raise to_http_error(e, f"read custom pattern preview {pattern_id}")
    if svg is None:
        raise create_error(
            status_code=status.HTTP_404_NOT_FOUND,
            message=f"Pattern {pattern_id} has no preview"
        )
    return Response(content=svg, media_type="image/svg+xml")


@router.delete("/{pattern_id}", response_model=BaseResponse)
async def delete_custom_pattern(
    pattern_id: str,
    service: PatternService = Depends(get_pattern_service)
) -> BaseResponse:
    """Delete a custom pattern."""
    try:
        service.require_running()
        await service.custom_service.delete_pattern(pattern_id)
        return BaseResponse(message=f"Pattern {pattern_id} deleted successfully")
    except Exception as e:
        raise to_http_error(e, f"delete custom pattern {pattern_id}")
