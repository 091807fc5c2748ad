"""Pattern generation endpoints."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse, Response

from sand_patterns.api.pattern.dependencies import get_pattern_service
from sand_patterns.api.pattern.endpoints.errors import to_http_error
from sand_patterns.api.pattern.pattern_service import PatternService
from sand_patterns.api.pattern.presets import MOBILE_CONSTRAINTS
from sand_patterns.api.pattern.models import (
    GeneratedPattern,
    GenerateRequest,
    ExportRequest,
    PreviewRequest,
    ValidateRequest,
    ThetaRhoValidation,
    MobileConstraints
)

router = APIRouter(prefix="/patterns", tags=["patterns"])


@router.post(
    "/generate",
    response_model=GeneratedPattern,
    responses={
        status.HTTP_422_UNPROCESSABLE_ENTITY: {"description": "Config outside supported limits"},
        status.HTTP_503_SERVICE_UNAVAILABLE: {"description": "Service not running"}
    }
)
async def generate_pattern(
    request: GenerateRequest,
    service: PatternService = Depends(get_pattern_service)
) -> GeneratedPattern:
    """Generate a theta-rho pattern."""
    try:
        return await service.generate(request.config, request.strict)
    except Exception as e:
        raise to_http_error(e, "generate pattern")


@router.post(
    "/export",
    response_class=PlainTextResponse,
    responses={
        status.HTTP_422_UNPROCESSABLE_ENTITY: {"description": "Config outside supported limits"}
    }
)
async def export_pattern(
    request: ExportRequest,
    service: PatternService = Depends(get_pattern_service)
) -> PlainTextResponse:
    """Generate a pattern as a .thr file."""
    try:
        content = await service.export(request.config, request.name, request.strict)
    except Exception as e:
        raise to_http_error(e, "export pattern")
    return PlainTextResponse(content)


@router.post(
    "/preview",
    response_class=Response,
    responses={
        status.HTTP_200_OK: {"content": {"image/svg+xml": {}}},
        status.HTTP_422_UNPROCESSABLE_ENTITY: {"description": "Config outside supported limits"}
    }
)
async def preview_pattern(
    request: PreviewRequest,
    service: PatternService = Depends(get_pattern_service)
) -> Response:
    """Render a pattern as an SVG thumbnail."""
    try:
        svg = await service.preview(request.config, request.size, request.max_points, request.strict)
    except Exception as e:
        raise to_http_error(e, "preview pattern")
    return Response(content=svg, media_type="image/svg+xml")


@router.post("/validate", response_model=ThetaRhoValidation)
async def validate_pattern_data(
    request: ValidateRequest,
    service: PatternService = Depends(get_pattern_service)
) -> ThetaRhoValidation:
    """Check theta-rho text before importing it."""
    try:
        return await service.validate_data(request.data)
    except Exception as e:
        raise to_http_error(e, "validate pattern data")


@router.get("/constraints", response_model=MobileConstraints)
async def get_constraints() -> MobileConstraints:
    """Parameter ranges supported by the pattern creator."""
    return MOBILE_CONSTRAINTS
