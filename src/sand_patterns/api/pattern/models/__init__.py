"""Pattern API models."""

from sand_patterns.api.pattern.models.pattern_models import (
    # Enums
    ShapeType,
    TrackFlavor,

    # Geometry
    CartesianPoint,
    ThetaRhoPoint,

    # Configuration
    ShapeParams,
    PatternConfig,
    GeneratedPattern,
    PatternPreset,
    ParameterConstraints,
    MobileConstraints,
    ThetaRhoValidation,
    CustomPattern,

    # Request Models
    GenerateRequest,
    ExportRequest,
    PreviewRequest,
    ValidateRequest,
    SaveCustomPatternRequest,

    # Response Models
    BaseResponse,
    PresetListResponse,
    CustomPatternListResponse,
    ConfigResponse
)

__all__ = [
    # Enums
    "ShapeType",
    "TrackFlavor",

    # Geometry
    "CartesianPoint",
    "ThetaRhoPoint",

    # Configuration
    "ShapeParams",
    "PatternConfig",
    "GeneratedPattern",
    "PatternPreset",
    "ParameterConstraints",
    "MobileConstraints",
    "ThetaRhoValidation",
    "CustomPattern",

    # Request Models
    "GenerateRequest",
    "ExportRequest",
    "PreviewRequest",
    "ValidateRequest",
    "SaveCustomPatternRequest",

    # Response Models
    "BaseResponse",
    "PresetListResponse",
    "CustomPatternListResponse",
    "ConfigResponse"
]
