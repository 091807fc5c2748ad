"""Pattern API models."""

from typing import List, Dict, Any, Optional
from datetime import datetime
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys for the PWA."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ValueModel(CamelModel):
    """Immutable value object."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# Enums
class ShapeType(str, Enum):
    """Base shape families."""
    CIRCLE = "circle"
    POLYGON = "polygon"
    STAR = "star"
    SPIRAL = "spiral"
    ROSE = "rose"
    HEART = "heart"


class TrackFlavor(str, Enum):
    """Where a track starts and ends: 0 is the center, 1 is the rim."""
    CENTER_TO_CENTER = "00"
    CENTER_TO_RIM = "01"
    RIM_TO_CENTER = "10"
    RIM_TO_RIM = "11"


# Geometry
class CartesianPoint(ValueModel):
    """Point in normalized table coordinates."""
    x: float
    y: float


class ThetaRhoPoint(ValueModel):
    """Point in table polar coordinates.

    theta accumulates across revolutions; rho is the normalized radius.
    """
    theta: float
    rho: float


# Configuration
class ShapeParams(ValueModel):
    """Shape-specific knobs; unset keys fall back to the generator defaults."""
    lobes: Optional[int] = None
    sides: Optional[int] = None
    points: Optional[int] = None
    inner_radius: Optional[float] = None
    turns: Optional[int] = None
    tightness: Optional[float] = None
    petals: Optional[int] = None
    petal_depth: Optional[float] = None


class PatternConfig(ValueModel):
    """Complete pattern configuration."""
    shape: ShapeType = ShapeType.CIRCLE
    shape_params: ShapeParams = Field(default_factory=ShapeParams)
    loops: int = Field(default=25, ge=1, description="Repetitions of the base shape")
    growth_factor: float = Field(default=1.2, gt=0, description="Per-loop scale multiplier")
    spin_degrees: float = Field(default=10.0, description="Per-loop rotation in degrees")
    alternate_direction: bool = False
    start_from_center: bool = True


class GeneratedPattern(ValueModel):
    """Result of pattern generation."""
    points: List[ThetaRhoPoint]
    flavor: TrackFlavor
    estimated_draw_time_minutes: float
    point_count: int = Field(ge=0)


class PatternPreset(ValueModel):
    """Named pattern configuration."""
    id: str
    name: str
    description: str
    shape: ShapeType
    shape_params: ShapeParams = Field(default_factory=ShapeParams)
    loops: int = Field(ge=1)
    growth_factor: float = Field(gt=0)
    spin_degrees: float
    alternate_direction: bool = False
    start_from_center: bool = True
    is_random: bool = False


class ParameterConstraints(ValueModel):
    """Slider range for one parameter."""
    min: float
    max: float
    default: float
    step: float


class MobileConstraints(ValueModel):
    """Parameter ranges offered by the mobile UI."""
    loops: ParameterConstraints
    growth: ParameterConstraints
    spin: ParameterConstraints
    polygon_sides: ParameterConstraints
    star_points: ParameterConstraints
    star_inner_radius: ParameterConstraints
    spiral_turns: ParameterConstraints
    spiral_tightness: ParameterConstraints
    rose_petals: ParameterConstraints
    rose_petal_depth: ParameterConstraints
    circle_lobes: ParameterConstraints


class ThetaRhoValidation(CamelModel):
    """Outcome of checking theta-rho text."""
    valid: bool
    error: Optional[str] = None
    point_count: Optional[int] = None
    flavor: Optional[TrackFlavor] = None


class CustomPattern(CamelModel):
    """Stored user-created pattern."""
    id: str
    name: str
    point_count: int
    flavor: TrackFlavor
    created_at: datetime
    created_by: Optional[str] = None
    has_preview: bool = False
    config: Optional[PatternConfig] = None


# Request Models
class GenerateRequest(CamelModel):
    """Generate request."""
    config: PatternConfig = Field(default_factory=PatternConfig)
    strict: bool = Field(default=True, description="Reject configs outside the mobile limits")


class ExportRequest(CamelModel):
    """Export request."""
    config: PatternConfig = Field(default_factory=PatternConfig)
    name: Optional[str] = None
    strict: bool = True


class PreviewRequest(CamelModel):
    """Preview request."""
    config: PatternConfig = Field(default_factory=PatternConfig)
    size: Optional[int] = Field(default=None, ge=40, le=2000, description="Defaults to the configured preview size")
    max_points: Optional[int] = Field(default=None, ge=2)
    strict: bool = True


class ValidateRequest(CamelModel):
    """Theta-rho validation request."""
    data: str


class SaveCustomPatternRequest(CamelModel):
    """Custom pattern submission."""
    name: str
    theta_rho_data: str
    preview_svg: Optional[str] = None
    created_by: Optional[str] = None
    config: Optional[PatternConfig] = None


# Response Models
class BaseResponse(BaseModel):
    """Base response model."""
    message: str


class PresetListResponse(CamelModel):
    """Preset list response."""
    presets: List[PatternPreset]


class CustomPatternListResponse(CamelModel):
    """Custom pattern list response."""
    patterns: List[CustomPattern]


class ConfigResponse(CamelModel):
    """Pattern config response."""
    config: PatternConfig
    details: Optional[Dict[str, Any]] = None
