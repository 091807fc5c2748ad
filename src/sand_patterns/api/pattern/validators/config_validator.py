"""Pattern config validation against the supported parameter ranges."""

from typing import List, Tuple

from sand_patterns.api.pattern.generators.shapes import DEFAULT_SHAPE_PARAMS
from sand_patterns.api.pattern.models import PatternConfig, ParameterConstraints
from sand_patterns.api.pattern.presets import MOBILE_CONSTRAINTS, SHAPE_PARAM_CONSTRAINTS

# Single-loop presets (spirals) sit below the slider minimum
MIN_LOOPS = 1

LABELS = {
    "lobes": "Circle lobes",
    "sides": "Polygon sides",
    "points": "Star points",
    "inner_radius": "Star inner radius",
    "turns": "Spiral turns",
    "tightness": "Spiral tightness",
    "petals": "Rose petals",
    "petal_depth": "Rose petal depth",
}


def _check_range(label: str, value: float, low: float, high: float, errors: List[str]) -> None:
    if not low <= value <= high:
        errors.append(f"{label} must be between {low:g}-{high:g}, got {value:g}")


def _check(label: str, value: float, constraint: ParameterConstraints, errors: List[str]) -> None:
    _check_range(label, value, constraint.min, constraint.max, errors)


def validate_config(config: PatternConfig) -> Tuple[bool, List[str]]:
    """Validate a pattern config against the mobile parameter ranges.
    
    The generators accept any numbers; this is where out-of-range values
    are caught before they turn into degenerate geometry.

    Args:
        config: Pattern configuration to validate
        
    Returns:
        (is_valid, errors): Validation result and error messages
    """
    errors = []

    _check_range("Loops", config.loops, MIN_LOOPS, MOBILE_CONSTRAINTS.loops.max, errors)
    _check("Growth factor", config.growth_factor, MOBILE_CONSTRAINTS.growth, errors)
    _check("Spin", config.spin_degrees, MOBILE_CONSTRAINTS.spin, errors)

    for param, constraint_name in SHAPE_PARAM_CONSTRAINTS[config.shape].items():
        value = getattr(config.shape_params, param)
        if value is None:
            value = DEFAULT_SHAPE_PARAMS[param]
        _check(LABELS[param], value, getattr(MOBILE_CONSTRAINTS, constraint_name), errors)

    return len(errors) == 0, errors
