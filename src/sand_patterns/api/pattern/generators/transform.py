"""Loop transform and polar coordinate mapping."""

import math
from typing import List, Optional, Sequence, Tuple

from sand_patterns.api.pattern.constants import TWO_PI
from sand_patterns.api.pattern.models import CartesianPoint, ThetaRhoPoint


def saturating_pow(base: float, exponent: float) -> float:
    """``base ** exponent`` for base >= 0; overflow and 0 to a negative power give inf."""
    if base == 0 and exponent < 0:
        return math.inf
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return math.inf


def apply_loop_transform(
    base_shape: Sequence[CartesianPoint],
    loops: int,
    growth_factor: float,
    spin_degrees: float,
    alternate: bool
) -> List[CartesianPoint]:
    """Repeat a base shape, scaling and rotating every repetition.

    The scale of the first loop is chosen so that the last loop ends at
    scale 1 and fills the table. With ``alternate`` set, odd loops run
    through the base shape backwards.

    Args:
        base_shape: Base curve in normalized coordinates
        loops: Number of repetitions
        growth_factor: Scale multiplier between consecutive loops
        spin_degrees: Rotation between consecutive loops
        alternate: Reverse traversal on odd loops

    Returns:
        Concatenated points of all loops in loop order
    """
    spin_radians = math.radians(spin_degrees)
    final_growth = saturating_pow(growth_factor, loops - 1)
    initial_scale = math.inf if final_growth == 0 else 1 / final_growth
    reversed_shape = list(reversed(base_shape)) if alternate else None

    result = []
    for loop in range(loops):
        scale = initial_scale * saturating_pow(growth_factor, loop)
        rotation = loop * spin_radians
        if math.isfinite(rotation):
            cos_r = math.cos(rotation)
            sin_r = math.sin(rotation)
        else:
            cos_r = sin_r = math.nan

        shape_points = reversed_shape if alternate and loop % 2 == 1 else base_shape
        for point in shape_points:
            x = point.x * scale
            y = point.y * scale
            result.append(CartesianPoint(x=x * cos_r - y * sin_r, y=x * sin_r + y * cos_r))
    return result


def normalize_angle_delta(delta: float) -> float:
    """Fold an angle difference into [-pi, pi]."""
    while delta > math.pi:
        delta -= TWO_PI
    while delta < -math.pi:
        delta += TWO_PI
    return delta


def unwrap_step(
    accumulated_theta: Optional[float],
    last_angle: Optional[float],
    point: CartesianPoint
) -> Tuple[float, float]:
    """Advance the unwrapped angle by one point.

    Returns the new accumulated theta and the raw angle of ``point``. The
    first point (``accumulated_theta`` is None) seeds theta with its raw
    angle.
    """
    angle = math.atan2(point.y, point.x)
    if accumulated_theta is None:
        return angle, angle
    return accumulated_theta + normalize_angle_delta(angle - last_angle), angle


def clamp_rho(rho: float) -> float:
    return max(0.0, min(1.0, rho))


def cartesian_to_theta_rho(points: Sequence[CartesianPoint]) -> List[ThetaRhoPoint]:
    """Convert to polar points with continuous, unwrapped theta.

    The table tracks total rotation, so theta never jumps by 2*pi: each
    step takes the shorter way around from the previous point.
    """
    result = []
    theta = None
    last_angle = None
    for point in points:
        theta, last_angle = unwrap_step(theta, last_angle, point)
        rho = math.sqrt(point.x * point.x + point.y * point.y)
        result.append(ThetaRhoPoint(theta=theta, rho=clamp_rho(rho)))
    return result


def theta_rho_to_cartesian(theta: float, rho: float, radius: float = 1.0) -> CartesianPoint:
    """Convert a polar point to Cartesian, scaled by ``radius``."""
    return CartesianPoint(
        x=rho * radius * math.cos(theta),
        y=rho * radius * math.sin(theta)
    )
