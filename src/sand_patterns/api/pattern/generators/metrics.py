"""Draw time estimation."""

import math
from typing import Sequence

from sand_patterns.api.pattern.constants import TABLE_DIAMETER_MM, BALL_SPEED_MM_PER_SECOND
from sand_patterns.api.pattern.generators.transform import theta_rho_to_cartesian
from sand_patterns.api.pattern.models import ThetaRhoPoint


def path_length_mm(
    points: Sequence[ThetaRhoPoint],
    table_diameter_mm: float = TABLE_DIAMETER_MM
) -> float:
    """Length of the polyline through ``points`` on a table of the given size."""
    if len(points) < 2:
        return 0.0

    table_radius = table_diameter_mm / 2
    cartesian = [theta_rho_to_cartesian(p.theta, p.rho, table_radius) for p in points]

    total = 0.0
    for prev, curr in zip(cartesian, cartesian[1:]):
        total += math.hypot(curr.x - prev.x, curr.y - prev.y)
    return total


def estimate_draw_time(
    points: Sequence[ThetaRhoPoint],
    table_diameter_mm: float = TABLE_DIAMETER_MM,
    ball_speed_mm_per_second: float = BALL_SPEED_MM_PER_SECOND
) -> float:
    """Estimated draw time in minutes, rounded half up to one decimal."""
    distance = path_length_mm(points, table_diameter_mm)
    if distance == 0.0:
        return 0.0
    if not math.isfinite(distance):
        # Degenerate shape parameters can produce NaN coordinates
        return math.nan
    minutes = distance / ball_speed_mm_per_second / 60
    return math.floor(minutes * 10 + 0.5) / 10
