"""Pattern generation pipeline."""

from loguru import logger

from sand_patterns.api.pattern.constants import TABLE_DIAMETER_MM, BALL_SPEED_MM_PER_SECOND
from sand_patterns.api.pattern.generators.shapes import generate_shape
from sand_patterns.api.pattern.generators.transform import apply_loop_transform, cartesian_to_theta_rho
from sand_patterns.api.pattern.generators.boundary import (
    add_center_start,
    ensure_proper_ending,
    determine_track_flavor,
)
from sand_patterns.api.pattern.generators.metrics import estimate_draw_time
from sand_patterns.api.pattern.models import PatternConfig, GeneratedPattern


def generate_pattern(
    config: PatternConfig,
    table_diameter_mm: float = TABLE_DIAMETER_MM,
    ball_speed_mm_per_second: float = BALL_SPEED_MM_PER_SECOND
) -> GeneratedPattern:
    """Generate a complete theta-rho pattern from a configuration.

    Args:
        config: Pattern configuration
        table_diameter_mm: Table diameter used for the draw time estimate
        ball_speed_mm_per_second: Ball speed used for the draw time estimate

    Returns:
        Generated pattern with points, track flavor and draw time
    """
    base_shape = generate_shape(config.shape, config.shape_params)

    transformed = apply_loop_transform(
        base_shape,
        config.loops,
        config.growth_factor,
        config.spin_degrees,
        config.alternate_direction
    )

    points = cartesian_to_theta_rho(transformed)

    if config.start_from_center:
        points = add_center_start(points)

    # Patterns started from the center also return to it
    points = ensure_proper_ending(points, config.start_from_center)

    pattern = GeneratedPattern(
        points=points,
        flavor=determine_track_flavor(points),
        estimated_draw_time_minutes=estimate_draw_time(
            points,
            table_diameter_mm=table_diameter_mm,
            ball_speed_mm_per_second=ball_speed_mm_per_second
        ),
        point_count=len(points)
    )

    logger.debug(
        f"Generated {config.shape.value} pattern: {pattern.point_count} points, "
        f"flavor {pattern.flavor.value}, ~{pattern.estimated_draw_time_minutes} min"
    )
    return pattern
