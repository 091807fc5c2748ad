"""Pattern geometry generators."""

from sand_patterns.api.pattern.generators.shapes import (
    DEFAULT_SHAPE_PARAMS,
    generate_shape,
    generate_circle,
    generate_polygon,
    generate_star,
    generate_spiral,
    generate_rose,
    generate_heart,
    polygon_vertices,
    star_vertices,
)
from sand_patterns.api.pattern.generators.transform import (
    apply_loop_transform,
    cartesian_to_theta_rho,
    theta_rho_to_cartesian,
    normalize_angle_delta,
    unwrap_step,
    saturating_pow,
)
from sand_patterns.api.pattern.generators.boundary import (
    center_spiral,
    ending_spiral,
    add_center_start,
    ensure_proper_ending,
    classify_flavor,
    determine_track_flavor,
)
from sand_patterns.api.pattern.generators.metrics import estimate_draw_time, path_length_mm
from sand_patterns.api.pattern.generators.pipeline import generate_pattern

__all__ = [
    "DEFAULT_SHAPE_PARAMS",
    "generate_shape",
    "generate_circle",
    "generate_polygon",
    "generate_star",
    "generate_spiral",
    "generate_rose",
    "generate_heart",
    "polygon_vertices",
    "star_vertices",
    "apply_loop_transform",
    "cartesian_to_theta_rho",
    "theta_rho_to_cartesian",
    "normalize_angle_delta",
    "unwrap_step",
    "saturating_pow",
    "center_spiral",
    "ending_spiral",
    "add_center_start",
    "ensure_proper_ending",
    "classify_flavor",
    "determine_track_flavor",
    "estimate_draw_time",
    "path_length_mm",
    "generate_pattern",
]
