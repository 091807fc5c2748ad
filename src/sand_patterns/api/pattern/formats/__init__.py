"""Pattern serialization formats."""

from sand_patterns.api.pattern.formats.thr_format import (
    export_theta_rho,
    parse_theta_rho_data,
    inspect_theta_rho_data,
    validate_theta_rho_data,
)
from sand_patterns.api.pattern.formats.svg_preview import generate_preview_svg, sample_points

__all__ = [
    "export_theta_rho",
    "parse_theta_rho_data",
    "inspect_theta_rho_data",
    "validate_theta_rho_data",
    "generate_preview_svg",
    "sample_points",
]
