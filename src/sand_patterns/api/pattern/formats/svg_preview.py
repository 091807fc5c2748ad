"""SVG thumbnails for theta-rho paths."""

from typing import List, Optional, Sequence

from sand_patterns.api.pattern.constants import PREVIEW_SIZE, PREVIEW_MARGIN
from sand_patterns.api.pattern.generators.transform import theta_rho_to_cartesian
from sand_patterns.api.pattern.models import ThetaRhoPoint

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
BOUNDARY_COLOR = "#e5e7eb"
PATH_COLOR = "#3b82f6"


def _num(value: float) -> str:
    return f"{value:g}"


def sample_points(points: Sequence[ThetaRhoPoint], max_points: Optional[int]) -> List[ThetaRhoPoint]:
    """Evenly thin ``points`` to at most ``max_points``, keeping both ends."""
    if max_points is None or len(points) <= max_points:
        return list(points)
    if max_points < 2:
        return [points[0]]
    last = len(points) - 1
    indices = sorted({round(i * last / (max_points - 1)) for i in range(max_points)})
    return [points[i] for i in indices]


def generate_preview_svg(
    points: Sequence[ThetaRhoPoint],
    size: int = PREVIEW_SIZE,
    max_points: Optional[int] = None
) -> str:
    """Render a path and the table boundary as an SVG document."""
    if not points:
        return f'<svg width="{size}" height="{size}" xmlns="{SVG_NAMESPACE}"></svg>'

    radius = size / 2 - PREVIEW_MARGIN
    center = size / 2

    commands = []
    for i, point in enumerate(sample_points(points, max_points)):
        cart = theta_rho_to_cartesian(point.theta, point.rho, radius)
        # SVG y grows downwards
        x = f"{center + cart.x:.2f}"
        y = f"{center - cart.y:.2f}"
        commands.append(f"{'M' if i == 0 else 'L'} {x} {y}")
    path_data = " ".join(commands)

    return (
        f'<svg width="{size}" height="{size}" xmlns="{SVG_NAMESPACE}" viewBox="0 0 {size} {size}">\n'
        f'  <circle cx="{_num(center)}" cy="{_num(center)}" r="{_num(radius)}" fill="none" '
        f'stroke="{BOUNDARY_COLOR}" stroke-width="1"/>\n'
        f'  <path d="{path_data}" fill="none" stroke="{PATH_COLOR}" stroke-width="1" '
        f'stroke-linecap="round" stroke-linejoin="round"/>\n'
        f'</svg>'
    )
