"""Base shape generators.

Every generator returns points in normalized table coordinates, roughly
inside the unit disk. Parameters are not range-checked here; see
``validators.config_validator`` for the supported limits.
"""

import math
from typing import List, Optional, Tuple

from sand_patterns.api.pattern.constants import (
    TWO_PI,
    MIN_POINTS_PER_SHAPE,
    POLYGON_POINTS_BUDGET,
    MIN_POINTS_PER_POLYGON_EDGE,
    STAR_POINTS_PER_EDGE,
    SPIRAL_POINTS_PER_TURN,
    ROSE_POINTS_PER_PETAL,
    HEART_POINTS,
    HEART_SCALE,
    LOBE_AMPLITUDE,
    POINTS_PER_LOBE,
)
from sand_patterns.api.pattern.generators.transform import saturating_pow
from sand_patterns.api.pattern.models import CartesianPoint, ShapeParams, ShapeType

# Used when a shape parameter is missing
DEFAULT_SHAPE_PARAMS = {
    "lobes": 0,
    "sides": 6,
    "points": 5,
    "inner_radius": 0.4,
    "turns": 8,
    "tightness": 0.8,
    "petals": 5,
    "petal_depth": 0.5,
}

Vertex = Tuple[float, float]


def _param(params: Optional[ShapeParams], name: str):
    value = getattr(params, name, None) if params is not None else None
    return DEFAULT_SHAPE_PARAMS[name] if value is None else value


def generate_shape(shape: ShapeType, params: Optional[ShapeParams] = None) -> List[CartesianPoint]:
    """Generate the base curve for a shape family."""
    if shape == ShapeType.CIRCLE:
        return generate_circle(_param(params, "lobes"))
    if shape == ShapeType.POLYGON:
        return generate_polygon(_param(params, "sides"))
    if shape == ShapeType.STAR:
        return generate_star(_param(params, "points"), _param(params, "inner_radius"))
    if shape == ShapeType.SPIRAL:
        return generate_spiral(_param(params, "turns"), _param(params, "tightness"))
    if shape == ShapeType.ROSE:
        return generate_rose(_param(params, "petals"), _param(params, "petal_depth"))
    if shape == ShapeType.HEART:
        return generate_heart()
    return generate_circle(0)


def generate_circle(lobes: int = 0) -> List[CartesianPoint]:
    """Circle whose radius optionally waves ``lobes`` times per revolution."""
    num_points = max(MIN_POINTS_PER_SHAPE, lobes * POINTS_PER_LOBE if lobes > 0 else MIN_POINTS_PER_SHAPE)

    points = []
    for i in range(num_points + 1):
        t = (i / num_points) * TWO_PI
        radius = 1.0
        if lobes > 0:
            radius = 1 + LOBE_AMPLITUDE * math.sin(lobes * t)
        points.append(CartesianPoint(x=radius * math.cos(t), y=radius * math.sin(t)))
    return points


def polygon_vertices(sides: int) -> List[Vertex]:
    """Closed vertex ring of a regular polygon, first vertex at the top."""
    vertices = []
    for i in range(sides + 1):
        angle = (i / sides) * TWO_PI - math.pi / 2
        vertices.append((math.cos(angle), math.sin(angle)))
    return vertices


def generate_polygon(sides: int) -> List[CartesianPoint]:
    """Regular polygon with straight, densely sampled edges."""
    if sides <= 0:
        return []
    points_per_side = max(MIN_POINTS_PER_POLYGON_EDGE, math.floor(POLYGON_POINTS_BUDGET / sides))
    return _interpolate_edges(polygon_vertices(sides), points_per_side)


def star_vertices(num_points: int, inner_radius: float) -> List[Vertex]:
    """Closed vertex ring alternating outer radius 1 and ``inner_radius``."""
    total_vertices = num_points * 2
    vertices = []
    for i in range(total_vertices + 1):
        angle = (i / total_vertices) * TWO_PI - math.pi / 2
        radius = 1.0 if i % 2 == 0 else inner_radius
        vertices.append((radius * math.cos(angle), radius * math.sin(angle)))
    return vertices


def generate_star(num_points: int, inner_radius: float) -> List[CartesianPoint]:
    """Star with ``num_points`` tips; ``inner_radius`` sets the notch depth."""
    if num_points <= 0:
        return []
    return _interpolate_edges(star_vertices(num_points, inner_radius), STAR_POINTS_PER_EDGE)


def _interpolate_edges(vertices: List[Vertex], points_per_edge: int) -> List[CartesianPoint]:
    # Each edge keeps both endpoints, so shared vertices appear twice.
    points = []
    for (x1, y1), (x2, y2) in zip(vertices, vertices[1:]):
        for j in range(points_per_edge + 1):
            t = j / points_per_edge
            points.append(CartesianPoint(x=x1 + t * (x2 - x1), y=y1 + t * (y2 - y1)))
    return points


def generate_spiral(turns: int, tightness: float) -> List[CartesianPoint]:
    """Outward spiral from the center to the rim.

    ``tightness`` in [0, 1] bends the radius curve: higher values keep the
    coils small near the center and open them up close to the rim.
    """
    num_points = turns * SPIRAL_POINTS_PER_TURN
    if num_points <= 0:
        return []
    max_theta = turns * TWO_PI
    exponent = 0.5 + tightness * 1.5

    points = []
    for i in range(num_points + 1):
        t = i / num_points
        theta = t * max_theta
        radius = saturating_pow(t, exponent)
        points.append(CartesianPoint(x=radius * math.cos(theta), y=radius * math.sin(theta)))
    return points


def generate_rose(petals: int, petal_depth: float) -> List[CartesianPoint]:
    """Rose curve with a floor radius of ``1 - petal_depth``.

    Odd petal counts close after one revolution, even counts after two.
    """
    rotations = 2 if petals % 2 == 0 else 1
    num_points = petals * rotations * ROSE_POINTS_PER_PETAL
    if num_points <= 0:
        return []
    max_theta = rotations * TWO_PI
    min_radius = 1 - petal_depth

    points = []
    for i in range(num_points + 1):
        theta = (i / num_points) * max_theta
        radius = min_radius + petal_depth * abs(math.cos(petals * theta))
        points.append(CartesianPoint(x=radius * math.cos(theta), y=radius * math.sin(theta)))
    return points


def generate_heart() -> List[CartesianPoint]:
    """Classic parametric heart, tip pointing up."""
    points = []
    for i in range(HEART_POINTS + 1):
        t = (i / HEART_POINTS) * TWO_PI
        x = 16 * math.pow(math.sin(t), 3)
        y = 13 * math.cos(t) - 5 * math.cos(2 * t) - 2 * math.cos(3 * t) - math.cos(4 * t)
        points.append(CartesianPoint(x=x / HEART_SCALE, y=-y / HEART_SCALE))
    return points
