"""Start and end handling for theta-rho paths.

A table can only chain tracks cleanly when each one starts and ends at the
center or at the rim. These helpers splice short spiral transitions onto a
path and classify the resulting track flavor.
"""

from typing import List, Sequence

from sand_patterns.api.pattern.constants import (
    TWO_PI,
    TRANSITION_POINTS,
    BOUNDARY_TOLERANCE,
    FLAVOR_THRESHOLD,
)
from sand_patterns.api.pattern.models import ThetaRhoPoint, TrackFlavor


def center_spiral(target: ThetaRhoPoint, num_points: int = TRANSITION_POINTS) -> List[ThetaRhoPoint]:
    """Spiral from (0, 0) to ``target``, linear in both theta and rho.

    Returns ``num_points + 1`` points including both endpoints.
    """
    segment = []
    for i in range(num_points + 1):
        t = i / num_points
        segment.append(ThetaRhoPoint(theta=t * target.theta, rho=t * target.rho))
    return segment


def ending_spiral(
    start: ThetaRhoPoint,
    target_rho: float,
    num_points: int = TRANSITION_POINTS
) -> List[ThetaRhoPoint]:
    """Spiral from ``start`` to ``target_rho`` over one extra revolution.

    ``start`` itself is not included.
    """
    segment = []
    for i in range(1, num_points + 1):
        t = i / num_points
        segment.append(ThetaRhoPoint(
            theta=start.theta + t * TWO_PI,
            rho=start.rho + t * (target_rho - start.rho)
        ))
    return segment


def add_center_start(points: Sequence[ThetaRhoPoint]) -> List[ThetaRhoPoint]:
    """Prefix the path with a spiral out of the center.

    Paths that already start within tolerance of the center are returned
    unchanged. The transition ends on the path's first point, which replaces
    the original one.
    """
    if not points:
        return list(points)

    first_point = points[0]
    if first_point.rho < BOUNDARY_TOLERANCE:
        return list(points)

    return center_spiral(first_point) + list(points[1:])


def ensure_proper_ending(points: Sequence[ThetaRhoPoint], end_at_center: bool) -> List[ThetaRhoPoint]:
    """Make the path finish at the center (``end_at_center``) or the rim."""
    if not points:
        return list(points)

    last_point = points[-1]
    target_rho = 0.0 if end_at_center else 1.0
    if abs(last_point.rho - target_rho) < BOUNDARY_TOLERANCE:
        return list(points)

    return list(points) + ending_spiral(last_point, target_rho)


def classify_flavor(first_rho: float, last_rho: float) -> TrackFlavor:
    """Map start and end radii to a track flavor."""
    start_digit = "0" if first_rho < FLAVOR_THRESHOLD else "1"
    end_digit = "0" if last_rho < FLAVOR_THRESHOLD else "1"
    return TrackFlavor(start_digit + end_digit)


def determine_track_flavor(points: Sequence[ThetaRhoPoint]) -> TrackFlavor:
    """Track flavor of a path; an empty path counts as center to center."""
    if not points:
        return TrackFlavor.CENTER_TO_CENTER
    return classify_flavor(points[0].rho, points[-1].rho)
