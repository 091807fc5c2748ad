"""Theta-rho (.thr) text format.

One ``theta rho`` pair per line, whitespace separated. Lines starting with
``#`` and blank lines are ignored.
"""

import math
from datetime import datetime, timezone
from typing import Iterator, List, Optional, Sequence, Tuple

from sand_patterns.api.pattern.constants import (
    THR_PRECISION,
    GENERATOR_NAME,
    ENDPOINT_BAND,
)
from sand_patterns.api.pattern.exceptions import ThetaRhoFormatError
from sand_patterns.api.pattern.generators.boundary import classify_flavor
from sand_patterns.api.pattern.models import ThetaRhoPoint, ThetaRhoValidation


def _format_timestamp(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def export_theta_rho(
    points: Sequence[ThetaRhoPoint],
    pattern_name: Optional[str] = None,
    generated_at: Optional[datetime] = None
) -> str:
    """Render points as .thr text with a commented header.

    Args:
        points: Pattern points
        pattern_name: Optional name written to the header
        generated_at: Header timestamp, defaults to now (UTC)

    Returns:
        File content without a trailing newline
    """
    lines = [f"# Generated by {GENERATOR_NAME}"]
    if pattern_name:
        lines.append(f"# Pattern: {pattern_name}")
    lines.append(f"# Points: {len(points)}")
    lines.append(f"# Generated: {_format_timestamp(generated_at or datetime.now(timezone.utc))}")
    lines.append("")

    for point in points:
        lines.append(f"{point.theta:.{THR_PRECISION}f} {point.rho:.{THR_PRECISION}f}")

    return "\n".join(lines)


def _data_lines(data: str) -> Iterator[Tuple[int, str]]:
    """Number data lines from 1; comments and blank lines are skipped."""
    lines = (raw.strip() for raw in data.split("\n"))
    data_lines = [line for line in lines if line and not line.startswith("#")]
    return enumerate(data_lines, start=1)


def _parse_pair(line: str) -> Tuple[float, float]:
    parts = line.split()
    theta = float(parts[0])
    rho = float(parts[1])
    return theta, rho


def parse_theta_rho_data(data: str) -> List[ThetaRhoPoint]:
    """Parse .thr text into points.

    Raises:
        ThetaRhoFormatError: If a data line is not a numeric pair
    """
    points = []
    for number, line in _data_lines(data):
        try:
            theta, rho = _parse_pair(line)
        except (IndexError, ValueError) as e:
            raise ThetaRhoFormatError(
                f"Invalid point at line {number}: {line}",
                {"line": number, "content": line}
            ) from e
        points.append(ThetaRhoPoint(theta=theta, rho=rho))
    return points


def _is_valid_endpoint(rho: float) -> bool:
    return rho < ENDPOINT_BAND or rho > 1 - ENDPOINT_BAND


def inspect_theta_rho_data(data: str) -> ThetaRhoValidation:
    """Check externally authored .thr text.

    Accepted data must hold at least two numeric pairs, keep every rho in
    [0, 1] and start and end near the center or the rim. Line numbers in
    error messages count data lines only.
    """
    if not data:
        return ThetaRhoValidation(valid=False, error="Pattern data is required")

    lines = list(_data_lines(data))
    if len(lines) < 2:
        return ThetaRhoValidation(valid=False, error="Pattern must have at least 2 points")

    rhos = []
    for number, line in lines:
        if len(line.split()) < 2:
            return ThetaRhoValidation(valid=False, error=f"Invalid point format at line {number}: {line}")
        try:
            theta, rho = _parse_pair(line)
        except ValueError:
            return ThetaRhoValidation(valid=False, error=f"Invalid numeric values at line {number}: {line}")
        if math.isnan(theta) or math.isnan(rho):
            return ThetaRhoValidation(valid=False, error=f"Invalid numeric values at line {number}: {line}")
        if rho < 0 or rho > 1:
            return ThetaRhoValidation(valid=False, error=f"Rho value must be 0-1, got {rho} at line {number}")
        rhos.append(rho)

    first_rho = rhos[0]
    last_rho = rhos[-1]
    if not _is_valid_endpoint(first_rho):
        return ThetaRhoValidation(
            valid=False,
            error=f"Pattern must start with rho near 0 or 1, got {first_rho:.3f}"
        )
    if not _is_valid_endpoint(last_rho):
        return ThetaRhoValidation(
            valid=False,
            error=f"Pattern must end with rho near 0 or 1, got {last_rho:.3f}"
        )

    return ThetaRhoValidation(
        valid=True,
        point_count=len(rhos),
        flavor=classify_flavor(first_rho, last_rho)
    )


def validate_theta_rho_data(data: str) -> Optional[str]:
    """Return an error message for invalid .thr text, None when it is valid."""
    return inspect_theta_rho_data(data).error
