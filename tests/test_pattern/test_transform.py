"""Tests for the loop transform and polar mapping."""

import math
import pytest

from sand_patterns.api.pattern.generators.shapes import generate_circle, generate_star
from sand_patterns.api.pattern.generators.transform import (
    apply_loop_transform,
    normalize_angle_delta,
    unwrap_step,
    saturating_pow,
    clamp_rho,
    cartesian_to_theta_rho,
    theta_rho_to_cartesian,
)
from sand_patterns.api.pattern.models import CartesianPoint


def point_at(degrees: float, radius: float = 1.0) -> CartesianPoint:
    angle = math.radians(degrees)
    return CartesianPoint(x=radius * math.cos(angle), y=radius * math.sin(angle))


@pytest.fixture
def triangle():
    """Three points on the upper half of the unit circle."""
    return [
        CartesianPoint(x=1.0, y=0.0),
        CartesianPoint(x=0.0, y=1.0),
        CartesianPoint(x=-1.0, y=0.0),
    ]


class TestLoopTransform:
    """Test loop repetition."""

    def test_single_loop_is_identity(self, triangle):
        """Test one loop without spin returns the base shape."""
        result = apply_loop_transform(triangle, 1, 1.3, 0.0, False)
        assert result == triangle

    def test_last_loop_reaches_full_scale(self, triangle):
        """Test loops grow geometrically up to scale 1."""
        result = apply_loop_transform(triangle, 3, 2.0, 0.0, False)
        assert len(result) == 9
        assert result[0].x == pytest.approx(0.25)
        assert result[3].x == pytest.approx(0.5)
        assert result[6].x == pytest.approx(1.0)

    def test_spin_rotates_each_loop(self, triangle):
        """Test every loop is rotated by spin times its index."""
        result = apply_loop_transform(triangle, 3, 1.0, 90.0, False)
        assert result[3].x == pytest.approx(0.0, abs=1e-12)
        assert result[3].y == pytest.approx(1.0)
        assert result[6].x == pytest.approx(-1.0)
        assert result[6].y == pytest.approx(0.0, abs=1e-12)

    def test_alternate_reverses_odd_loops(self, triangle):
        """Test odd loops traverse the base shape backwards."""
        result = apply_loop_transform(triangle, 3, 1.0, 0.0, True)
        assert result[:3] == triangle
        assert result[3:6] == list(reversed(triangle))
        assert result[6:] == triangle

    def test_extreme_growth(self, triangle):
        """Test scales saturate instead of raising."""
        shrinking = apply_loop_transform(triangle, 100, 1e-5, 0.0, False)
        assert len(shrinking) == 300
        assert not math.isfinite(shrinking[0].x)
        growing = apply_loop_transform(triangle, 100, 1e10, 0.0, False)
        assert growing[0].x == 0.0
        assert math.isnan(growing[-1].x)

    def test_infinite_spin(self, triangle):
        """Test a non-finite rotation gives NaN coordinates."""
        result = apply_loop_transform(triangle, 2, 1.0, math.inf, False)
        assert all(math.isnan(p.x) for p in result)

    def test_empty_base(self):
        """Test an empty base shape stays empty."""
        assert apply_loop_transform([], 5, 1.2, 10.0, True) == []


class TestSaturatingPow:
    """Test the overflow-safe power."""

    @pytest.mark.parametrize("base, exponent, expected", [
        (2.0, 3, 8.0),
        (0.0, 0.5, 0.0),
        (1e-5, 99, 0.0),
        (0.0, -1.0, math.inf),
        (1e10, 99, math.inf),
    ])
    def test_values(self, base, exponent, expected):
        """Test ordinary values, underflow and saturation."""
        assert saturating_pow(base, exponent) == expected


class TestAngles:
    """Test angle helpers."""

    @pytest.mark.parametrize("delta, expected", [
        (0.0, 0.0),
        (1.5 * math.pi, -0.5 * math.pi),
        (-1.5 * math.pi, 0.5 * math.pi),
        (math.pi, math.pi),
        (5 * math.pi, math.pi),
    ])
    def test_normalize_angle_delta(self, delta, expected):
        """Test deltas fold into [-pi, pi]."""
        assert normalize_angle_delta(delta) == pytest.approx(expected)

    def test_unwrap_step_seeds_with_raw_angle(self):
        """Test the first point seeds theta with its own angle."""
        theta, angle = unwrap_step(None, None, CartesianPoint(x=0.0, y=1.0))
        assert theta == pytest.approx(math.pi / 2)
        assert angle == pytest.approx(math.pi / 2)

    def test_unwrap_step_takes_short_way(self):
        """Test crossing the negative x axis does not jump by 2*pi."""
        theta, _ = unwrap_step(math.radians(170), math.radians(170), point_at(-170))
        assert theta == pytest.approx(math.radians(190))

    @pytest.mark.parametrize("rho, expected", [(-0.2, 0.0), (0.4, 0.4), (1.7, 1.0)])
    def test_clamp_rho(self, rho, expected):
        """Test rho is clamped to [0, 1]."""
        assert clamp_rho(rho) == expected


class TestPolarMapping:
    """Test Cartesian to theta-rho conversion."""

    def test_empty(self):
        """Test empty input gives empty output."""
        assert cartesian_to_theta_rho([]) == []

    def test_full_revolution_accumulates(self):
        """Test a closed circle ends at theta 2*pi instead of 0."""
        points = cartesian_to_theta_rho(generate_circle(0))
        assert points[0].theta == pytest.approx(0.0)
        assert points[-1].theta == pytest.approx(2 * math.pi)
        assert all(p.rho == pytest.approx(1.0) for p in points)

    def test_clockwise_revolutions_go_negative(self):
        """Test clockwise travel keeps decreasing theta."""
        cartesian = [point_at(-10 * i) for i in range(73)]
        points = cartesian_to_theta_rho(cartesian)
        assert points[-1].theta == pytest.approx(-4 * math.pi)

    def test_rho_clamped_to_unit_disk(self):
        """Test points outside the disk are clamped to the rim."""
        points = cartesian_to_theta_rho([CartesianPoint(x=0.0, y=0.0), CartesianPoint(x=2.0, y=0.0)])
        assert points[0].theta == 0.0
        assert points[0].rho == 0.0
        assert points[1].rho == 1.0

    def test_theta_steps_follow_shortest_rotation(self):
        """Test each theta step equals the wrapped raw angle difference."""
        cartesian = apply_loop_transform(generate_star(7, 0.3), 5, 1.3, 23.0, True)
        points = cartesian_to_theta_rho(cartesian)
        for i in range(len(points) - 1):
            raw = math.atan2(cartesian[i + 1].y, cartesian[i + 1].x) - math.atan2(cartesian[i].y, cartesian[i].x)
            step = points[i + 1].theta - points[i].theta
            assert step == pytest.approx(normalize_angle_delta(raw), abs=1e-9)
            assert -math.pi - 1e-9 <= step <= math.pi + 1e-9

    def test_theta_rho_to_cartesian(self):
        """Test polar points scale by the given radius."""
        point = theta_rho_to_cartesian(math.pi / 2, 0.5, 2.0)
        assert point.x == pytest.approx(0.0, abs=1e-12)
        assert point.y == pytest.approx(1.0)
