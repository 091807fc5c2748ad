"""Tests for the pattern generation pipeline."""

import math
import pytest

from sand_patterns.api.pattern.generators.pipeline import generate_pattern
from sand_patterns.api.pattern.models import PatternConfig, ShapeParams, ShapeType, TrackFlavor
from sand_patterns.api.pattern.presets import get_all_presets, preset_to_config


class TestGeneratePattern:
    """Test end-to-end pattern generation."""

    def test_growing_circles(self, circle_config):
        """Test three circles drawn out of and back into the center."""
        pattern = generate_pattern(circle_config)

        # 3 loops of 61 points, 30 extra for the center spiral, 30 for the ending
        assert pattern.point_count == 243
        assert pattern.point_count > 3 * 61
        assert len(pattern.points) == pattern.point_count
        assert pattern.points[0].rho == pytest.approx(0.0)
        assert pattern.points[-1].rho == pytest.approx(0.0)
        assert pattern.flavor == TrackFlavor.CENTER_TO_CENTER
        assert pattern.estimated_draw_time_minutes > 0

    def test_deterministic(self, star_config):
        """Test identical configs give identical output."""
        first = generate_pattern(star_config)
        second = generate_pattern(star_config)
        assert first.points == second.points
        assert first.flavor == second.flavor
        assert first.estimated_draw_time_minutes == second.estimated_draw_time_minutes

    def test_rim_to_rim(self):
        """Test patterns not started from the center stay on the rim."""
        config = PatternConfig(shape=ShapeType.CIRCLE, loops=1, growth_factor=1.0, start_from_center=False)
        pattern = generate_pattern(config)
        assert pattern.point_count == 61
        assert pattern.flavor == TrackFlavor.RIM_TO_RIM

    def test_spiral_starts_at_center(self):
        """Test a spiral needs no center transition but returns to the center."""
        config = PatternConfig(
            shape=ShapeType.SPIRAL,
            shape_params=ShapeParams(turns=4, tightness=0.8),
            loops=1,
            growth_factor=1.0,
            spin_degrees=0
        )
        pattern = generate_pattern(config)
        assert pattern.point_count == 241 + 30
        assert pattern.points[0].rho == 0.0
        assert pattern.points[-1].rho == pytest.approx(0.0)

    def test_alternate_direction_changes_path(self, star_config):
        """Test alternating loops produce a different path."""
        forward = generate_pattern(star_config.model_copy(update={"alternate_direction": False}))
        alternating = generate_pattern(star_config)
        assert forward.point_count == alternating.point_count
        assert forward.points != alternating.points

    def test_table_settings_scale_draw_time(self, circle_config):
        """Test draw time scales with table size and ball speed."""
        default = generate_pattern(circle_config)
        fast = generate_pattern(circle_config, ball_speed_mm_per_second=5.0)
        assert fast.estimated_draw_time_minutes == pytest.approx(default.estimated_draw_time_minutes / 2, abs=0.1)

    def test_degenerate_shape(self):
        """Test zero sides gives an empty center-to-center pattern."""
        config = PatternConfig(shape=ShapeType.POLYGON, shape_params=ShapeParams(sides=0))
        pattern = generate_pattern(config)
        assert pattern.points == []
        assert pattern.point_count == 0
        assert pattern.flavor == TrackFlavor.CENTER_TO_CENTER
        assert pattern.estimated_draw_time_minutes == 0.0

    @pytest.mark.parametrize("config", [
        PatternConfig(loops=100, growth_factor=1e-5),
        PatternConfig(loops=100, growth_factor=1e10),
        PatternConfig(shape=ShapeType.SPIRAL, shape_params=ShapeParams(tightness=-1.0)),
        PatternConfig(loops=3, spin_degrees=math.inf),
    ], ids=["tiny-growth", "huge-growth", "negative-tightness", "infinite-spin"])
    def test_out_of_domain_configs(self, config):
        """Test extreme configs give degenerate geometry instead of raising."""
        pattern = generate_pattern(config)
        assert pattern.point_count == len(pattern.points)
        assert pattern.point_count > 0
        assert all(0.0 <= p.rho <= 1.0 for p in pattern.points)
        assert pattern.points[-1].rho == 0.0

    @pytest.mark.parametrize("preset", [p for p in get_all_presets() if not p.is_random], ids=lambda p: p.id)
    def test_presets_stay_on_table(self, preset):
        """Test every preset keeps rho in [0, 1] and ends at a boundary."""
        pattern = generate_pattern(preset_to_config(preset))
        assert all(0.0 <= p.rho <= 1.0 for p in pattern.points)
        assert all(math.isfinite(p.theta) for p in pattern.points)
        assert pattern.points[0].rho < 0.01
        assert pattern.points[-1].rho < 0.01
        assert pattern.flavor == TrackFlavor.CENTER_TO_CENTER
