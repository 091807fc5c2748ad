"""Root test configuration and shared fixtures."""

import random
import pytest
from typing import Dict, Any

from sand_patterns.api.pattern.models import PatternConfig, ShapeParams, ShapeType


@pytest.fixture
def service_config(tmp_path) -> Dict[str, Any]:
    """Service configuration writing into a temporary directory."""
    return {
        "version": "1.0.0",
        "log_dir": None,
        "table": {
            "diameter_mm": 380.0,
            "ball_speed_mm_per_second": 2.5
        },
        "storage": {
            "custom_dir": str(tmp_path / "patterns" / "custom"),
            "presets_dir": str(tmp_path / "presets")
        },
        "preview": {
            "size": 200
        }
    }


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def circle_config() -> PatternConfig:
    """Three growing circles drawn out of the center."""
    return PatternConfig(
        shape=ShapeType.CIRCLE,
        shape_params=ShapeParams(lobes=0),
        loops=3,
        growth_factor=1.5,
        spin_degrees=0,
        alternate_direction=False,
        start_from_center=True
    )


@pytest.fixture
def star_config() -> PatternConfig:
    """Spinning star with alternating direction."""
    return PatternConfig(
        shape=ShapeType.STAR,
        shape_params=ShapeParams(points=5, inner_radius=0.4),
        loops=6,
        growth_factor=1.2,
        spin_degrees=12,
        alternate_direction=True,
        start_from_center=True
    )
