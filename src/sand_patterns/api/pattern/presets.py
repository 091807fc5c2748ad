"""Pattern presets and mobile parameter limits."""

import math
import random
from typing import Dict, List, Optional

from sand_patterns.api.pattern.models import (
    ShapeType,
    ShapeParams,
    PatternConfig,
    PatternPreset,
    ParameterConstraints,
    MobileConstraints,
)


MOBILE_CONSTRAINTS = MobileConstraints(
    loops=ParameterConstraints(min=5, max=100, default=25, step=5),
    growth=ParameterConstraints(min=0.5, max=3.0, default=1.2, step=0.1),
    spin=ParameterConstraints(min=0, max=45, default=10, step=1),
    polygon_sides=ParameterConstraints(min=3, max=12, default=6, step=1),
    star_points=ParameterConstraints(min=3, max=12, default=5, step=1),
    star_inner_radius=ParameterConstraints(min=0.2, max=0.8, default=0.4, step=0.05),
    spiral_turns=ParameterConstraints(min=3, max=20, default=8, step=1),
    spiral_tightness=ParameterConstraints(min=0.3, max=1.0, default=0.8, step=0.1),
    rose_petals=ParameterConstraints(min=3, max=12, default=5, step=1),
    rose_petal_depth=ParameterConstraints(min=0.3, max=1.0, default=0.5, step=0.1),
    circle_lobes=ParameterConstraints(min=0, max=8, default=0, step=1),
)

DEFAULT_PATTERN_CONFIG = PatternConfig(
    shape=ShapeType.CIRCLE,
    shape_params=ShapeParams(lobes=0),
    loops=int(MOBILE_CONSTRAINTS.loops.default),
    growth_factor=MOBILE_CONSTRAINTS.growth.default,
    spin_degrees=MOBILE_CONSTRAINTS.spin.default,
    alternate_direction=False,
    start_from_center=True,
)

# Shape parameter -> constraint name
SHAPE_PARAM_CONSTRAINTS: Dict[ShapeType, Dict[str, str]] = {
    ShapeType.CIRCLE: {"lobes": "circle_lobes"},
    ShapeType.POLYGON: {"sides": "polygon_sides"},
    ShapeType.STAR: {"points": "star_points", "inner_radius": "star_inner_radius"},
    ShapeType.SPIRAL: {"turns": "spiral_turns", "tightness": "spiral_tightness"},
    ShapeType.ROSE: {"petals": "rose_petals", "petal_depth": "rose_petal_depth"},
    ShapeType.HEART: {},
}

INTEGER_SHAPE_PARAMS = {"lobes", "sides", "points", "turns", "petals"}


def _preset(id, name, description, shape, shape_params, loops, growth_factor, spin_degrees,
            alternate_direction=False, is_random=False):
    return PatternPreset(
        id=id,
        name=name,
        description=description,
        shape=shape,
        shape_params=ShapeParams(**shape_params),
        loops=loops,
        growth_factor=growth_factor,
        spin_degrees=spin_degrees,
        alternate_direction=alternate_direction,
        start_from_center=True,
        is_random=is_random,
    )


# Curated for 5-15 minute draws
PATTERN_PRESETS: List[PatternPreset] = [
    _preset("classic-spiral", "Classic Spiral", "A simple, elegant outward spiral",
            ShapeType.SPIRAL, {"turns": 10, "tightness": 0.8}, 1, 1.0, 0),
    _preset("spinning-star", "Spinning Star", "A five-pointed star that twists as it grows",
            ShapeType.STAR, {"points": 5, "inner_radius": 0.4}, 30, 1.1, 12),
    _preset("flower-bloom", "Flower Bloom", "Delicate petals spiraling outward like a blooming flower",
            ShapeType.ROSE, {"petals": 6, "petal_depth": 0.5}, 40, 1.08, 6),
    _preset("hypnotic-hexagon", "Hypnotic Hexagon", "Mesmerizing hexagons rotating and growing",
            ShapeType.POLYGON, {"sides": 6}, 50, 1.05, 6),
    _preset("ocean-wave", "Ocean Wave", "Undulating waves like ripples on water",
            ShapeType.CIRCLE, {"lobes": 4}, 35, 1.12, 9),
    _preset("galaxy-swirl", "Galaxy Swirl", "A cosmic spiral with dramatic rotation",
            ShapeType.SPIRAL, {"turns": 5, "tightness": 0.6}, 20, 1.15, 18),
    _preset("zen-garden", "Zen Garden", "Simple, meditative concentric circles",
            ShapeType.CIRCLE, {"lobes": 0}, 80, 1.02, 0),
    _preset("random-magic", "Random Magic", "Surprise yourself with a randomly generated pattern",
            ShapeType.CIRCLE, {}, 25, 1.1, 10, is_random=True),
]

EXTENDED_PRESETS: List[PatternPreset] = [
    _preset("love-heart", "Love Heart", "Hearts spiraling outward",
            ShapeType.HEART, {}, 25, 1.12, 15),
    _preset("sacred-triangle", "Sacred Triangle", "Triangles rotating to form intricate patterns",
            ShapeType.POLYGON, {"sides": 3}, 60, 1.04, 4, alternate_direction=True),
    _preset("square-dance", "Square Dance", "Squares alternating direction for a woven look",
            ShapeType.POLYGON, {"sides": 4}, 45, 1.06, 5, alternate_direction=True),
    _preset("starburst", "Starburst", "An eight-pointed star expanding outward",
            ShapeType.STAR, {"points": 8, "inner_radius": 0.5}, 25, 1.15, 7.5),
    _preset("wild-rose", "Wild Rose", "Many small petals creating a dense pattern",
            ShapeType.ROSE, {"petals": 9, "petal_depth": 0.7}, 30, 1.1, 4),
    _preset("tight-coil", "Tight Coil", "A very tight spiral with many turns",
            ShapeType.SPIRAL, {"turns": 15, "tightness": 0.95}, 1, 1.0, 0),
]


def get_main_presets() -> List[PatternPreset]:
    """Presets shown in the quick select grid."""
    return list(PATTERN_PRESETS)


def get_all_presets() -> List[PatternPreset]:
    return PATTERN_PRESETS + EXTENDED_PRESETS


def get_preset_by_id(preset_id: str) -> Optional[PatternPreset]:
    return next((p for p in get_all_presets() if p.id == preset_id), None)


def random_in_range(constraint: ParameterConstraints, rng: random.Random) -> float:
    """Random value on the constraint's step grid, rounded to 2 decimals."""
    steps = int(math.floor((constraint.max - constraint.min) / constraint.step))
    value = constraint.min + rng.randint(0, steps) * constraint.step
    return round(value * 100) / 100


def generate_random_shape_params(shape: ShapeType, rng: Optional[random.Random] = None) -> ShapeParams:
    """Random parameters for ``shape`` within the mobile limits."""
    rng = rng or random.Random()
    values = {}
    for param, constraint_name in SHAPE_PARAM_CONSTRAINTS[shape].items():
        value = random_in_range(getattr(MOBILE_CONSTRAINTS, constraint_name), rng)
        values[param] = int(value) if param in INTEGER_SHAPE_PARAMS else value
    return ShapeParams(**values)


def generate_random_config(rng: Optional[random.Random] = None) -> PatternConfig:
    """Random pattern configuration within the mobile limits."""
    rng = rng or random.Random()
    shape = rng.choice(list(ShapeType))
    return PatternConfig(
        shape=shape,
        shape_params=generate_random_shape_params(shape, rng),
        loops=int(random_in_range(MOBILE_CONSTRAINTS.loops, rng)),
        growth_factor=random_in_range(MOBILE_CONSTRAINTS.growth, rng),
        spin_degrees=random_in_range(MOBILE_CONSTRAINTS.spin, rng),
        alternate_direction=rng.random() > 0.7,
        start_from_center=True,
    )


def preset_to_config(preset: PatternPreset, rng: Optional[random.Random] = None) -> PatternConfig:
    """Configuration for a preset; random presets roll a new config."""
    if preset.is_random:
        return generate_random_config(rng)

    return PatternConfig(
        shape=preset.shape,
        shape_params=preset.shape_params,
        loops=preset.loops,
        growth_factor=preset.growth_factor,
        spin_degrees=preset.spin_degrees,
        alternate_direction=preset.alternate_direction,
        start_from_center=preset.start_from_center,
    )
