"""Numeric constants for pattern generation.

Table geometry defaults describe an Oasis Mini; the service overrides them
from ``config/pattern.yaml`` when estimating draw time.
"""

import math

TWO_PI = math.pi * 2

# Shape sampling
MIN_POINTS_PER_SHAPE = 60
POLYGON_POINTS_BUDGET = 60
MIN_POINTS_PER_POLYGON_EDGE = 20
STAR_POINTS_PER_EDGE = 15
SPIRAL_POINTS_PER_TURN = 60
ROSE_POINTS_PER_PETAL = 60
HEART_POINTS = 120
HEART_SCALE = 17.0
LOBE_AMPLITUDE = 0.2
POINTS_PER_LOBE = 20

# Boundary handling
TRANSITION_POINTS = 30
BOUNDARY_TOLERANCE = 0.01
FLAVOR_THRESHOLD = 0.5
ENDPOINT_BAND = 0.05

# Physical table
TABLE_DIAMETER_MM = 380.0
BALL_SPEED_MM_PER_SECOND = 2.5

# Text format
THR_PRECISION = 5
GENERATOR_NAME = "Sand Patterns Pattern Creator"
MAX_PATTERN_NAME_LENGTH = 100

# Preview
PREVIEW_SIZE = 200
PREVIEW_MARGIN = 10
