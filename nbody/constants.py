#!/usr/bin/env python3
"""
Shared constants for the N-body simulator.

Keeping constants in one place helps ensure values are consistent across the
codebase and makes tuning easier. Units are world units (drawn 1:1 as pixels by an
identity camera frame) and seconds.
"""
from .color import BLACK, DARK_GRAY, GRAY, GREEN, RED, WHITE, YELLOW

# Physics
G = 66_700_000  # geometric attraction constant; force = G / r^2, masses not applied
MIN_SEPARATION = 1e-6  # pairs closer than this exert no force on each other

# Window
WINDOW_TITLE = "Simulation"
WINDOW_WIDTH = 1000
WINDOW_HEIGHT = 1000
DEFAULT_CAMERA_WIDTH = 640
DEFAULT_CAMERA_HEIGHT = 400

# Render order (smaller depth is drawn first)
BODY_DEPTH = 1
TRAJECTORY_DEPTH = 4
FRAME_AXES_DEPTH = 5
GRID_DEPTH = 10

# Rendering
BACKGROUND_COLOR = BLACK
BODY_COLOR = WHITE
VELOCITY_VECTOR_COLOR = RED
FORCE_VECTOR_COLOR = YELLOW
FORCE_ARROW_SCALE = 0.33  # world units per unit of force
GRID_COLOR = DARK_GRAY
TRAJECTORY_COLOR = GRAY
FRAME_X_AXIS_COLOR = RED
FRAME_Y_AXIS_COLOR = GREEN
GRID_SPACING = 100
ARROW_HEAD_LENGTH = 10  # pixels
ARROW_HEAD_HALF_WIDTH = 5  # pixels
FRAME_AXIS_LENGTH = 50
FRAME_MARKER_RADIUS = 10

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000

# Frames
MAX_FRAME_DEPTH = 1024  # parent-chain walk limit, also used for cycle detection

# Trajectory preview
TRAJECTORY_STEPS = 200
TRAJECTORY_SEGMENT_LENGTH = 5.0  # world units of arc length per preview step

# Driver
TRACKED_BODY = 0
PREDICTED_BODY = 1
CAMERA_FOLLOW_RATE = 5.0  # per second
MAX_FRAME_DT = 0.1  # seconds; caps the step after a stall
MAX_FPS = 200
LOG_EVERY_TICKS = 1000
