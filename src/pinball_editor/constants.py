"""Application-wide constants and default values."""

# Play field (pixels)
FIELD_WIDTH = 520
FIELD_HEIGHT = 900

# Walls
DEFAULT_WALL_THICKNESS = 16.0
MIN_SEGMENT_LENGTH = 2.0  # shorter point pairs produce no collision body
MIN_WALL_THICKNESS = 2
MAX_WALL_THICKNESS = 60
WALL_FRICTION = 0.25
WALL_ELASTICITY = 0.0

# Ball
BALL_RADIUS = 11.0
BALL_SPAWN_X_RATIO = 0.2  # fraction of field width
BALL_SPAWN_Y = 40.0
BALL_OUT_MARGIN = 120.0
BALL_ELASTICITY = 0.12
BALL_FRICTION = 0.02
BALL_AIR_DRAG = 0.0008
BALL_DENSITY = 0.002

# Simulation
GRAVITY_X = 0.0
GRAVITY_Y = 1050.0  # px/s^2, y grows downward
SIMULATION_HZ = 60

# Role labels carried by physics bodies
BALL_LABEL = "ball"
WALL_LABEL = "wallSegment"

# Session log
LOG_CAPACITY = 60

# Default window dimensions (pixels)
DEFAULT_WINDOW_WIDTH = 1100
DEFAULT_WINDOW_HEIGHT = 960
