"""
constants.py: Centralized configuration for the simulation core and the pygame shell.
"""

import math

# -------- Timing --------
TICK_RATE = 60                  # Logical ticks per second (one per display refresh)

# -------- Drawing Surface --------
# Physics and collision constants are defined in this coordinate space.
SCREEN_WIDTH = 320
SCREEN_HEIGHT = 480
DEFAULT_SCALE = 1               # Integer window upscaling factor
SKY_COLOR = (0x70, 0xC5, 0xCE)  # Fallback fill behind the background image

DEGREE = math.pi / 180

# -------- Flyer Config (pixels / tick) --------
FLYER_X = 50                    # Fixed horizontal position
FLYER_REST_Y = 150              # Pinned height while READY
FLYER_WIDTH = 34
FLYER_HEIGHT = 24
FLYER_RADIUS = 12               # For collision detection
GRAVITY = 0.25                  # Velocity gained every tick
FLAP_IMPULSE = 4.6              # Upward velocity set by a flap
ROTATION_ASCENT = -25 * DEGREE  # Nose-up pose while rising
ROTATION_STEP = 5 * DEGREE      # Nose-down rotation per falling tick
ROTATION_MAX = 90 * DEGREE

# -------- Ground Config --------
GROUND_HEIGHT = 112
GROUND_SPEED = 2
GROUND_Y = SCREEN_HEIGHT - GROUND_HEIGHT

# -------- Obstacle Config --------
OBSTACLE_WIDTH = 52
OBSTACLE_HEIGHT = 400
OBSTACLE_GAP = 100
OBSTACLE_SPEED = 2              # Matches GROUND_SPEED
OBSTACLE_SPAWN_INTERVAL = 120   # Ticks between spawns
OBSTACLE_BASE_OFFSET = -150     # Spawn offsets fall in [2 * base, base)

# -------- Assets --------
ASSET_DIR_ENV = "FLAPPY_ASSET_DIR"
ASSET_FILES = {
    "flyer": "bluebird-midflap.png",
    "background": "background-day.png",
    "ground": "base.png",
    "obstacle": "pipe-green.png",
}
# Logical size and flat colour used when an image cannot be loaded
ASSET_PLACEHOLDERS = {
    "flyer": ((FLYER_WIDTH, FLYER_HEIGHT), (250, 200, 60)),
    "background": ((SCREEN_WIDTH, SCREEN_HEIGHT), SKY_COLOR),
    "ground": ((SCREEN_WIDTH, GROUND_HEIGHT), (222, 216, 149)),
    "obstacle": ((OBSTACLE_WIDTH, OBSTACLE_HEIGHT), (115, 191, 46)),
}

# -------- UI Chrome --------
TEXT_COLOR = (255, 255, 255)
SHADOW_COLOR = (40, 40, 40)
PANEL_COLOR = (222, 216, 149)
BUTTON_COLOR = (232, 97, 1)
RESTART_BUTTON = (110, 280, 100, 36)   # x, y, w, h in logical pixels
