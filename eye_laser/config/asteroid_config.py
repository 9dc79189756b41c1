"""
Asteroid game configuration module.
"""

# Keypoints at or below this confidence are treated as missing
KEYPOINT_CONFIDENCE_THRESHOLD = 0.5

# Asteroid spawning (probability per frame, not per second)
ASTEROID_SPAWN_RATE = 0.02
ASTEROID_SPEED_MIN = 1.0
ASTEROID_SPEED_MAX = 3.0
# Sampled as a diameter, stored as a radius
ASTEROID_SIZE_MIN = 25
ASTEROID_SIZE_MAX = 60

# Distance outside the field edge where asteroids appear
SPAWN_OFFSET = 20

# Asteroids further than this outside the field are dropped
CULL_MARGIN = 100

# Beams are cast as finite segments of this length
BEAM_LENGTH = 1000

# Beam drawing: solid core plus a wider translucent glow
BEAM_STYLE = {
    "core_color": (255, 0, 0),
    "core_width": 6,
    "glow_color": (255, 80, 80, 150),
    "glow_width": 12,
}

HEAD_STYLE = {
    "fill_color": (255, 255, 0, 180),
    "outline_color": (0, 0, 0),
    "outline_width": 2,
}

ASTEROID_COLOR = (150, 150, 150)
BACKGROUND_COLOR = (30, 30, 30)
HIT_FLASH_COLOR = (255, 0, 0, 120)

TARGET_FPS = 60
