"""
General game settings module.
"""

# Screen settings
SCREEN_SETTINGS = {
    "default_width": 1280,
    "default_height": 720
}

# Game colors
COLORS = {
    "white": (255, 255, 255),
    "black": (0, 0, 0),
    "green": (0, 200, 0),
    "red": (200, 0, 0),
    "yellow": (255, 255, 0),
    "cyan": (0, 200, 200),
    "gold": (255, 215, 0)
}

# Keypoint labels (for display)
KEYPOINT_LABELS = {
    0: "Nose",
    1: "L Eye",
    2: "R Eye",
    3: "L Ear",
    4: "R Ear",
    5: "L Shoulder",
    6: "R Shoulder",
}
