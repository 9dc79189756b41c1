"""
Asteroid entity, spawning and culling.
"""
import math
import random

import pygame

from eye_laser.config.asteroid_config import (ASTEROID_COLOR, ASTEROID_SIZE_MAX,
                                              ASTEROID_SIZE_MIN, ASTEROID_SPAWN_RATE,
                                              ASTEROID_SPEED_MAX, ASTEROID_SPEED_MIN,
                                              CULL_MARGIN, SPAWN_OFFSET)

# Spawn edges, clockwise from the top
TOP, RIGHT, BOTTOM, LEFT = range(4)


class Asteroid:
    """A circular hazard moving in a straight line."""

    def __init__(self, x: float, y: float, vx: float, vy: float, radius: float):
        """
        Args:
            x: Center X coordinate
            y: Center Y coordinate
            vx: X velocity per frame
            vy: Y velocity per frame
            radius: Collision radius, also the score value when destroyed
        """
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.radius = radius
        self.dead = False

    @property
    def position(self):
        return (self.x, self.y)

    def advance(self):
        """Move by one frame of velocity."""
        self.x += self.vx
        self.y += self.vy

    def is_outside(self, field_width, field_height, margin=CULL_MARGIN):
        return not (-margin < self.x < field_width + margin
                    and -margin < self.y < field_height + margin)

    def draw(self, screen):
        pygame.draw.circle(screen, ASTEROID_COLOR, (int(self.x), int(self.y)), int(self.radius))

    def __repr__(self):
        return (f"Asteroid(x={self.x:.1f}, y={self.y:.1f}, vx={self.vx:.2f}, "
                f"vy={self.vy:.2f}, radius={self.radius:.1f})")


def spawn_asteroid(field_width, field_height, rng=random):
    """
    Create an asteroid just outside a random edge, heading for the field center.

    Args:
        field_width: Current field width
        field_height: Current field height
        rng: Source of randomness (random module or a random.Random)

    Returns:
        Asteroid: the new asteroid
    """
    edge = rng.randrange(4)
    if edge == TOP:
        x, y = rng.uniform(0, field_width), -SPAWN_OFFSET
    elif edge == RIGHT:
        x, y = field_width + SPAWN_OFFSET, rng.uniform(0, field_height)
    elif edge == BOTTOM:
        x, y = rng.uniform(0, field_width), field_height + SPAWN_OFFSET
    else:
        x, y = -SPAWN_OFFSET, rng.uniform(0, field_height)

    angle = math.atan2(field_height / 2 - y, field_width / 2 - x)
    speed = rng.uniform(ASTEROID_SPEED_MIN, ASTEROID_SPEED_MAX)
    radius = rng.uniform(ASTEROID_SIZE_MIN, ASTEROID_SIZE_MAX) / 2

    return Asteroid(x, y, math.cos(angle) * speed, math.sin(angle) * speed, radius)


def maybe_spawn(field_width, field_height, rng=random, spawn_rate=ASTEROID_SPAWN_RATE):
    """One Bernoulli trial per frame; returns a new asteroid or None."""
    if rng.random() < spawn_rate:
        return spawn_asteroid(field_width, field_height, rng)
    return None


def cull_asteroids(asteroids, field_width, field_height, margin=CULL_MARGIN):
    """Drop asteroids that have drifted more than `margin` outside the field."""
    return [a for a in asteroids if not a.is_outside(field_width, field_height, margin)]
