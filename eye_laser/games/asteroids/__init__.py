"""
Asteroid field simulation, beams and scoring.
"""
from eye_laser.games.asteroids.asteroid import (Asteroid, cull_asteroids, maybe_spawn,
                                                spawn_asteroid)
from eye_laser.games.asteroids.game_logic import (AsteroidGameLogic, BeamSegment, FrameResult,
                                                  HeadMarker, check_head_hit, fire_beam)

__all__ = [
    "Asteroid",
    "AsteroidGameLogic",
    "BeamSegment",
    "FrameResult",
    "HeadMarker",
    "check_head_hit",
    "cull_asteroids",
    "fire_beam",
    "maybe_spawn",
    "spawn_asteroid",
]
