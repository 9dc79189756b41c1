"""
Asteroid game logic: beams, head collisions, scoring and the per-frame step.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from eye_laser.config.asteroid_config import ASTEROID_SPAWN_RATE, BEAM_LENGTH
from eye_laser.core.geometry import Point, distance, point_segment_distance
from eye_laser.core.pose import Landmark, Pose, estimate_direction, head_center, mirror_pose
from eye_laser.games.asteroids.asteroid import Asteroid, cull_asteroids, maybe_spawn

logger = logging.getLogger("AsteroidGame")


@dataclass(frozen=True)
class HeadMarker:
    center: Point
    diameter: float


@dataclass(frozen=True)
class BeamSegment:
    start: Point
    end: Point


@dataclass
class FrameResult:
    """What happened during one step, for the renderer."""

    heads: List[HeadMarker] = field(default_factory=list)
    beams: List[BeamSegment] = field(default_factory=list)
    destroyed: List[Asteroid] = field(default_factory=list)
    head_contacts: int = 0
    score_gained: float = 0.0

    @property
    def head_hit(self) -> bool:
        return self.head_contacts > 0


def beam_end(origin: Point, direction: Point, length: float = BEAM_LENGTH) -> Point:
    return (origin[0] + direction[0] * length, origin[1] + direction[1] * length)


def fire_beam(origin: Point, direction: Point, asteroids: Sequence[Asteroid],
              length: float = BEAM_LENGTH) -> Tuple[List[Asteroid], List[Asteroid]]:
    """
    Cast a beam and split the asteroids into survivors and destroyed.

    An asteroid is destroyed when its center is strictly closer than its
    radius to the beam segment.

    Args:
        origin: Beam start point
        direction: Unit facing vector
        asteroids: Live asteroids
        length: Beam length

    Returns:
        (survivors, destroyed)
    """
    end = beam_end(origin, direction, length)
    survivors = []
    destroyed = []
    for asteroid in asteroids:
        if point_segment_distance(asteroid.position, origin, end) < asteroid.radius:
            asteroid.dead = True
            destroyed.append(asteroid)
        else:
            survivors.append(asteroid)
    return survivors, destroyed


def count_head_contacts(pose: Pose, asteroids: Sequence[Asteroid]) -> int:
    """
    Count asteroids touching the head of a mirrored pose.

    The head radius is the full eye separation.

    Returns:
        Number of touching asteroids, 0 when the eyes are not visible.
    """
    head = head_center(pose)
    if head is None:
        return 0
    center, head_radius = head
    return sum(1 for a in asteroids if distance(a.position, center) < a.radius + head_radius)


def check_head_hit(pose: Pose, asteroids: Sequence[Asteroid]) -> bool:
    return count_head_contacts(pose, asteroids) > 0


class AsteroidGameLogic:
    """Owns the asteroid field and the score, advanced once per frame."""

    def __init__(self, scoring: bool = True, rng: Optional[random.Random] = None,
                 spawn_rate: float = ASTEROID_SPAWN_RATE):
        """
        Initialize game logic.

        Args:
            scoring: Keep score and bank it on head hits. The classic mode
                only destroys asteroids and flashes on hits.
            rng: Random source for spawning; defaults to the random module
            spawn_rate: Spawn probability per frame
        """
        self.scoring = scoring
        self.rng = rng if rng is not None else random
        self.spawn_rate = spawn_rate

        self.asteroids: List[Asteroid] = []
        self.score = 0.0
        self.high_score = 0.0
        self.rounds = 0
        self.frame_count = 0

    def reset(self):
        """Clear the field and the current score. The high score is kept."""
        self.asteroids = []
        self.score = 0.0
        self.rounds = 0
        self.frame_count = 0

    def spawn(self, field_width, field_height):
        asteroid = maybe_spawn(field_width, field_height, self.rng, self.spawn_rate)
        if asteroid is not None:
            self.asteroids.append(asteroid)
            logger.debug(f"Spawned {asteroid}")
        return asteroid

    def advance(self):
        for asteroid in self.asteroids:
            asteroid.advance()

    def fire_beams(self, origins: Sequence[Point], direction: Point, result: FrameResult):
        """
        Fire one beam per origin along the same direction.

        Asteroids destroyed by an earlier beam are already gone when the next
        beam is cast, so nothing is counted twice.
        """
        for origin in origins:
            self.asteroids, destroyed = fire_beam(origin, direction, self.asteroids)
            result.beams.append(BeamSegment(origin, beam_end(origin, direction)))
            if not destroyed:
                continue
            result.destroyed.extend(destroyed)
            if self.scoring:
                gained = sum(a.radius for a in destroyed)
                self.score += gained
                result.score_gained += gained

    def bank_score(self):
        """End the round: keep the best score and start again from zero."""
        banked = self.score
        self.high_score = max(self.high_score, banked)
        self.score = 0.0
        return banked

    def process_pose(self, mirrored: Pose, result: FrameResult):
        head = head_center(mirrored)
        if head is None:
            return
        center, eye_separation = head
        result.heads.append(HeadMarker(center, eye_separation * 2))

        direction = estimate_direction(mirrored)
        if direction is None:
            return
        eyes = (mirrored.get(Landmark.LEFT_EYE), mirrored.get(Landmark.RIGHT_EYE))
        self.fire_beams([eye.position for eye in eyes], direction, result)

    def step(self, poses: Optional[Sequence[Pose]], field_width, field_height) -> FrameResult:
        """
        Advance the game by one frame.

        Args:
            poses: Latest raw (unmirrored) poses; None or empty means nobody
                is in view
            field_width: Current field width
            field_height: Current field height

        Returns:
            FrameResult describing heads, beams and hits for rendering.
        """
        result = FrameResult()
        poses = poses or ()
        self.frame_count += 1

        self.spawn(field_width, field_height)
        self.advance()

        mirrored = [mirror_pose(pose, field_width) for pose in poses]
        for pose in mirrored:
            self.process_pose(pose, result)

        if mirrored:
            result.head_contacts = count_head_contacts(mirrored[0], self.asteroids)
            if result.head_hit:
                self.rounds += 1
                if self.scoring:
                    banked = self.bank_score()
                    logger.info(f"Head hit by {result.head_contacts} asteroid(s), "
                                f"banked {banked:.0f}, high score {self.high_score:.0f}")
                else:
                    logger.info(f"Head hit by {result.head_contacts} asteroid(s)")

        self.asteroids = cull_asteroids(self.asteroids, field_width, field_height)
        return result

    def get_game_state(self):
        """
        Get the current game state for UI rendering.

        Returns:
            dict: game state information
        """
        return {
            'score': self.score,
            'high_score': self.high_score,
            'rounds': self.rounds,
            'asteroids': self.asteroids,
            'scoring': self.scoring,
        }
