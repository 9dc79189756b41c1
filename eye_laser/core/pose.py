"""
Pose data types plus the mirror, head and facing-direction estimators.
"""
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Optional, Sequence, Tuple

import numpy as np

from eye_laser.config.asteroid_config import KEYPOINT_CONFIDENCE_THRESHOLD
from eye_laser.core.geometry import Point, distance, midpoint, normalize


class Landmark(str, Enum):
    """COCO keypoint names, in YOLO pose output order."""

    NOSE = "nose"
    LEFT_EYE = "left_eye"
    RIGHT_EYE = "right_eye"
    LEFT_EAR = "left_ear"
    RIGHT_EAR = "right_ear"
    LEFT_SHOULDER = "left_shoulder"
    RIGHT_SHOULDER = "right_shoulder"
    LEFT_ELBOW = "left_elbow"
    RIGHT_ELBOW = "right_elbow"
    LEFT_WRIST = "left_wrist"
    RIGHT_WRIST = "right_wrist"
    LEFT_HIP = "left_hip"
    RIGHT_HIP = "right_hip"
    LEFT_KNEE = "left_knee"
    RIGHT_KNEE = "right_knee"
    LEFT_ANKLE = "left_ankle"
    RIGHT_ANKLE = "right_ankle"


COCO_LANDMARKS = list(Landmark)


@dataclass(frozen=True)
class Keypoint:
    """A named, confidence-scored 2D landmark."""

    name: str
    x: float
    y: float
    confidence: float

    @property
    def position(self) -> Point:
        return (self.x, self.y)


@dataclass(frozen=True)
class Pose:
    """Ordered keypoints of one detected person."""

    keypoints: Tuple[Keypoint, ...]
    _index: Dict[str, Keypoint] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # First keypoint wins when a name repeats
        index = {}
        for kp in self.keypoints:
            index.setdefault(kp.name, kp)
        object.__setattr__(self, "_index", index)

    @classmethod
    def from_array(cls, keypoints: np.ndarray) -> "Pose":
        """
        Build a pose from one person's YOLO keypoint array.

        Args:
            keypoints: Array of shape [17, 2] or [17, 3] (x, y[, conf]).
                Without a confidence column every keypoint gets 1.0.

        Returns:
            Pose with COCO landmark names.
        """
        keypoints = np.asarray(keypoints, dtype=float)
        has_conf = keypoints.shape[1] > 2
        points = []
        for landmark, row in zip(COCO_LANDMARKS, keypoints):
            conf = float(row[2]) if has_conf else 1.0
            points.append(Keypoint(landmark.value, float(row[0]), float(row[1]), conf))
        return cls(tuple(points))

    def __len__(self):
        return len(self.keypoints)

    def get(self, landmark: Landmark) -> Optional[Keypoint]:
        """Return the keypoint if present and confident enough, else None."""
        kp = self._index.get(landmark.value)
        if kp is None or kp.confidence <= KEYPOINT_CONFIDENCE_THRESHOLD:
            return None
        return kp

    def get_all(self, landmarks: Sequence[Landmark]) -> Optional[Tuple[Keypoint, ...]]:
        """Return all requested keypoints, or None if any one is missing."""
        found = []
        for landmark in landmarks:
            kp = self.get(landmark)
            if kp is None:
                return None
            found.append(kp)
        return tuple(found)


def mirror_pose(pose: Pose, field_width: float) -> Pose:
    """
    Reflect a raw pose about the vertical center line of the field.

    Always call this on the pose delivered by the detector. Mirroring an
    already mirrored pose at a different field width does not give back the
    original.

    Args:
        pose: Raw detected pose
        field_width: Current width of the play field

    Returns:
        A new Pose with x replaced by field_width - x.
    """
    return Pose(tuple(replace(kp, x=field_width - kp.x) for kp in pose.keypoints))


def head_center(pose: Pose) -> Optional[Tuple[Point, float]]:
    """
    Locate the head from the two eyes.

    Returns:
        (center, eye_separation), or None if either eye is missing.
    """
    eyes = pose.get_all((Landmark.LEFT_EYE, Landmark.RIGHT_EYE))
    if eyes is None:
        return None
    left_eye, right_eye = eyes
    return (
        midpoint(left_eye.position, right_eye.position),
        distance(left_eye.position, right_eye.position),
    )


# Tried in order; the first pair that gives a non-zero offset wins
DIRECTION_TIERS = (
    (Landmark.LEFT_EAR, Landmark.RIGHT_EAR),
    (Landmark.LEFT_SHOULDER, Landmark.RIGHT_SHOULDER),
)


def estimate_direction(pose: Pose) -> Optional[Point]:
    """
    Estimate the facing direction as a unit vector from a landmark pair
    midpoint to the nose.

    Args:
        pose: Mirrored pose

    Returns:
        Unit (x, y) vector, or None when no tier has confident landmarks
        and a non-zero offset.
    """
    nose = pose.get(Landmark.NOSE)
    if nose is None:
        return None

    for pair in DIRECTION_TIERS:
        anchors = pose.get_all(pair)
        if anchors is None:
            continue
        mid_x, mid_y = midpoint(anchors[0].position, anchors[1].position)
        direction = normalize(nose.x - mid_x, nose.y - mid_y)
        if direction is not None:
            return direction

    return None
