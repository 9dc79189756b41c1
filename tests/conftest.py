"""Shared pytest fixtures for the eye laser tests."""
import pytest

from eye_laser.core.pose import Keypoint, Pose


def build_pose(default_confidence=1.0, **landmarks):
    """
    Build a Pose from keyword landmarks.

    Each value is (x, y) or (x, y, confidence).
    """
    keypoints = []
    for name, value in landmarks.items():
        if len(value) == 3:
            x, y, conf = value
        else:
            (x, y), conf = value, default_confidence
        keypoints.append(Keypoint(name, float(x), float(y), float(conf)))
    return Pose(tuple(keypoints))


@pytest.fixture
def make_pose():
    """Factory fixture for poses built from named landmarks."""
    return build_pose


@pytest.fixture
def facing_up_pose():
    """
    A raw pose that, once mirrored on a 1000 wide field, has its eyes at
    (490, 300) and (510, 300) and faces straight up.
    """
    width = 1000
    return build_pose(
        nose=(width - 500, 290),
        left_eye=(width - 490, 300),
        right_eye=(width - 510, 300),
        left_ear=(width - 480, 300),
        right_ear=(width - 520, 300),
        left_shoulder=(width - 450, 400),
        right_shoulder=(width - 550, 400),
    )
