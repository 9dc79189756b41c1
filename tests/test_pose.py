"""Tests for pose mirroring, head location and facing direction."""
import math

import numpy as np
import pytest

from eye_laser.core.pose import (Keypoint, Landmark, Pose, estimate_direction, head_center,
                                 mirror_pose)


class TestPoseLookup:
    """Landmark lookup by enumeration."""

    def test_confident_keypoint_is_returned(self, make_pose):
        pose = make_pose(nose=(10, 20, 0.9))
        assert pose.get(Landmark.NOSE) == Keypoint("nose", 10.0, 20.0, 0.9)

    def test_threshold_is_exclusive(self, make_pose):
        pose = make_pose(nose=(10, 20, 0.5))
        assert pose.get(Landmark.NOSE) is None

    def test_missing_keypoint(self, make_pose):
        pose = make_pose(nose=(10, 20))
        assert pose.get(Landmark.LEFT_EAR) is None

    def test_get_all_requires_every_landmark(self, make_pose):
        pose = make_pose(left_eye=(0, 0), right_eye=(1, 0, 0.2))
        assert pose.get_all((Landmark.LEFT_EYE, Landmark.RIGHT_EYE)) is None

    def test_from_array_with_confidence(self):
        data = np.zeros((17, 3))
        data[:, 0] = np.arange(17)
        data[:, 2] = 0.8
        pose = Pose.from_array(data)

        assert len(pose) == 17
        assert pose.keypoints[0].name == "nose"
        assert pose.keypoints[16].name == "right_ankle"
        assert pose.get(Landmark.RIGHT_EAR).x == 4.0
        assert pose.keypoints[3].confidence == pytest.approx(0.8)

    def test_from_array_without_confidence(self):
        pose = Pose.from_array(np.ones((17, 2)))
        assert all(kp.confidence == 1.0 for kp in pose.keypoints)


class TestMirrorPose:
    """Horizontal reflection about the field center."""

    def test_reflects_x_and_keeps_y(self, make_pose):
        pose = make_pose(nose=(100, 50), left_eye=(90, 40, 0.3), right_eye=(640, 0))
        mirrored = mirror_pose(pose, 640)

        for original, flipped in zip(pose.keypoints, mirrored.keypoints):
            assert flipped.x == 640 - original.x
            assert flipped.y == original.y

    def test_preserves_names_order_and_confidence(self, make_pose):
        pose = make_pose(nose=(100, 50), left_eye=(90, 40, 0.3), right_eye=(110, 40, 0.7))
        mirrored = mirror_pose(pose, 640)

        assert len(mirrored) == len(pose)
        assert [kp.name for kp in mirrored.keypoints] == ["nose", "left_eye", "right_eye"]
        assert [kp.confidence for kp in mirrored.keypoints] == [1.0, 0.3, 0.7]

    def test_does_not_mutate_input(self, make_pose):
        pose = make_pose(nose=(100, 50))
        mirror_pose(pose, 640)
        assert pose.keypoints[0].x == 100

    def test_lookup_works_on_mirrored_pose(self, make_pose):
        mirrored = mirror_pose(make_pose(nose=(100, 50)), 640)
        assert mirrored.get(Landmark.NOSE).x == 540


class TestHeadCenter:
    """Head position from the eyes."""

    def test_center_and_size(self, make_pose):
        pose = make_pose(left_eye=(0, 0), right_eye=(3, 4))
        center, size = head_center(pose)
        assert center == pytest.approx((1.5, 2.0))
        assert size == pytest.approx(5.0)

    def test_low_confidence_eye(self, make_pose):
        pose = make_pose(left_eye=(0, 0), right_eye=(3, 4, 0.5))
        assert head_center(pose) is None

    def test_missing_eye(self, make_pose):
        assert head_center(make_pose(left_eye=(0, 0))) is None


class TestEstimateDirection:
    """Facing direction from nose and ears, falling back to shoulders."""

    def test_ear_tier(self, make_pose):
        pose = make_pose(nose=(0, -1), left_ear=(-1, 0), right_ear=(1, 0))
        direction = estimate_direction(pose)
        assert direction == pytest.approx((0.0, -1.0))
        assert math.hypot(*direction) == pytest.approx(1.0)

    def test_shoulder_fallback_when_ear_hidden(self, make_pose):
        pose = make_pose(
            nose=(10, 0),
            left_ear=(-1, 0, 0.2),
            right_ear=(1, 0),
            left_shoulder=(-10, 0),
            right_shoulder=(10, 0),
        )
        assert estimate_direction(pose) == pytest.approx((1.0, 0.0))

    def test_ears_preferred_over_shoulders(self, make_pose):
        pose = make_pose(
            nose=(0, 0),
            left_ear=(-1, 1),
            right_ear=(1, 1),
            left_shoulder=(-10, 0),
            right_shoulder=(0, 10),
        )
        assert estimate_direction(pose) == pytest.approx((0.0, -1.0))

    def test_zero_length_ear_tier_falls_through(self, make_pose):
        pose = make_pose(
            nose=(0, 0),
            left_ear=(-1, 0),
            right_ear=(1, 0),
            left_shoulder=(-5, 5),
            right_shoulder=(5, 5),
        )
        assert estimate_direction(pose) == pytest.approx((0.0, -1.0))

    def test_zero_length_everywhere_is_none(self, make_pose):
        pose = make_pose(
            nose=(0, 0),
            left_ear=(-1, 0),
            right_ear=(1, 0),
            left_shoulder=(-5, 0),
            right_shoulder=(5, 0),
        )
        assert estimate_direction(pose) is None

    def test_all_low_confidence_is_none(self, make_pose):
        pose = make_pose(
            default_confidence=0.5,
            nose=(0, -1),
            left_ear=(-1, 0),
            right_ear=(1, 0),
            left_shoulder=(-5, 5),
            right_shoulder=(5, 5),
        )
        assert estimate_direction(pose) is None

    def test_missing_nose_is_none(self, make_pose):
        pose = make_pose(left_ear=(-1, 0), right_ear=(1, 0))
        assert estimate_direction(pose) is None
