"""
Single-slot hand-off of pose snapshots from the detector thread to the game loop.
"""
import threading
import time
from dataclasses import dataclass, field
from typing import Optional, Tuple

import numpy as np

from eye_laser.core.pose import Pose


@dataclass(frozen=True)
class PoseSnapshot:
    """Full replacement set of poses from one detection pass."""

    poses: Tuple[Pose, ...] = ()
    frame: Optional[np.ndarray] = field(default=None, repr=False, compare=False)
    timestamp: float = 0.0


EMPTY_SNAPSHOT = PoseSnapshot()


class LatestPoseSlot:
    """
    Holds the most recently published snapshot. Writers overwrite, readers
    never block waiting for new data and may see the same snapshot on
    several frames.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._snapshot = EMPTY_SNAPSHOT
        self._version = 0

    def publish(self, poses, frame=None, timestamp=None):
        snapshot = PoseSnapshot(
            poses=tuple(poses),
            frame=frame,
            timestamp=time.time() if timestamp is None else timestamp,
        )
        with self._lock:
            self._snapshot = snapshot
            self._version += 1
        return snapshot

    def latest(self) -> PoseSnapshot:
        with self._lock:
            return self._snapshot

    @property
    def version(self) -> int:
        """Number of snapshots published so far."""
        with self._lock:
            return self._version

    def clear(self):
        with self._lock:
            self._snapshot = EMPTY_SNAPSHOT
