"""
Pose detection using YOLO11-Pose, plus a background detector thread that
feeds the game loop.
"""
import logging
import threading
import time
from typing import Optional, Tuple

import cv2
import numpy as np
import torch
from ultralytics import YOLO

from eye_laser.config.asteroid_config import KEYPOINT_CONFIDENCE_THRESHOLD
from eye_laser.config.game_settings import KEYPOINT_LABELS
from eye_laser.core.pose import Pose
from eye_laser.core.pose_slot import LatestPoseSlot

logger = logging.getLogger(__name__)


class PoseFramework:
    """YOLO11-Pose based framework for human pose detection."""

    def __init__(
        self,
        model_path: str = "yolo11n-pose.pt",
        device: Optional[str] = None,
        confidence_threshold: float = 0.5,
    ):
        """
        Initialize the YOLO11-Pose framework.

        Args:
            model_path: Path to the YOLO11 pose model weights.
            device: Device to run the model on ('cuda' or 'cpu'). If None, will use cuda if available.
            confidence_threshold: Minimum person detection confidence to consider.
        """
        self.device = device or ('cuda' if torch.cuda.is_available() else 'cpu')
        logger.info(f"Using device: {self.device}")

        self.model = YOLO(model_path)
        self.confidence_threshold = confidence_threshold

        # Camera attribute (will be set when setup_camera is called)
        self.camera = None

    def process_frame(self, frame: np.ndarray) -> Tuple[Pose, ...]:
        """
        Detect poses in a single frame.

        The frame is not mirrored here; keypoints are returned in the
        coordinates of the frame as captured.

        Args:
            frame: Input image frame as numpy array (BGR format from OpenCV).

        Returns:
            One Pose per detected person, in detection order.
        """
        with torch.no_grad():
            results = self.model.predict(
                frame,
                device=self.device,
                verbose=False,
                conf=self.confidence_threshold
            )

        if not results:
            return ()

        result = results[0]
        if getattr(result, 'keypoints', None) is None or getattr(result, 'boxes', None) is None:
            return ()

        keypoints_np = result.keypoints.data.cpu().numpy()
        boxes_np = result.boxes.data.cpu().numpy()

        poses = []
        for i in range(min(len(boxes_np), len(keypoints_np))):
            if float(boxes_np[i][4]) > self.confidence_threshold:
                poses.append(Pose.from_array(keypoints_np[i]))
        return tuple(poses)

    def draw_results(self, frame: np.ndarray, poses) -> np.ndarray:
        """
        Draw head keypoints of each pose on a copy of the frame.

        Args:
            frame: Input image frame.
            poses: Poses in the frame's coordinates.

        Returns:
            Frame with visualizations.
        """
        vis_frame = frame.copy()
        for pose in poses:
            for i, kp in enumerate(pose.keypoints):
                if i not in KEYPOINT_LABELS or kp.confidence <= KEYPOINT_CONFIDENCE_THRESHOLD:
                    continue
                x, y = int(kp.x), int(kp.y)
                cv2.circle(vis_frame, (x, y), 4, (0, 255, 255), -1)
                cv2.putText(
                    vis_frame,
                    KEYPOINT_LABELS[i],
                    (x + 5, y - 5),
                    cv2.FONT_HERSHEY_SIMPLEX,
                    0.4,
                    (0, 255, 255),
                    1
                )
        return vis_frame

    def setup_camera(self, camera_id: int = 0, width: int = 1280, height: int = 720):
        """
        Set up and configure a camera for capturing.

        Args:
            camera_id: Camera device ID.
            width: Desired frame width.
            height: Desired frame height.

        Returns:
            The opened cv2.VideoCapture.
        """
        self.camera = cv2.VideoCapture(camera_id)
        self.camera.set(cv2.CAP_PROP_FRAME_WIDTH, width)
        self.camera.set(cv2.CAP_PROP_FRAME_HEIGHT, height)

        if not self.camera.isOpened():
            raise RuntimeError(f"Failed to open camera with ID {camera_id}")
        return self.camera

    def release(self) -> None:
        """
        Release the camera.
        This method should be called when the application ends.
        """
        if self.camera is not None:
            self.camera.release()
            self.camera = None


class PoseDetector:
    """
    Runs camera capture and pose inference on a daemon thread and publishes
    each result into a LatestPoseSlot.

    Frames are resized to the field size before inference so keypoints land
    in field coordinates.
    """

    def __init__(self, framework: PoseFramework, slot: LatestPoseSlot,
                 field_size: Tuple[int, int], keep_frame: bool = False):
        self.framework = framework
        self.slot = slot
        self.field_size = field_size
        self.keep_frame = keep_frame
        self._stop_event = threading.Event()
        self._thread = None

    def resize(self, width: int, height: int):
        # Tuple assignment is atomic; the worker picks it up on its next frame
        self.field_size = (width, height)

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self):
        if self.running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name="PoseDetector", daemon=True)
        self._thread.start()
        logger.info("Pose detection started")

    def stop(self, timeout: float = 2.0) -> bool:
        """
        Ask the worker to exit and wait up to `timeout` seconds.

        Returns:
            True if no worker is left running. On False the worker is still
            finishing its current frame; it keeps its stop flag and start()
            will not launch a second one until it has exited.
        """
        if not self.running:
            return True
        self._stop_event.set()
        self._thread.join(timeout)
        if self._thread.is_alive():
            logger.warning(f"Pose detection did not stop within {timeout}s")
            return False
        self._thread = None
        logger.info("Pose detection stopped")
        return True

    def detect_once(self) -> bool:
        """
        Capture one frame, run inference and publish the result.

        Returns:
            True if a snapshot was published.
        """
        camera = self.framework.camera
        if camera is None:
            return False

        ret, frame = camera.read()
        if not ret:
            logger.warning("Failed to capture frame")
            return False

        width, height = self.field_size
        if width <= 0 or height <= 0:
            # Minimised window
            logger.debug(f"Skipping frame for empty field {width}x{height}")
            return False

        try:
            frame = cv2.resize(frame, (width, height))
            poses = self.framework.process_frame(frame)
        except Exception:
            logger.exception("Pose detection failed, keeping previous snapshot")
            return False

        display_frame = None
        if self.keep_frame:
            display_frame = cv2.cvtColor(cv2.flip(frame, 1), cv2.COLOR_BGR2RGB)

        self.slot.publish(poses, frame=display_frame)
        logger.debug(f"Published {len(poses)} poses")
        return True

    def _run(self):
        while not self._stop_event.is_set():
            if not self.detect_once():
                time.sleep(0.05)
