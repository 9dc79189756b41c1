"""
Game base module, defines the common interface for all camera games.
"""
import logging
import time

import pygame

from eye_laser.config.asteroid_config import TARGET_FPS
from eye_laser.core.pose_framework import PoseDetector, PoseFramework
from eye_laser.core.pose_slot import LatestPoseSlot

logger = logging.getLogger(__name__)


class GameBase:
    """Base class for all game implementations, defining the shared loop."""

    def __init__(
        self,
        camera_id: int = 0,
        model_path: str = "yolo11n-pose.pt",
        screen_width: int = 1280,
        screen_height: int = 720,
        confidence_threshold: float = 0.5,
        device: str = None,
        keep_camera_frame: bool = False
    ):
        """
        Initialize the game base.

        Args:
            camera_id: Camera device ID
            model_path: YOLO11-Pose model path
            screen_width: Initial game window width
            screen_height: Initial game window height
            confidence_threshold: Person detection confidence threshold
            device: Inference device, None for automatic
            keep_camera_frame: Publish the mirrored camera image with each snapshot
        """
        pygame.init()

        self.screen_width = screen_width
        self.screen_height = screen_height
        self.screen = pygame.display.set_mode((self.screen_width, self.screen_height),
                                              pygame.RESIZABLE)

        self.clock = pygame.time.Clock()

        self.running = True
        self.paused = False
        self.game_start_time = time.time()

        # Pose detection runs on its own thread and hands poses over through the slot
        self.framework = PoseFramework(
            model_path=model_path,
            device=device,
            confidence_threshold=confidence_threshold
        )
        self.framework.setup_camera(camera_id=camera_id, width=screen_width, height=screen_height)
        self.pose_slot = LatestPoseSlot()
        self.detector = PoseDetector(
            self.framework,
            self.pose_slot,
            field_size=(screen_width, screen_height),
            keep_frame=keep_camera_frame
        )

        # Performance tracking
        self.fps_history = []
        self.last_fps_update = time.time()
        self.frame_count = 0
        self.current_fps = 0

    def process_input(self, events):
        """
        Handle input events.
        Subclasses must implement this method.

        Args:
            events: List of pygame events

        Returns:
            bool: True if the game should quit, otherwise False
        """
        raise NotImplementedError

    def update(self, snapshot):
        """
        Advance the game state by one frame.
        Subclasses must implement this method.

        Args:
            snapshot: Latest PoseSnapshot from the detector
        """
        raise NotImplementedError

    def render(self, screen, snapshot):
        """
        Render the game.
        Subclasses must implement this method.

        Args:
            screen: pygame screen object
            snapshot: Latest PoseSnapshot, for the optional camera background
        """
        raise NotImplementedError

    def on_resize(self, width, height):
        """Track the new field size and let the detector capture at it."""
        self.screen_width = width
        self.screen_height = height
        self.detector.resize(width, height)
        logger.info(f"Field resized to {width}x{height}")

    def handle_window_events(self, events):
        for event in events:
            if event.type == pygame.VIDEORESIZE:
                self.on_resize(event.w, event.h)

    def update_fps(self):
        """Update and compute the current FPS."""
        self.frame_count += 1
        now = time.time()
        if now - self.last_fps_update >= 1.0:
            self.current_fps = self.frame_count / (now - self.last_fps_update)
            self.fps_history.append(self.current_fps)
            if len(self.fps_history) > 60:  # keep the last 60 seconds
                self.fps_history.pop(0)
            self.frame_count = 0
            self.last_fps_update = now

    def run(self):
        """
        Run the main game loop until the window is closed.
        """
        self.detector.start()
        try:
            while self.running:
                events = pygame.event.get()
                self.handle_window_events(events)
                if self.process_input(events):
                    self.running = False
                    break

                # Never wait for the detector; reuse the last snapshot
                snapshot = self.pose_slot.latest()

                if not self.paused:
                    self.update(snapshot)

                self.render(self.screen, snapshot)
                pygame.display.flip()

                self.update_fps()
                self.clock.tick(TARGET_FPS)
        except Exception:
            logger.exception("Error in game loop")
            raise
        finally:
            if self.detector.stop():
                self.framework.release()
            else:
                logger.warning("Leaving camera open, detector thread still busy")
            pygame.quit()

    def quit(self):
        """Quit the game."""
        self.running = False
