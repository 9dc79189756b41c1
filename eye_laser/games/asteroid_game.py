"""
Eye laser asteroid game: aim with your face, burn asteroids with your eyes.
"""
import logging

import pygame

from eye_laser.common.game_base import GameBase
from eye_laser.games.asteroids.game_logic import AsteroidGameLogic
from eye_laser.ui.asteroids.renderer import PAUSED, PLAYING, AsteroidGameRenderer

logger = logging.getLogger("AsteroidGame")


class AsteroidGame(GameBase):
    """Asteroid dodge game controlled by head orientation."""

    def __init__(
        self,
        camera_id: int = 0,
        model_path: str = "yolo11n-pose.pt",
        screen_width: int = 1280,
        screen_height: int = 720,
        confidence_threshold: float = 0.5,
        device: str = None,
        scoring: bool = True,
        show_camera: bool = False,
        rng=None
    ):
        """
        Initialize the game.

        Args:
            camera_id: Camera device ID
            model_path: YOLO11-Pose model path
            screen_width: Game window width
            screen_height: Game window height
            confidence_threshold: Person detection confidence threshold
            device: Inference device, None for automatic
            scoring: Score destroyed asteroids and keep a high score
            show_camera: Start with the mirrored camera as background
            rng: Random source for asteroid spawning
        """
        # Always keep frames so the camera background can be toggled at runtime
        super().__init__(
            camera_id=camera_id,
            model_path=model_path,
            screen_width=screen_width,
            screen_height=screen_height,
            confidence_threshold=confidence_threshold,
            device=device,
            keep_camera_frame=True
        )

        pygame.display.set_caption("Eye Laser: Asteroid Dodge")

        self.game_state = PLAYING
        self.game_logic = AsteroidGameLogic(scoring=scoring, rng=rng)
        self.last_result = None

        self.ui_renderer = AsteroidGameRenderer(
            screen_width=screen_width,
            screen_height=screen_height
        )
        self.ui_renderer.show_camera = show_camera

        logger.info(f"Game initialized, scoring: {scoring}, field: {screen_width}x{screen_height}")

    def on_resize(self, width, height):
        super().on_resize(width, height)
        self.ui_renderer.resize(width, height)

    def process_input(self, events):
        """
        Handle input events.

        Args:
            events: List of pygame events

        Returns:
            bool: True if the game should quit, otherwise False
        """
        for event in events:
            if event.type == pygame.QUIT:
                return True

            if event.type != pygame.KEYDOWN:
                continue

            if event.key == pygame.K_ESCAPE:
                return True
            elif event.key == pygame.K_p:
                self.toggle_pause()
            elif event.key == pygame.K_r:
                self.game_logic.reset()
                self.last_result = None
                logger.info("Round reset by player")
            elif event.key == pygame.K_c:
                self.ui_renderer.toggle_camera()
            elif event.key == pygame.K_f:
                self.ui_renderer.toggle_fps()

        return False

    def toggle_pause(self):
        if self.game_state == PLAYING:
            self.game_state = PAUSED
            self.paused = True
            logger.info("State transition: PLAYING -> PAUSED")
        else:
            self.game_state = PLAYING
            self.paused = False
            logger.info("State transition: PAUSED -> PLAYING")

    def update(self, snapshot):
        """
        Step the game logic with the latest poses and the current window size.

        Args:
            snapshot: Latest PoseSnapshot, possibly empty
        """
        width, height = self.screen.get_size()
        poses = snapshot.poses if snapshot is not None else ()
        self.last_result = self.game_logic.step(poses, width, height)

    def render(self, screen, snapshot):
        game_state = self.game_logic.get_game_state()
        camera_frame = snapshot.frame if snapshot is not None else None

        self.ui_renderer.render_game(
            screen,
            game_state,
            frame_result=self.last_result,
            camera_frame=camera_frame,
            fps=self.current_fps
        )

        if self.game_state == PAUSED:
            self.ui_renderer.render_pause_screen(screen)
