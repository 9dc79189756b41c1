"""
Asteroid game UI rendering module, responsible for drawing the game interface.
"""
import numpy as np
import pygame

from eye_laser.config.asteroid_config import (BACKGROUND_COLOR, BEAM_STYLE, HEAD_STYLE,
                                              HIT_FLASH_COLOR)
from eye_laser.config.game_settings import COLORS

# Game state constants
PLAYING = "playing"
PAUSED = "paused"


class AsteroidGameRenderer:
    """Asteroid game UI renderer, handles drawing of all UI elements."""

    def __init__(self, screen_width, screen_height):
        """
        Initialize the UI renderer.

        Args:
            screen_width: Game window width
            screen_height: Game window height
        """
        self.screen_width = screen_width
        self.screen_height = screen_height

        self.font_large = pygame.font.Font(None, 48)
        self.font_medium = pygame.font.Font(None, 36)
        self.font_small = pygame.font.Font(None, 24)

        self.show_camera = False
        self.show_fps = False

    def resize(self, screen_width, screen_height):
        self.screen_width = screen_width
        self.screen_height = screen_height

    def toggle_camera(self):
        self.show_camera = not self.show_camera

    def toggle_fps(self):
        self.show_fps = not self.show_fps

    def render_game(self, screen, game_state, frame_result=None, camera_frame=None, fps=None):
        """
        Render one frame of the game.

        Args:
            screen: Pygame screen object
            game_state: Dict from AsteroidGameLogic.get_game_state()
            frame_result: FrameResult of the latest step, if any
            camera_frame: Mirrored RGB camera image, drawn when camera display is on
            fps: Current frames per second
        """
        if self.show_camera and camera_frame is not None:
            self.render_camera(screen, camera_frame)
        else:
            screen.fill(BACKGROUND_COLOR)

        for asteroid in game_state['asteroids']:
            asteroid.draw(screen)

        if frame_result is not None:
            for head in frame_result.heads:
                self.render_head(screen, head)
            for beam in frame_result.beams:
                self.render_beam(screen, beam)
            if frame_result.head_hit:
                self.render_hit_flash(screen)

        if game_state['scoring']:
            self.render_score(screen, game_state['score'], game_state['high_score'])

        if self.show_fps and fps is not None:
            self.render_fps(screen, fps)

    def render_camera(self, screen, camera_frame):
        # pygame surfaces are indexed (x, y), numpy images (y, x)
        surface = pygame.surfarray.make_surface(np.swapaxes(camera_frame, 0, 1))
        if surface.get_size() != (self.screen_width, self.screen_height):
            surface = pygame.transform.scale(surface, (self.screen_width, self.screen_height))
        screen.blit(surface, (0, 0))

    def render_head(self, screen, head):
        size = max(1, int(head.diameter))
        rect = pygame.Rect(0, 0, size, size)
        rect.center = (int(head.center[0]), int(head.center[1]))

        overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
        pygame.draw.ellipse(overlay, HEAD_STYLE["fill_color"], overlay.get_rect())
        screen.blit(overlay, rect.topleft)
        pygame.draw.ellipse(screen, HEAD_STYLE["outline_color"], rect, HEAD_STYLE["outline_width"])

    def render_beam(self, screen, beam):
        start = (int(beam.start[0]), int(beam.start[1]))
        end = (int(beam.end[0]), int(beam.end[1]))

        pygame.draw.line(screen, BEAM_STYLE["core_color"], start, end, BEAM_STYLE["core_width"])

        # Glow is drawn on top, as a translucent wider stroke
        glow = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        pygame.draw.line(glow, BEAM_STYLE["glow_color"], start, end, BEAM_STYLE["glow_width"])
        screen.blit(glow, (0, 0))

    def render_hit_flash(self, screen):
        flash = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        flash.fill(HIT_FLASH_COLOR)
        screen.blit(flash, (0, 0))

    def render_score(self, screen, score, high_score):
        score_text = self.font_medium.render(f"Score: {int(score)}", True, COLORS["white"])
        screen.blit(score_text, (20, 20))

        high_text = self.font_medium.render(f"High Score: {int(high_score)}", True, COLORS["gold"])
        screen.blit(high_text, (20, 60))

    def render_fps(self, screen, fps):
        fps_text = self.font_small.render(f"FPS: {fps:.1f}", True, COLORS["green"])
        screen.blit(fps_text, (self.screen_width - fps_text.get_width() - 20, 20))

    def render_pause_screen(self, screen):
        overlay = pygame.Surface((self.screen_width, self.screen_height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 150))
        screen.blit(overlay, (0, 0))

        pause_text = self.font_large.render("PAUSED", True, COLORS["white"])
        pause_rect = pause_text.get_rect(center=(self.screen_width // 2, self.screen_height // 2 - 30))
        screen.blit(pause_text, pause_rect)

        hint = self.font_small.render("Press P to resume, ESC to quit", True, COLORS["white"])
        hint_rect = hint.get_rect(center=(self.screen_width // 2, self.screen_height // 2 + 20))
        screen.blit(hint, hint_rect)
