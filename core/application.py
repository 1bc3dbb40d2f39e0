"""Main application class: the window, the frame loop and the host services."""

import numpy as np
import pygame
from pygame.locals import *
from OpenGL.GL import *

from config import boids as config
from boids.errors import validate_dimensions
from boids.vector import random_unit
from rendering import Canvas, Slider, SliderPanel, TextRenderer
from .input_handler import InputHandler


class Application:
    """
    pygame/OpenGL host for a sketch driver.

    Provides the drawing surface, sliders and random generators a driver
    uses, and calls driver.on_setup() once followed by driver.on_frame()
    every frame until the window is closed.
    """

    def __init__(self, seed: int = None, width: int = None, height: int = None):
        self.width = config.WINDOW["width"] if width is None else width
        self.height = config.WINDOW["height"] if height is None else height
        validate_dimensions(self.width, self.height)
        self.panel_height = config.WINDOW["panel_height"]
        self.screen_size = (self.width, self.height + self.panel_height)

        self.rng = np.random.default_rng(seed)

        pygame.init()
        pygame.display.set_mode(self.screen_size, DOUBLEBUF | OPENGL)
        pygame.display.set_caption(config.WINDOW["title"])

        # UI components
        self.panel = SliderPanel(top=self.height, width=self.width, height=self.panel_height)
        self.input_handler = InputHandler(self.panel)
        self.text_renderer = TextRenderer(font_size=14)

        # State
        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = 0
        self.surface = None

        self._setup_gl()
        print(f"[App] Window {self.screen_size[0]}x{self.screen_size[1]} ready")

    def _setup_gl(self):
        """Orthographic projection in window pixels, origin at the top-left."""
        glClearColor(*config.COLORS["background"])
        glDisable(GL_DEPTH_TEST)

        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(0, self.screen_size[0], self.screen_size[1], 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()

    # ------------------------------------------------------------------
    # Host services used by the sketch
    # ------------------------------------------------------------------

    def create_surface(self, width: float, height: float) -> Canvas:
        self.surface = Canvas(width, height)
        return self.surface

    def create_slider(self, minimum: float, maximum: float, default: float, label: str = "") -> Slider:
        return self.panel.add(minimum, maximum, default, label)

    def read_slider(self, slider: Slider) -> float:
        return slider.value

    def random_point(self, width: float, height: float) -> np.ndarray:
        return self.rng.uniform((0.0, 0.0), (width, height))

    def random_vector(self) -> np.ndarray:
        """Random direction with a speed up to the configured initial speed."""
        speed = self.rng.uniform(0.0, config.BOIDS["initial_speed"])
        return random_unit(self.rng) * speed

    # ------------------------------------------------------------------
    # Frame loop
    # ------------------------------------------------------------------

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if not self.input_handler.handle_event(event):
                self.running = False

    def _render_overlay(self):
        self.panel.draw(self.screen_size)
        self.text_renderer.draw_text(f"FPS: {self.fps:.0f}", 10, 10, self.screen_size)

    def run(self, driver):
        """Main application loop."""
        try:
            driver.on_setup()
            while self.running:
                self.clock.tick(config.WINDOW["fps"])
                self.fps = self.clock.get_fps()

                self._handle_events()
                if not self.running:
                    break

                glClear(GL_COLOR_BUFFER_BIT)
                driver.on_frame()
                self._render_overlay()

                pygame.display.flip()
        finally:
            pygame.quit()
            print("[App] Closed")
