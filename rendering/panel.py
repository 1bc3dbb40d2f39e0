"""Slider widgets drawn in the strip below the canvas."""

from dataclasses import dataclass
from typing import List, Optional

from OpenGL.GL import *

from config import boids as config
from .text import TextRenderer


@dataclass
class Slider:
    """
    A horizontal slider with a value in [minimum, maximum].

    Attributes:
        minimum, maximum: Value range
        value: Current value
        label: Name shown next to the track
        x, y: Top-left corner of the track in window pixels
        width, height: Track size in window pixels
    """
    minimum: float
    maximum: float
    value: float
    label: str = ""
    x: float = 0.0
    y: float = 0.0
    width: float = 200.0
    height: float = 12.0

    def contains(self, px: float, py: float) -> bool:
        pad = self.height
        return (self.x - pad <= px <= self.x + self.width + pad
                and self.y - pad <= py <= self.y + self.height + pad)

    def set_from_x(self, px: float):
        """Move the knob to window x coordinate px."""
        fraction = (px - self.x) / self.width
        fraction = max(0.0, min(fraction, 1.0))
        self.value = self.minimum + fraction * (self.maximum - self.minimum)

    def knob_x(self) -> float:
        span = self.maximum - self.minimum
        fraction = 0.0 if span == 0 else (self.value - self.minimum) / span
        return self.x + fraction * self.width


class SliderPanel:
    """Lays out sliders in rows under the canvas and draws them."""

    def __init__(self, top: float, width: float, height: float):
        self.top = top
        self.width = width
        self.height = height
        self.sliders: List[Slider] = []
        self.text_renderer = TextRenderer(font_size=14)

    def add(self, minimum: float, maximum: float, default: float, label: str = "") -> Slider:
        row = len(self.sliders)
        slider = Slider(
            minimum, maximum, default, label,
            x=config.SLIDERS["margin"] + 120,
            y=self.top + config.SLIDERS["margin"] + row * config.SLIDERS["row_height"],
            width=config.SLIDERS["track_width"]
        )
        self.sliders.append(slider)
        return slider

    def slider_at(self, px: float, py: float) -> Optional[Slider]:
        for slider in self.sliders:
            if slider.contains(px, py):
                return slider
        return None

    def draw(self, screen_size: tuple):
        glColor4f(*config.COLORS["panel"])
        glBegin(GL_QUADS)
        glVertex2f(0, self.top)
        glVertex2f(self.width, self.top)
        glVertex2f(self.width, self.top + self.height)
        glVertex2f(0, self.top + self.height)
        glEnd()

        for slider in self.sliders:
            self._draw_slider(slider)
            self.text_renderer.draw_text(
                f"{slider.label}: {slider.value:.2f}",
                config.SLIDERS["margin"], int(slider.y - 2), screen_size
            )

    def _draw_slider(self, slider: Slider):
        mid = slider.y + slider.height * 0.5

        glColor3f(*config.COLORS["slider_track"])
        glBegin(GL_QUADS)
        glVertex2f(slider.x, mid - 2)
        glVertex2f(slider.x + slider.width, mid - 2)
        glVertex2f(slider.x + slider.width, mid + 2)
        glVertex2f(slider.x, mid + 2)
        glEnd()

        kx = slider.knob_x()
        half = slider.height * 0.5
        glColor3f(*config.COLORS["slider_knob"])
        glBegin(GL_QUADS)
        glVertex2f(kx - half * 0.6, mid - half)
        glVertex2f(kx + half * 0.6, mid - half)
        glVertex2f(kx + half * 0.6, mid + half)
        glVertex2f(kx - half * 0.6, mid + half)
        glEnd()
