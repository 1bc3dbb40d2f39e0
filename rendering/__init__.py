"""Rendering components for the 2D boids simulation."""

from .canvas import Canvas
from .panel import Slider, SliderPanel
from .text import TextRenderer

__all__ = ["Canvas", "Slider", "SliderPanel", "TextRenderer"]
