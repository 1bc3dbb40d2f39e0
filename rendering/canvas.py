"""The drawing surface boids are rendered onto."""

import math

from OpenGL.GL import *

from boids.errors import validate_dimensions
from config import boids as config


class Canvas:
    """
    A width x height rectangle at the top-left of the window.

    Assumes the current projection maps window pixels with the origin at
    the top-left corner and y growing downward.
    """

    def __init__(self, width: float, height: float, size: float = None, color=None):
        validate_dimensions(width, height)
        self.width = width
        self.height = height
        self.size = config.BOIDS["size"] if size is None else size
        self.color = config.COLORS["boid"] if color is None else color

    def clear(self, color):
        """Fill the whole canvas with a solid color."""
        glColor4f(*color)
        glBegin(GL_QUADS)
        glVertex2f(0, 0)
        glVertex2f(self.width, 0)
        glVertex2f(self.width, self.height)
        glVertex2f(0, self.height)
        glEnd()

    def draw_shape(self, position, heading: float):
        """Draw a boid as a triangle at position, pointing along heading."""
        x, y = float(position[0]), float(position[1])
        length = self.size
        half_width = self.size * 0.35

        fx, fy = math.cos(heading), math.sin(heading)
        # Perpendicular to the heading
        rx, ry = -fy, fx

        glColor3f(*self.color)
        glBegin(GL_TRIANGLES)
        glVertex2f(x + fx * length * 0.5, y + fy * length * 0.5)
        glVertex2f(x - fx * length * 0.5 + rx * half_width, y - fy * length * 0.5 + ry * half_width)
        glVertex2f(x - fx * length * 0.5 - rx * half_width, y - fy * length * 0.5 - ry * half_width)
        glEnd()
