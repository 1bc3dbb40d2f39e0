"""Text rendering for slider labels and the HUD."""

from collections import OrderedDict

import pygame
from OpenGL.GL import *

from config import boids as config


class TextRenderer:
    """
    Draws strings as pixel blocks straight into the framebuffer.

    Slider labels and the FPS counter repeat the same few strings frame
    after frame, so each distinct string is rasterized once and kept in a
    small least-recently-used cache.
    """

    def __init__(self, font_name: str = "monospace", font_size: int = 18, cache_size: int = 256):
        pygame.font.init()
        self.font = pygame.font.SysFont(font_name, font_size)
        self.color = tuple(int(c * 255) for c in config.COLORS["text"])
        self.cache_size = cache_size
        self._cache = OrderedDict()

    def rasterize(self, text: str) -> tuple:
        """Return (rgba_bytes, width, height) for text, bottom row first."""
        entry = self._cache.get(text)
        if entry is not None:
            self._cache.move_to_end(text)
            return entry

        surface = self.font.render(text, True, self.color)
        width, height = surface.get_size()
        entry = (pygame.image.tostring(surface, "RGBA", True), width, height)

        self._cache[text] = entry
        if len(self._cache) > self.cache_size:
            self._cache.popitem(last=False)
        return entry

    def draw_text(self, text: str, x: int, y: int, screen_size: tuple):
        """
        Draw text with its top-left corner at window pixel (x, y).

        glWindowPos takes window coordinates with a bottom-left origin and
        ignores the current projection.
        """
        data, width, height = self.rasterize(text)

        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glWindowPos2i(int(x), int(screen_size[1] - y - height))
        glDrawPixels(width, height, GL_RGBA, GL_UNSIGNED_BYTE, data)
        glDisable(GL_BLEND)
