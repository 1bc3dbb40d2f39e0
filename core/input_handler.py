"""Input handling for window events and slider dragging."""

import pygame
from pygame.locals import *

from rendering import SliderPanel


class InputHandler:
    """Handles keyboard and mouse input for the slider panel."""

    def __init__(self, panel: SliderPanel):
        self.panel = panel
        self.active_slider = None

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle a single pygame event.
        Returns False if the application should quit, True otherwise.
        """
        if event.type == QUIT:
            return False
        elif event.type == KEYDOWN:
            if event.key == K_ESCAPE:
                return False
        elif event.type == MOUSEBUTTONDOWN:
            if event.button == 1:
                self.active_slider = self.panel.slider_at(*event.pos)
                if self.active_slider is not None:
                    self.active_slider.set_from_x(event.pos[0])
        elif event.type == MOUSEBUTTONUP:
            if event.button == 1:
                self.active_slider = None
        elif event.type == MOUSEMOTION:
            if self.active_slider is not None:
                self.active_slider.set_from_x(event.pos[0])

        return True
