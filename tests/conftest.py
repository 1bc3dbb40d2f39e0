import numpy as np
import pytest

from boids import Space
from boids.errors import validate_dimensions
from boids.vector import random_unit


class FakeSurface:
    """Records what would have been drawn."""

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.clears = []
        self.shapes = []

    def clear(self, color):
        self.clears.append(color)
        self.shapes.clear()

    def draw_shape(self, position, heading):
        self.shapes.append((np.array(position), heading))


class FakeSlider:
    def __init__(self, minimum, maximum, value, label):
        self.minimum = minimum
        self.maximum = maximum
        self.value = value
        self.label = label


class FakeHost:
    """Headless stand-in for the pygame application."""

    def __init__(self, seed=0):
        self.rng = np.random.default_rng(seed)
        self.surfaces = []
        self.sliders = []

    def create_surface(self, width, height):
        validate_dimensions(width, height)
        surface = FakeSurface(width, height)
        self.surfaces.append(surface)
        return surface

    def create_slider(self, minimum, maximum, default, label=""):
        slider = FakeSlider(minimum, maximum, default, label)
        self.sliders.append(slider)
        return slider

    def read_slider(self, slider):
        return slider.value

    def random_point(self, width, height):
        return self.rng.uniform((0.0, 0.0), (width, height))

    def random_vector(self):
        return random_unit(self.rng) * self.rng.uniform(0.0, 4.0)


@pytest.fixture
def host():
    return FakeHost(seed=1234)


@pytest.fixture
def space():
    return Space(800, 400)


@pytest.fixture
def torus():
    return Space(800, 400, toroidal=True)


@pytest.fixture
def rng():
    return np.random.default_rng(42)
