"""Steering weights and the three sliders they are read from."""

from typing import NamedTuple

from config import boids as config
from .errors import ConfigurationError


class Weights(NamedTuple):
    """A snapshot of the three rule weights, read once per frame."""
    separation: float
    cohesion: float
    alignment: float

    @classmethod
    def default(cls) -> "Weights":
        value = float(config.SLIDERS["default"])
        return cls(value, value, value)


class ControlPanel:
    """
    Owns the handles of the separation, cohesion and alignment sliders.

    The sliders themselves belong to the host; the panel only creates them
    (in that order) and reads their current values.
    """

    def __init__(self, host, minimum: float = None, maximum: float = None, default: float = None):
        self.minimum = float(config.SLIDERS["min"] if minimum is None else minimum)
        self.maximum = float(config.SLIDERS["max"] if maximum is None else maximum)
        self.default = float(config.SLIDERS["default"] if default is None else default)

        if self.minimum > self.maximum:
            raise ConfigurationError(
                f"slider range is empty: min {self.minimum} > max {self.maximum}"
            )
        if not self.minimum <= self.default <= self.maximum:
            raise ConfigurationError(
                f"slider default {self.default} outside [{self.minimum}, {self.maximum}]"
            )

        self.host = host
        self.handles = {
            name: host.create_slider(self.minimum, self.maximum, self.default, name)
            for name in Weights._fields
        }

    def read(self) -> Weights:
        return Weights(*(float(self.host.read_slider(self.handles[name])) for name in Weights._fields))
