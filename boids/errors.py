"""Configuration errors raised while building a simulation."""

import math


class ConfigurationError(ValueError):
    """Raised when the simulation is set up with impossible parameters."""


def validate_dimensions(width: float, height: float):
    """Refuse canvas dimensions that are not positive finite numbers."""
    for name, value in (("width", width), ("height", height)):
        try:
            ok = math.isfinite(value) and value > 0
        except TypeError:
            ok = False
        if not ok:
            raise ConfigurationError(f"canvas {name} must be positive, got {value!r}")
