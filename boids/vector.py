"""Small helpers for 2D numpy vectors."""

import math
import numpy as np


def vec(x: float = 0.0, y: float = 0.0) -> np.ndarray:
    return np.array([x, y], dtype=np.float64)


def magnitude(v: np.ndarray) -> float:
    return math.hypot(v[0], v[1])


def limit(v: np.ndarray, max_mag: float) -> np.ndarray:
    """Scale v down to max_mag if it is longer; shorter vectors are returned as-is."""
    mag = magnitude(v)
    if mag <= max_mag:
        return v
    v = v * (max_mag / mag)
    # The rescale can round one ulp long; shrink until the bound holds exactly
    while magnitude(v) > max_mag:
        v = v * np.nextafter(1.0, 0.0)
    return v


def set_magnitude(v: np.ndarray, mag: float) -> np.ndarray:
    """Rescale v to length mag. The zero vector has no direction and stays zero."""
    current = magnitude(v)
    if current == 0.0:
        return np.zeros(2)
    return v * (mag / current)


def heading(v: np.ndarray) -> float:
    """Angle of v in radians, measured from the +x axis."""
    return math.atan2(v[1], v[0])


def random_unit(rng: np.random.Generator) -> np.ndarray:
    angle = rng.uniform(0.0, 2 * math.pi)
    return vec(math.cos(angle), math.sin(angle))
