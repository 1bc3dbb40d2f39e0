"""Canvas geometry: bounds, wrap-around and neighbor distances."""

import numpy as np

from .errors import ConfigurationError, validate_dimensions

TOPOLOGIES = ("euclidean", "toroidal")


class Space:
    """
    The rectangle boids live in.

    Positions always wrap toroidally at the edges. Distances between boids
    are either plain Euclidean (the default) or measured on the torus, where
    a boid near the left edge is a close neighbor of one near the right edge.

    Attributes:
        width: Canvas width in pixels
        height: Canvas height in pixels
        toroidal: Whether neighbor distances take the short way around the edges
    """

    def __init__(self, width: float, height: float, toroidal: bool = False):
        validate_dimensions(width, height)
        self.width = float(width)
        self.height = float(height)
        self.toroidal = bool(toroidal)
        self._dims = np.array([self.width, self.height])

    @classmethod
    def from_topology(cls, width: float, height: float, topology: str) -> "Space":
        if topology not in TOPOLOGIES:
            raise ConfigurationError(
                f"unknown topology {topology!r}, expected one of {', '.join(TOPOLOGIES)}"
            )
        return cls(width, height, toroidal=(topology == "toroidal"))

    @property
    def topology(self) -> str:
        return "toroidal" if self.toroidal else "euclidean"

    def wrap(self, position: np.ndarray) -> np.ndarray:
        """Map a position back into [0, width) x [0, height)."""
        wrapped = np.mod(position, self._dims)
        # np.mod(-1e-17, w) rounds to exactly w
        wrapped[wrapped >= self._dims] = 0.0
        return wrapped

    def displacement(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        """
        Vector from b to a, taking the shortest way around when toroidal.

        This is the reference geometry for kernels.neighbor_sums, which
        inlines the same nearest-image rule for speed; tests hold the two
        in agreement.
        """
        d = np.asarray(a, dtype=np.float64) - np.asarray(b, dtype=np.float64)
        if self.toroidal:
            half = 0.5 * self._dims
            d = np.where(d > half, d - self._dims, d)
            d = np.where(d < -half, d + self._dims, d)
        return d

    def distance(self, a: np.ndarray, b: np.ndarray) -> float:
        """Length of displacement(a, b); a boid is a neighbor when this is below its radius."""
        return float(np.hypot(*self.displacement(a, b)))

    def contains(self, position: np.ndarray) -> bool:
        """Whether position satisfies the post-wrap bounds 0 <= x < width, 0 <= y < height."""
        return bool(np.all(position >= 0.0) and np.all(position < self._dims))

    def __repr__(self):
        return f"Space({self.width:g}x{self.height:g}, {self.topology})"
