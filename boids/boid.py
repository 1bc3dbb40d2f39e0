"""Individual boid entity with position, velocity, and behaviors."""

import numpy as np
from dataclasses import dataclass, field
from typing import NamedTuple, Sequence

from config import boids as config
from .controls import Weights
from .kernels import neighbor_sums
from .space import Space
from .vector import heading, limit, set_magnitude


class Forces(NamedTuple):
    """Unweighted steering vectors of the three flocking rules."""
    separation: np.ndarray
    cohesion: np.ndarray
    alignment: np.ndarray


@dataclass(eq=False)
class Boid:
    """
    A single boid (bird-oid object) in the simulation.

    Boids compare by identity: two agents that happen to share a position
    are still two agents.

    Attributes:
        position: 2D position vector in canvas coordinates
        velocity: 2D velocity vector, never longer than max_speed after update
        acceleration: 2D acceleration vector (reset each frame)
        max_speed: Maximum velocity magnitude
        max_force: Maximum steering force magnitude per rule
        perception_radius: Other boids strictly closer than this are neighbors
    """
    position: np.ndarray = field(default_factory=lambda: np.zeros(2))
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(2))
    acceleration: np.ndarray = field(default_factory=lambda: np.zeros(2))
    max_speed: float = config.BOIDS["max_speed"]
    max_force: float = config.BOIDS["max_force"]
    perception_radius: float = config.BOIDS["perception_radius"]

    def __post_init__(self):
        self.position = np.array(self.position, dtype=np.float64)
        self.velocity = np.array(self.velocity, dtype=np.float64)
        self.acceleration = np.array(self.acceleration, dtype=np.float64)

    @property
    def heading(self) -> float:
        return heading(self.velocity)

    def steer(self, desired: np.ndarray) -> np.ndarray:
        """Steering force that turns the current velocity toward desired at full speed."""
        desired = set_magnitude(desired, self.max_speed)
        return limit(desired - self.velocity, self.max_force)

    def forces(self, boids: Sequence["Boid"], space: Space) -> Forces:
        """
        Compute separation, cohesion and alignment against every other boid.

        A rule with no neighbors inside the perception radius contributes
        the zero vector.
        """
        zero = Forces(np.zeros(2), np.zeros(2), np.zeros(2))
        others = [other for other in boids if other is not self]
        if not others:
            return zero

        positions = np.array([other.position for other in others], dtype=np.float64)
        velocities = np.array([other.velocity for other in others], dtype=np.float64)
        sep_x, sep_y, sep_count, pos_x, pos_y, vel_x, vel_y, count = neighbor_sums(
            float(self.position[0]), float(self.position[1]),
            positions, velocities,
            float(self.perception_radius),
            space.width, space.height, space.toroidal
        )
        if count == 0:
            return zero

        separation = np.zeros(2)
        if sep_count > 0:
            separation = self.steer(np.array([sep_x, sep_y]) / sep_count)

        center = np.array([pos_x, pos_y]) / count
        cohesion = self.steer(center - self.position)

        alignment = self.steer(np.array([vel_x, vel_y]) / count)

        return Forces(separation, cohesion, alignment)

    def flock(self, boids: Sequence["Boid"], weights: Weights, space: Space):
        """Add the weighted flocking rules to this frame's acceleration."""
        separation, cohesion, alignment = self.forces(boids, space)
        self.acceleration += separation * weights.separation
        self.acceleration += cohesion * weights.cohesion
        self.acceleration += alignment * weights.alignment

    def update(self):
        """Integrate acceleration into velocity and velocity into position."""
        self.velocity = limit(self.velocity + self.acceleration, self.max_speed)
        self.position = self.position + self.velocity

        # Reset acceleration for next frame
        self.acceleration = np.zeros(2)

    def edges(self, space: Space):
        """Wrap around the canvas edges; velocity is left alone."""
        self.position = space.wrap(self.position)

    def show(self, surface):
        surface.draw_shape(self.position, self.heading)
