"""Flock management: a fixed, ordered population of boids."""

from collections import abc
from typing import Callable, Iterator, List, Sequence

import numpy as np

from .boid import Boid
from .controls import Weights
from .errors import ConfigurationError
from .space import Space
from .vector import limit


class Flock(abc.Sequence):
    """
    An insertion-ordered population of boids.

    Boids are created once and never added or removed. Iteration order is
    stable, so a frame always visits boids in the same sequence.
    """

    def __init__(self, boids: Sequence[Boid]):
        if len(boids) == 0:
            raise ConfigurationError("a flock needs at least one boid")
        self._boids: List[Boid] = list(boids)

    @classmethod
    def spawn(
        cls,
        count: int,
        random_point: Callable[[], np.ndarray],
        random_vector: Callable[[], np.ndarray],
        **params
    ) -> "Flock":
        """
        Create count boids with random starting state.

        Args:
            count: Number of boids
            random_point: Returns a position inside the canvas
            random_vector: Returns a starting velocity
            **params: Forwarded to Boid (max_speed, max_force, perception_radius)
        """
        if count < 1:
            raise ConfigurationError(f"boid count must be positive, got {count}")

        boids = []
        for _ in range(count):
            boid = Boid(position=random_point(), velocity=random_vector(), **params)
            boid.velocity = limit(boid.velocity, boid.max_speed)
            boids.append(boid)
        return cls(boids)

    def __len__(self) -> int:
        return len(self._boids)

    def __getitem__(self, index):
        return self._boids[index]

    def __iter__(self) -> Iterator[Boid]:
        return iter(self._boids)

    def positions(self) -> np.ndarray:
        return np.array([boid.position for boid in self._boids])

    def velocities(self) -> np.ndarray:
        return np.array([boid.velocity for boid in self._boids])

    def step(self, weights: Weights, space: Space, surface=None):
        """
        Advance every boid by one frame, one boid at a time.

        Each boid steers, moves, wraps and is drawn before the next boid is
        considered, so later boids react to the already-moved earlier ones.
        """
        for boid in self._boids:
            boid.flock(self._boids, weights, space)
            boid.update()
            boid.edges(space)
            if surface is not None:
                boid.show(surface)
