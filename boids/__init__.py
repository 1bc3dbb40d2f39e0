"""2D boids: agents, flock and the per-frame driver."""

from .errors import ConfigurationError
from .space import Space
from .controls import ControlPanel, Weights
from .boid import Boid, Forces
from .flock import Flock
from .sketch import FlockingSketch, Phase, SimulationState

__all__ = [
    "Boid",
    "ConfigurationError",
    "ControlPanel",
    "Flock",
    "FlockingSketch",
    "Forces",
    "Phase",
    "SimulationState",
    "Space",
    "Weights",
]
