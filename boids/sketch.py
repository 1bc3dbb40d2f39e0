"""The per-frame driver a host calls: set up once, then draw every frame."""

from dataclasses import dataclass
from enum import Enum

from config import boids as config
from .controls import ControlPanel, Weights
from .flock import Flock
from .space import Space


class Phase(Enum):
    UNINITIALIZED = "uninitialized"
    RUNNING = "running"


@dataclass
class SimulationState:
    """Everything one frame reads and writes."""
    flock: Flock
    space: Space
    weights: Weights
    frame: int = 0


class FlockingSketch:
    """
    Host driver for the flocking simulation.

    The host calls on_setup() exactly once, then on_frame() once per display
    refresh. The host provides create_surface, create_slider, read_slider,
    random_point and random_vector.
    """

    def __init__(
        self,
        host,
        count: int = None,
        width: float = None,
        height: float = None,
        topology: str = None,
        **boid_params
    ):
        self.host = host
        self.count = config.BOIDS["count"] if count is None else count
        self.width = config.WINDOW["width"] if width is None else width
        self.height = config.WINDOW["height"] if height is None else height
        self.topology = config.BOIDS["topology"] if topology is None else topology
        self.boid_params = boid_params

        self.phase = Phase.UNINITIALIZED
        self.surface = None
        self.controls = None
        self.state = None

    def on_setup(self):
        """Create the canvas, the sliders and the flock."""
        if self.phase is not Phase.UNINITIALIZED:
            raise RuntimeError("on_setup() has already run")

        space = Space.from_topology(self.width, self.height, self.topology)
        self.surface = self.host.create_surface(self.width, self.height)
        self.surface.clear(config.COLORS["background"])

        self.controls = ControlPanel(self.host)
        flock = Flock.spawn(
            self.count,
            lambda: self.host.random_point(space.width, space.height),
            self.host.random_vector,
            **self.boid_params
        )
        self.state = SimulationState(flock=flock, space=space, weights=self.controls.read())
        self.phase = Phase.RUNNING

        print(f"[Boids] Initialized {len(flock)} boids on {space}")

    def on_frame(self):
        """Clear the canvas and advance every boid by one frame."""
        if self.phase is not Phase.RUNNING:
            raise RuntimeError("on_frame() called before on_setup()")

        state = self.state
        state.weights = self.controls.read()
        self.surface.clear(config.COLORS["background"])
        state.flock.step(state.weights, state.space, self.surface)
        state.frame += 1
