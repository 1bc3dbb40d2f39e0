"""
2D Boids Simulation
===================

A flocking simulation: every boid steers by separation, cohesion and
alignment, weighted by the three sliders under the canvas.

Controls:
    - Drag a slider: Change that rule's weight (0 to 5)
    - ESC: Quit
"""

import argparse

from config import boids as config
from core import Application
from boids import FlockingSketch


def main():
    parser = argparse.ArgumentParser(description="2D boids flocking simulation")
    parser.add_argument("--boids", type=int, default=config.BOIDS["count"], help="Number of boids")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for the starting flock")
    parser.add_argument("--toroidal", action="store_true",
                        help="Let boids see neighbors across the canvas edges")
    args = parser.parse_args()

    topology = "toroidal" if args.toroidal else config.BOIDS["topology"]

    app = Application(seed=args.seed)
    sketch = FlockingSketch(app, count=args.boids, topology=topology)
    app.run(sketch)


if __name__ == "__main__":
    main()
