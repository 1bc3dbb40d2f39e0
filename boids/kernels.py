"""Numba JIT-compiled neighbor scan used by every boid, every frame."""

import numpy as np
from numba import njit


@njit(cache=True)
def neighbor_sums(
    px: float,
    py: float,
    positions: np.ndarray,
    velocities: np.ndarray,
    radius: float,
    width: float,
    height: float,
    toroidal: bool
):
    """
    Accumulate what one boid sees of the others in a single pass.

    Args:
        px, py: Position of the boid doing the looking
        positions: (n, 2) positions of every other boid
        velocities: (n, 2) velocities of every other boid
        radius: Perception radius; neighbors are strictly closer than this
        width, height: Canvas size, used only when toroidal
        toroidal: Measure displacements the short way around the edges

    Returns:
        (sep_x, sep_y, sep_count, pos_x, pos_y, vel_x, vel_y, count) where
        sep is the sum of away-vectors scaled by 1/distance, pos the sum of
        neighbor positions (nearest image on a torus) and vel the sum of
        neighbor velocities.
    """
    radius_sq = radius * radius
    half_w = 0.5 * width
    half_h = 0.5 * height

    sep_x, sep_y = 0.0, 0.0
    pos_x, pos_y = 0.0, 0.0
    vel_x, vel_y = 0.0, 0.0
    sep_count = 0
    count = 0

    for j in range(positions.shape[0]):
        dx = px - positions[j, 0]
        dy = py - positions[j, 1]

        if toroidal:
            if dx > half_w:
                dx -= width
            elif dx < -half_w:
                dx += width
            if dy > half_h:
                dy -= height
            elif dy < -half_h:
                dy += height

        dist_sq = dx * dx + dy * dy
        if dist_sq >= radius_sq:
            continue

        count += 1
        pos_x += px - dx
        pos_y += py - dy
        vel_x += velocities[j, 0]
        vel_y += velocities[j, 1]

        # Coincident boids have no "away" direction
        if dist_sq > 0.0:
            sep_x += dx / dist_sq
            sep_y += dy / dist_sq
            sep_count += 1

    return sep_x, sep_y, sep_count, pos_x, pos_y, vel_x, vel_y, count
