"""Tests for the 2D vector helpers."""

import math

import numpy as np
import pytest

from boids.vector import heading, limit, magnitude, random_unit, set_magnitude, vec


class TestLimit:

    def test_long_vector_is_shortened(self):
        v = limit(vec(30.0, 40.0), 5.0)
        assert magnitude(v) == pytest.approx(5.0)
        assert v[0] / v[1] == pytest.approx(0.75)

    def test_short_vector_is_untouched(self):
        v = vec(0.3, 0.4)
        assert np.array_equal(limit(v, 5.0), v)

    def test_bound_holds_exactly_after_rounding(self, rng):
        for v, max_mag in zip(rng.uniform(-50, 50, size=(5000, 2)), rng.uniform(0.1, 10, size=5000)):
            assert magnitude(limit(v, max_mag)) <= max_mag


class TestSetMagnitude:

    def test_rescales(self):
        v = set_magnitude(vec(0.0, -2.0), 7.0)
        assert v == pytest.approx(np.array([0.0, -7.0]))

    def test_zero_vector_stays_zero(self):
        assert np.array_equal(set_magnitude(vec(), 3.0), np.zeros(2))


def test_heading_points_along_velocity():
    assert heading(vec(0.0, 1.0)) == pytest.approx(math.pi / 2)
    assert heading(vec(-1.0, 0.0)) == pytest.approx(math.pi)


def test_random_unit_has_unit_length(rng):
    for _ in range(20):
        assert magnitude(random_unit(rng)) == pytest.approx(1.0)
