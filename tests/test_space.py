"""Tests for canvas geometry: validation, wrap-around and distances."""

import numpy as np
import pytest

from boids import ConfigurationError, Space
from boids.errors import validate_dimensions


class TestValidation:

    @pytest.mark.parametrize("width, height", [(0, 400), (800, -1), (float("nan"), 400), (800, float("inf"))])
    def test_rejects_bad_dimensions(self, width, height):
        with pytest.raises(ConfigurationError):
            Space(width, height)

    def test_rejects_non_numbers(self):
        with pytest.raises(ConfigurationError):
            validate_dimensions("800", 400)

    def test_unknown_topology(self):
        with pytest.raises(ConfigurationError):
            Space.from_topology(800, 400, "klein")

    def test_topology_names(self):
        assert Space.from_topology(800, 400, "toroidal").toroidal
        assert not Space.from_topology(800, 400, "euclidean").toroidal


class TestWrap:

    def test_past_right_edge_reappears_left(self, space):
        assert space.wrap(np.array([803.5, 200.0])) == pytest.approx(np.array([3.5, 200.0]))

    def test_negative_coordinates_wrap_to_far_edge(self, space):
        assert space.wrap(np.array([-2.0, -1.0])) == pytest.approx(np.array([798.0, 399.0]))

    def test_exact_edge_maps_to_zero(self, space):
        assert np.array_equal(space.wrap(np.array([800.0, 400.0])), np.zeros(2))

    def test_tiny_negative_stays_in_bounds(self, space):
        wrapped = space.wrap(np.array([-1e-17, -1e-17]))
        assert space.contains(wrapped)

    def test_inside_is_unchanged(self, space):
        p = np.array([123.25, 45.5])
        assert np.array_equal(space.wrap(p), p)

    def test_random_positions_always_land_inside(self, space, rng):
        for p in rng.uniform(-5000, 5000, size=(500, 2)):
            assert space.contains(space.wrap(p))


class TestDisplacement:

    def test_euclidean_ignores_edges(self, space):
        d = space.displacement(np.array([790.0, 10.0]), np.array([10.0, 10.0]))
        assert d == pytest.approx(np.array([780.0, 0.0]))

    def test_toroidal_takes_short_way(self, torus):
        d = torus.displacement(np.array([790.0, 10.0]), np.array([10.0, 390.0]))
        assert d == pytest.approx(np.array([-20.0, 20.0]))
        assert torus.distance(np.array([790.0, 10.0]), np.array([10.0, 390.0])) == pytest.approx(np.hypot(20, 20))

    def test_toroidal_never_exceeds_half_dimension(self, torus, rng):
        for a, b in zip(rng.uniform((0, 0), (800, 400), size=(200, 2)), rng.uniform((0, 0), (800, 400), size=(200, 2))):
            d = torus.displacement(a, b)
            assert abs(d[0]) <= 400.0
            assert abs(d[1]) <= 200.0

    def test_displacement_is_antisymmetric(self, torus):
        a, b = np.array([5.0, 5.0]), np.array([700.0, 100.0])
        assert torus.displacement(a, b) == pytest.approx(-torus.displacement(b, a))
