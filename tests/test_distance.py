"""Tests for distance primitives and nearest-mean queries."""

import numpy as np
import pytest

from lloydpp.clustering.distance import (
    as_points,
    distance,
    distance_squared,
    closest_distance,
    closest_mean,
    calculate_clusters,
)


class TestDistance:
    """Point-to-point distances."""

    def test_squared_known_value(self):
        assert distance_squared([0.0, 0.0], [3.0, 4.0]) == pytest.approx(25.0)

    def test_distance_known_value(self):
        assert distance([0.0, 0.0], [3.0, 4.0]) == pytest.approx(5.0)

    def test_large_integer_coordinates_do_not_overflow(self):
        """Integer points are squared in floating point."""
        assert distance_squared([0, 0], [4_000_000_000, 0]) == pytest.approx(1.6e19)
        assert distance([0, 0], [4_000_000_000, 0]) == pytest.approx(4e9)

    def test_zero_for_identical_points(self):
        p = np.array([1.5, -2.0, 7.0])
        assert distance_squared(p, p) == 0.0
        assert distance(p, p) == 0.0


class TestClosest:
    """Nearest-mean queries."""

    def test_closest_distance_per_point(self):
        means = np.array([[0.0, 0.0], [10.0, 0.0]])
        data = np.array([[1.0, 0.0], [9.0, 0.0], [5.0, 0.0]])
        np.testing.assert_allclose(
            closest_distance(means, data), [1.0, 1.0, 25.0]
        )

    def test_closest_mean(self):
        means = np.array([[0.0, 0.0], [10.0, 10.0], [-5.0, 0.0]])
        assert closest_mean([9.0, 8.0], means) == 1
        assert closest_mean([-4.0, 1.0], means) == 2

    def test_closest_mean_tie_goes_to_lowest_index(self):
        means = np.array([[1.0, 0.0], [-1.0, 0.0], [1.0, 0.0]])
        assert closest_mean([0.0, 0.0], means) == 0

    def test_calculate_clusters_tie_goes_to_lowest_index(self):
        means = np.array([[1.0, 0.0], [-1.0, 0.0], [0.0, 5.0]])
        data = np.array([[0.0, 0.0], [0.0, -3.0]])
        np.testing.assert_array_equal(calculate_clusters(data, means), [0, 0])

    def test_closest_mean_requires_means(self):
        with pytest.raises(ValueError):
            closest_mean([0.0, 0.0], np.empty((0, 2)))

    def test_calculate_clusters_matches_closest_mean(self):
        rng = np.random.default_rng(0)
        data = rng.normal(size=(40, 3))
        means = rng.normal(size=(4, 3))
        labels = calculate_clusters(data, means)
        assert len(labels) == len(data)
        expected = [closest_mean(p, means) for p in data]
        np.testing.assert_array_equal(labels, expected)

    def test_dimension_mismatch(self):
        with pytest.raises(ValueError):
            calculate_clusters(np.zeros((3, 2)), np.zeros((2, 3)))


class TestAsPoints:
    """Input coercion."""

    def test_integer_input_promoted(self):
        arr = as_points([[1, 2], [3, 4]])
        assert arr.dtype == np.float64

    def test_float32_kept(self):
        arr = as_points(np.zeros((2, 2), dtype=np.float32))
        assert arr.dtype == np.float32

    def test_rejects_1d(self):
        with pytest.raises(ValueError):
            as_points([1.0, 2.0, 3.0])
