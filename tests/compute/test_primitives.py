"""Unit tests for numerical primitives.

Tests for:
- drop_missing: missing-value removal
- integrate_xy: trapezoid quadrature
- pointwise_min: intersection curve
- weighted_median: interpolated and plain weighted medians
- permute_weights: seeded weight shuffling
"""

from __future__ import annotations

import numpy as np
import pytest

from diel_overlap.compute.primitives import (
    drop_missing,
    integrate_xy,
    permute_weights,
    pointwise_min,
    weighted_median,
)


class TestDropMissing:
    def test_removes_none_nan_and_inf(self) -> None:
        result = drop_missing([1.0, None, float("nan"), 3, float("inf"), -float("inf")])
        np.testing.assert_array_equal(result, [1.0, 3.0])
        assert result.dtype == np.float64

    def test_keeps_order(self) -> None:
        result = drop_missing(np.array([5.0, np.nan, 2.0, 4.0]))
        np.testing.assert_array_equal(result, [5.0, 2.0, 4.0])

    def test_does_not_alias_input(self) -> None:
        data = np.array([1.0, 2.0])
        result = drop_missing(data)
        result[0] = 99.0
        assert data[0] == 1.0

    def test_integer_input(self) -> None:
        result = drop_missing(np.array([0, 12, 23]))
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [0.0, 12.0, 23.0])

    def test_empty(self) -> None:
        assert len(drop_missing([])) == 0

    def test_rejects_2d(self) -> None:
        with pytest.raises(ValueError, match="1-D"):
            drop_missing(np.ones((2, 3)))


class TestIntegrateXY:
    def test_linear_function_is_exact(self) -> None:
        x = np.array([0.0, 1.0, 2.0, 3.0])
        y = 2.0 * x + 1.0
        assert integrate_xy(x, y) == pytest.approx(12.0)

    def test_unsorted_grid(self) -> None:
        assert integrate_xy([2.0, 0.0, 1.0], [2.0, 0.0, 1.0]) == pytest.approx(2.0)

    def test_duplicate_x_keeps_first(self) -> None:
        assert integrate_xy([0.0, 1.0, 1.0, 2.0], [0.0, 1.0, 5.0, 2.0]) == pytest.approx(2.0)

    def test_spike_on_integer_grid(self) -> None:
        """A unit spike at an interior grid point has unit area."""
        x = np.arange(24, dtype=np.float64)
        y = np.zeros(24)
        y[3] = 1.0
        assert integrate_xy(x, y) == pytest.approx(1.0)

    def test_spike_at_endpoint_has_half_area(self) -> None:
        x = np.arange(24, dtype=np.float64)
        y = np.zeros(24)
        y[0] = 1.0
        assert integrate_xy(x, y) == pytest.approx(0.5)

    def test_single_point_is_zero(self) -> None:
        assert integrate_xy([1.0], [5.0]) == 0.0

    def test_length_mismatch(self) -> None:
        with pytest.raises(ValueError, match="same length"):
            integrate_xy([0.0, 1.0], [1.0])


class TestPointwiseMin:
    def test_minimum(self) -> None:
        result = pointwise_min([1.0, 5.0, 3.0], [2.0, 4.0, 3.0])
        np.testing.assert_array_equal(result, [1.0, 4.0, 3.0])

    def test_shape_mismatch(self) -> None:
        with pytest.raises(ValueError):
            pointwise_min([1.0, 2.0], [1.0])


class TestWeightedMedian:
    def test_equal_weights_odd_matches_median(self) -> None:
        assert weighted_median([3.0, 1.0, 2.0], [1.0, 1.0, 1.0]) == pytest.approx(2.0)

    def test_equal_weights_even_matches_median(self) -> None:
        values = [4.0, 1.0, 3.0, 2.0]
        assert weighted_median(values, [1.0] * 4) == pytest.approx(float(np.median(values)))

    def test_single_value(self) -> None:
        assert weighted_median([0.37], [2.5]) == 0.37

    def test_interpolated_heavy_weight(self) -> None:
        # midpoints of cumulative weight: 0.5, 1.5, 7.0; half of total = 6.0
        result = weighted_median([0.1, 0.5, 0.9], [1.0, 1.0, 10.0])
        assert result == pytest.approx(0.5 + (6.0 - 1.5) / (7.0 - 1.5) * 0.4)

    def test_not_interpolated_heavy_weight(self) -> None:
        result = weighted_median([0.1, 0.5, 0.9], [1.0, 1.0, 10.0], interpolate=False)
        assert result == 0.9

    def test_not_interpolated_returns_member(self) -> None:
        values = [0.2, 0.4, 0.6, 0.8]
        result = weighted_median(values, [1.0, 2.0, 3.0, 1.0], interpolate=False)
        assert result in values

    def test_zero_weights_are_ignored(self) -> None:
        assert weighted_median([0.0, 100.0, 1.0, 2.0], [1.0, 0.0, 1.0, 1.0]) == pytest.approx(1.0)

    def test_result_within_range(self) -> None:
        rng = np.random.default_rng(3)
        values = rng.uniform(0, 1, 25)
        weights = rng.uniform(0.1, 5, 25)
        result = weighted_median(values, weights)
        assert values.min() <= result <= values.max()

    def test_negative_weight(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            weighted_median([1.0, 2.0], [1.0, -1.0])

    def test_all_zero_weights(self) -> None:
        with pytest.raises(ValueError, match="positive weight"):
            weighted_median([1.0, 2.0], [0.0, 0.0])

    def test_length_mismatch(self) -> None:
        with pytest.raises(ValueError, match="same length"):
            weighted_median([1.0, 2.0], [1.0])


class TestPermuteWeights:
    def test_same_multiset(self) -> None:
        weights = np.array([1.0, 2.0, 3.0, 4.0, 5.0])
        shuffled = permute_weights(weights, np.random.default_rng(0))
        np.testing.assert_array_equal(np.sort(shuffled), weights)

    def test_reproducible_with_seed(self) -> None:
        weights = np.arange(10, dtype=np.float64)
        first = permute_weights(weights, np.random.default_rng(11))
        second = permute_weights(weights, np.random.default_rng(11))
        np.testing.assert_array_equal(first, second)

    def test_input_unchanged(self) -> None:
        weights = np.arange(6, dtype=np.float64)
        permute_weights(weights, np.random.default_rng(1))
        np.testing.assert_array_equal(weights, np.arange(6, dtype=np.float64))
