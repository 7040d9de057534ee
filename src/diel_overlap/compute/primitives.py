"""Pure-compute numerical primitives for overlap estimation.

This module contains ONLY numpy/scipy operations - no I/O, no network.

These are the building blocks the estimators compose:
- drop_missing: remove None/NaN/inf entries from a sample
- integrate_xy: trapezoid quadrature of a sampled curve
- pointwise_min: intersection curve of two densities
- weighted_median: robust reduction of pairwise overlaps
- permute_weights: null-model shuffling of weights
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
from scipy import integrate

if TYPE_CHECKING:
    from collections.abc import Iterable

    from numpy.typing import ArrayLike, NDArray

logger = logging.getLogger(__name__)


def drop_missing(values: Iterable[float | None] | ArrayLike) -> NDArray[np.float64]:
    """Convert a sample to float64 and remove missing entries.

    ``None`` converts to NaN, and NaN or infinite entries are removed. The
    remaining values keep their original order.

    Parameters
    ----------
    values : array_like
        1-D sequence of numbers, possibly containing None or NaN.

    Returns
    -------
    np.ndarray
        New float64 array of the finite values.
    """
    if isinstance(values, np.ndarray) and values.dtype != object:
        arr = values.astype(np.float64)
    else:
        arr = np.array([np.nan if v is None else v for v in values], dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"sample must be 1-D, got shape {arr.shape}")

    mask = np.isfinite(arr)
    n_dropped = int(arr.size - np.count_nonzero(mask))
    if n_dropped:
        logger.debug("Dropped %d missing values from sample of %d", n_dropped, arr.size)

    result: NDArray[np.float64] = arr[mask].copy()
    return result


def integrate_xy(x: ArrayLike, y: ArrayLike) -> float:
    """Integrate a sampled curve with the trapezoid rule.

    Points are sorted by ``x`` and repeated ``x`` values keep only their first
    occurrence, so curves whose grid is not monotone still integrate over the
    covered range.

    Parameters
    ----------
    x : array_like
        Abscissae. Shape (n,).
    y : array_like
        Curve values at ``x``. Shape (n,).

    Returns
    -------
    float
        Area under the curve over ``[min(x), max(x)]``. Zero for fewer than
        two distinct points.
    """
    x_arr = np.asarray(x, dtype=np.float64)
    y_arr = np.asarray(y, dtype=np.float64)
    if x_arr.shape != y_arr.shape:
        raise ValueError(f"x and y must have same length: {len(x_arr)} vs {len(y_arr)}")

    order = np.argsort(x_arr, kind="stable")
    x_sorted = x_arr[order]
    y_sorted = y_arr[order]

    _, first = np.unique(x_sorted, return_index=True)
    if len(first) < len(x_sorted):
        x_sorted = x_sorted[first]
        y_sorted = y_sorted[first]

    if len(x_sorted) < 2:
        return 0.0

    return float(integrate.trapezoid(y_sorted, x_sorted))


def pointwise_min(a: ArrayLike, b: ArrayLike) -> NDArray[np.float64]:
    """Pointwise minimum of two curves sampled on the same grid."""
    a_arr = np.asarray(a, dtype=np.float64)
    b_arr = np.asarray(b, dtype=np.float64)
    if a_arr.shape != b_arr.shape:
        raise ValueError(f"curves must share a grid: {a_arr.shape} vs {b_arr.shape}")
    result: NDArray[np.float64] = np.minimum(a_arr, b_arr)
    return result


def weighted_median(
    values: ArrayLike,
    weights: ArrayLike,
    *,
    interpolate: bool = True,
) -> float:
    """Compute the weighted median of ``values``.

    Entries with zero weight do not contribute. With ``interpolate=True`` each
    value is placed at the midpoint of its cumulative weight span and the
    median is linearly interpolated at half the total weight, so equal
    weights reproduce the ordinary median. Without interpolation the result
    is the smallest value whose cumulative weight reaches half the total.

    Parameters
    ----------
    values : array_like
        Values to reduce. Shape (n,).
    weights : array_like
        Non-negative weights. Shape (n,).
    interpolate : bool
        Interpolate between neighbouring values (default True).

    Returns
    -------
    float
        Weighted median.

    Raises
    ------
    ValueError
        If lengths differ, any weight is negative or not finite, or no value
        carries positive weight.
    """
    x = np.asarray(values, dtype=np.float64)
    w = np.asarray(weights, dtype=np.float64)
    if x.shape != w.shape:
        raise ValueError(f"values and weights must have same length: {len(x)} vs {len(w)}")
    if not np.all(np.isfinite(w)):
        raise ValueError("weights must be finite")
    if np.any(w < 0):
        raise ValueError("weights must be non-negative")

    keep = w > 0
    x = x[keep]
    w = w[keep]
    if len(x) == 0:
        raise ValueError("weighted median needs at least one value with positive weight")
    if len(x) == 1:
        return float(x[0])

    order = np.argsort(x, kind="stable")
    x = x[order]
    w = w[order]

    cumulative = np.cumsum(w)
    half = cumulative[-1] / 2.0

    if interpolate:
        midpoints = cumulative - w / 2.0
        return float(np.interp(half, midpoints, x))

    k = int(np.searchsorted(cumulative, half, side="left"))
    return float(x[min(k, len(x) - 1)])


def permute_weights(weights: ArrayLike, rng: np.random.Generator) -> NDArray[np.float64]:
    """Return a uniformly random permutation of ``weights``.

    Parameters
    ----------
    weights : array_like
        Weights to shuffle. Shape (n,).
    rng : numpy.random.Generator
        Source of randomness; pass a seeded generator for reproducible runs.

    Returns
    -------
    np.ndarray
        Shuffled copy of the weights.
    """
    w = np.asarray(weights, dtype=np.float64)
    result: NDArray[np.float64] = rng.permutation(w)
    return result
