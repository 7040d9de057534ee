"""Overlap coefficients for pairs of circular samples.

Two estimators share the same final step (``overlap_from_curves``):
- circular_overlap: kernel density curves for real-valued circular data
- circular_overlap_24hour: hourly histograms for integer clock-hour labels

The coefficient is ``2 * intersection / (integral_a + integral_b)`` where the
intersection is the area under the pointwise minimum of the two curves.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from diel_overlap.compute.density import DensityCurve, hourly_counts, vonmises_kde
from diel_overlap.compute.primitives import integrate_xy, pointwise_min
from diel_overlap.config import DEFAULT_CONFIG, OverlapConfig
from diel_overlap.domain.circular import CircularTemplate, CircularUnits, make_circular
from diel_overlap.errors import DegenerateIntegralError, EmptyInputError
from diel_overlap.overlap.result import OverlapResult

if TYPE_CHECKING:
    from collections.abc import Iterable

    from numpy.typing import ArrayLike

logger = logging.getLogger(__name__)


def overlap_from_curves(curve_a: DensityCurve, curve_b: DensityCurve) -> OverlapResult:
    """Integrate two curves on a shared grid and derive the overlap coefficients.

    Args:
        curve_a: First curve
        curve_b: Second curve, sampled on the same ``x`` as ``curve_a``

    Returns:
        OverlapResult with the three coefficients and the underlying areas.

    Raises:
        ValueError: If the curves do not share a grid.
        DegenerateIntegralError: If either area is not strictly positive.
    """
    if curve_a.x.shape != curve_b.x.shape or not np.allclose(curve_a.x, curve_b.x):
        raise ValueError("curves must be sampled on the same grid")

    x = curve_a.x
    w = pointwise_min(curve_a.y, curve_b.y)

    integral_a = integrate_xy(x, curve_a.y)
    integral_b = integrate_xy(x, curve_b.y)
    intersection = integrate_xy(x, w)
    logger.debug(
        "Curve areas: integral_a=%.6g integral_b=%.6g intersection=%.6g",
        integral_a,
        integral_b,
        intersection,
    )

    if not (np.isfinite(integral_a) and np.isfinite(integral_b)):
        raise DegenerateIntegralError(integral_a, integral_b)
    if integral_a <= 0 or integral_b <= 0:
        raise DegenerateIntegralError(integral_a, integral_b)

    total = integral_a + integral_b
    return OverlapResult(
        overlap=2.0 * intersection / total,
        overlap_a=intersection / integral_a,
        overlap_b=intersection / integral_b,
        integral_a=integral_a,
        integral_b=integral_b,
        intersection=intersection,
    )


def circular_overlap(
    a: Iterable[float | None] | ArrayLike,
    b: Iterable[float | None] | ArrayLike,
    units: CircularUnits | str,
    template: CircularTemplate | str,
    normalize: bool = True,
    *,
    bandwidth: float,
    resolution: int | None = None,
    config: OverlapConfig | None = None,
) -> OverlapResult:
    """Overlap of two circular distributions from kernel density estimates.

    Each sample is cleaned, converted to a circular sample with the given
    units and template, and smoothed with a von Mises kernel of concentration
    ``bandwidth``. Each curve is built from its own sample.

    Args:
        a: Observations of the first group
        b: Observations of the second group
        units: Unit of the observations ("radians", "degrees", "hours")
        template: Reference frame ("none", "geographics", "clock24", "clock12")
        normalize: Keep unit-area densities (True) or scale each curve by its
            sample size to approximate count curves (False)
        bandwidth: Von Mises concentration parameter; must be positive
        resolution: Number of grid points; defaults to ``config.resolution``
        config: Numeric defaults

    Returns:
        OverlapResult.

    Raises:
        EmptyInputError: If either sample has no finite values.
        DegenerateIntegralError: If either density integrates to zero.

    Example:
        >>> result = circular_overlap(
        ...     [21.5, 22.0, 23.1, 0.5], [20.0, 21.0, 22.5],
        ...     units="hours", template="clock24", bandwidth=10.0,
        ... )
        >>> 0.0 <= result.overlap <= 1.0
        True
    """
    cfg = config or DEFAULT_CONFIG
    n_points = cfg.resolution if resolution is None else int(resolution)

    circ_a = make_circular(a, units=units, template=template)
    if circ_a.n_obs == 0:
        raise EmptyInputError("a")
    circ_b = make_circular(b, units=units, template=template)
    if circ_b.n_obs == 0:
        raise EmptyInputError("b")

    density_a = vonmises_kde(circ_a, bandwidth=bandwidth, resolution=n_points)
    density_b = vonmises_kde(circ_b, bandwidth=bandwidth, resolution=n_points)

    if not normalize:
        density_a = density_a.scaled(circ_a.n_obs)
        density_b = density_b.scaled(circ_b.n_obs)

    return overlap_from_curves(density_a, density_b)


def circular_overlap_24hour(
    a: Iterable[float | None] | ArrayLike,
    b: Iterable[float | None] | ArrayLike,
    normalize: bool = True,
    *,
    config: OverlapConfig | None = None,
) -> OverlapResult:
    """Overlap of two 24-hour distributions from hourly proportions.

    The density of each sample is the proportion of its observations in each
    clock hour, so no bandwidth is needed. Labels outside ``0..23`` are
    ignored.

    Args:
        a: Hour labels of the first group
        b: Hour labels of the second group
        normalize: Use relative frequencies (True) or raw counts (False)
        config: Numeric defaults; ``config.n_hours`` sets the label support

    Returns:
        OverlapResult.

    Raises:
        EmptyInputError: If either sample has no label inside the support.
        DegenerateIntegralError: If either histogram integrates to zero.

    Example:
        >>> circular_overlap_24hour([0, 0, 0], [12, 12]).overlap
        0.0
    """
    cfg = config or DEFAULT_CONFIG

    counts_a = hourly_counts(a, n_hours=cfg.n_hours)
    if counts_a.n_obs == 0:
        raise EmptyInputError("a", "Sample 'a' has no hour labels inside the support")
    counts_b = hourly_counts(b, n_hours=cfg.n_hours)
    if counts_b.n_obs == 0:
        raise EmptyInputError("b", "Sample 'b' has no hour labels inside the support")

    if normalize:
        counts_a = counts_a.scaled(1.0 / counts_a.n_obs)
        counts_b = counts_b.scaled(1.0 / counts_b.n_obs)

    return overlap_from_curves(counts_a, counts_b)
