"""Compute operations for circular density and overlap estimation.

This module provides numerical primitives for:
- Missing-value cleaning and trapezoid quadrature
- Weighted medians and weight permutation
- Von Mises kernel densities and hourly histograms
"""

from __future__ import annotations

from diel_overlap.compute.primitives import (
    drop_missing,
    integrate_xy,
    permute_weights,
    pointwise_min,
    weighted_median,
)
from diel_overlap.compute.density import DensityCurve, hourly_counts, vonmises_kde

__all__ = [
    "drop_missing",
    "integrate_xy",
    "permute_weights",
    "pointwise_min",
    "weighted_median",
    "DensityCurve",
    "hourly_counts",
    "vonmises_kde",
]
