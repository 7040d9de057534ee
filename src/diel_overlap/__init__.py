"""Overlap coefficients for circular activity distributions.

Compares diel activity patterns (or any circular-domain samples) with:
- circular_overlap: von Mises kernel density overlap for real-valued data
- circular_overlap_24hour: histogram overlap for integer clock hours
- community_overlap_circular: abundance-weighted median of pairwise overlaps
"""

from __future__ import annotations

__version__ = "0.1.0"

from diel_overlap.config import OverlapConfig
from diel_overlap.domain import CircularTemplate, CircularUnits
from diel_overlap.errors import DegenerateIntegralError, EmptyInputError, OverlapError
from diel_overlap.overlap import (
    OverlapResult,
    PairwiseOverlap,
    circular_overlap,
    circular_overlap_24hour,
    community_overlap_circular,
    pairwise_overlaps,
)

__all__ = [
    "__version__",
    "OverlapConfig",
    "CircularTemplate",
    "CircularUnits",
    "OverlapError",
    "EmptyInputError",
    "DegenerateIntegralError",
    "OverlapResult",
    "PairwiseOverlap",
    "circular_overlap",
    "circular_overlap_24hour",
    "community_overlap_circular",
    "pairwise_overlaps",
]
