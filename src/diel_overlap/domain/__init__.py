"""Domain models for diel-overlap.

This package is domain-only. It holds the circular-value representation and
nothing that computes densities or overlaps.
"""

from diel_overlap.domain.circular import (
    CircularSample,
    CircularTemplate,
    CircularUnits,
    Rotation,
    make_circular,
)

__all__ = [
    "CircularSample",
    "CircularTemplate",
    "CircularUnits",
    "Rotation",
    "make_circular",
]
