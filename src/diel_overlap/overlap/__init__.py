"""Overlap estimation between circular activity distributions.

Exports:
- Estimators: circular_overlap, circular_overlap_24hour, overlap_from_curves
- Community: community_overlap_circular, pairwise_overlaps,
             group_traits_by_species, harmonic_mean_weight
- Results: DensityCurve, OverlapResult, PairwiseOverlap
"""

from __future__ import annotations

from diel_overlap.compute.density import DensityCurve
from diel_overlap.overlap.result import OverlapResult
from diel_overlap.overlap.estimators import (
    circular_overlap,
    circular_overlap_24hour,
    overlap_from_curves,
)
from diel_overlap.overlap.community import (
    PairwiseOverlap,
    community_overlap_circular,
    group_traits_by_species,
    harmonic_mean_weight,
    pairwise_overlaps,
)

__all__ = [
    # Estimators
    "circular_overlap",
    "circular_overlap_24hour",
    "overlap_from_curves",
    # Community
    "community_overlap_circular",
    "pairwise_overlaps",
    "group_traits_by_species",
    "harmonic_mean_weight",
    # Result types
    "DensityCurve",
    "OverlapResult",
    "PairwiseOverlap",
]
