"""Result models for overlap estimation.

This module provides:
- OverlapResult: Symmetric and asymmetric overlap coefficients
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class OverlapResult(BaseModel):
    """Overlap of two curves.

    ``overlap`` is twice the shared area over the summed areas; ``overlap_a``
    and ``overlap_b`` give the shared area as a fraction of each curve's own
    area. The three areas are kept for diagnostics.

    Attributes:
        overlap: Symmetric overlap coefficient
        overlap_a: Shared area / area under curve a
        overlap_b: Shared area / area under curve b
        integral_a: Area under curve a
        integral_b: Area under curve b
        intersection: Area under the pointwise minimum
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    overlap: float = Field(ge=0.0)
    overlap_a: float = Field(ge=0.0)
    overlap_b: float = Field(ge=0.0)
    integral_a: float = Field(gt=0.0)
    integral_b: float = Field(gt=0.0)
    intersection: float = Field(ge=0.0)

    def as_tuple(self) -> tuple[float, float, float]:
        """Return ``(overlap, overlap_a, overlap_b)``."""
        return (self.overlap, self.overlap_a, self.overlap_b)

    def to_dict(self) -> dict[str, float]:
        """Convert to dictionary for JSON serialization."""
        return {
            "overlap": self.overlap,
            "overlap_a": self.overlap_a,
            "overlap_b": self.overlap_b,
            "integral_a": self.integral_a,
            "integral_b": self.integral_b,
            "intersection": self.intersection,
        }
