"""Overlap computation configuration."""

from dataclasses import dataclass


@dataclass(frozen=True)
class OverlapConfig:
    """
    Numeric defaults shared by the overlap estimators.

    This dataclass is frozen (immutable) so a single instance can be passed
    through a whole batch of calls without changing underneath them.

    Attributes
    ----------
    resolution : int
        Number of grid points for circular kernel density curves when the
        caller does not pass one (default: 512).
    n_hours : int
        Size of the hourly label support ``0..n_hours-1`` (default: 24).
    min_abundance : int
        Minimum number of observations a species needs to take part in a
        community overlap (default: 2).
    interpolate_median : bool
        Use the interpolated weighted median for community aggregation
        (default: True).
    """

    resolution: int = 512
    n_hours: int = 24
    min_abundance: int = 2
    interpolate_median: bool = True

    def __post_init__(self) -> None:
        if self.resolution < 2:
            raise ValueError(f"resolution must be >= 2, got {self.resolution}")
        if self.n_hours < 2:
            raise ValueError(f"n_hours must be >= 2, got {self.n_hours}")
        if self.min_abundance < 1:
            raise ValueError(f"min_abundance must be >= 1, got {self.min_abundance}")


DEFAULT_CONFIG = OverlapConfig()
