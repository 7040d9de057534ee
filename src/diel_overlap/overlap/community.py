"""Community-level weighted median overlap of hourly activity.

Every pair of species with enough observations is compared with the hourly
overlap estimator. Each pair is weighted by the harmonic mean of the two
species' abundances, and the community statistic is the weighted median of
the pairwise overlaps.
"""

from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from dataclasses import asdict, dataclass
from itertools import combinations
from typing import TYPE_CHECKING, Any

import numpy as np

from diel_overlap.compute.primitives import permute_weights, weighted_median
from diel_overlap.config import DEFAULT_CONFIG, OverlapConfig
from diel_overlap.overlap.estimators import circular_overlap_24hour

if TYPE_CHECKING:
    from collections.abc import Hashable, Sequence

    from numpy.typing import NDArray

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PairwiseOverlap:
    """Hourly overlap of one unordered species pair.

    Attributes:
        species_a: Label of the first species (sorts before species_b)
        species_b: Label of the second species
        overlap: Symmetric hourly overlap coefficient
        weight: Harmonic mean of the two abundances
        n_a: Abundance of species_a
        n_b: Abundance of species_b
    """

    species_a: str
    species_b: str
    overlap: float
    weight: float
    n_a: int
    n_b: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def harmonic_mean_weight(n_a: int, n_b: int) -> float:
    """Harmonic mean of two abundances, ``2 / (1/n_a + 1/n_b)``."""
    if n_a <= 0 or n_b <= 0:
        raise ValueError(f"abundances must be positive, got {n_a} and {n_b}")
    return 2.0 / (1.0 / n_a + 1.0 / n_b)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, np.floating) and bool(np.isnan(value))


def group_traits_by_species(
    traits: Sequence[Any],
    species: Sequence[Hashable | None],
    *,
    min_abundance: int = 2,
) -> dict[str, NDArray[np.float64]]:
    """Group trait values by species label.

    Rows where either the trait or the label is missing are dropped, then
    species with fewer than ``min_abundance`` rows are removed. Labels are
    compared as strings and the mapping is ordered by label.

    Args:
        traits: Trait value per individual (hour labels)
        species: Species label per individual
        min_abundance: Minimum rows a species needs to be kept

    Returns:
        Mapping of species label to its trait values, in sorted label order.
    """
    if len(traits) != len(species):
        raise ValueError(
            f"traits and species must have same length: {len(traits)} vs {len(species)}"
        )

    groups: dict[str, list[float]] = {}
    n_incomplete = 0
    for trait, label in zip(traits, species):
        if _is_missing(trait) or _is_missing(label):
            n_incomplete += 1
            continue
        groups.setdefault(str(label), []).append(float(trait))

    if n_incomplete:
        logger.debug("Dropped %d incomplete trait/species rows", n_incomplete)

    kept = {
        label: np.asarray(values, dtype=np.float64)
        for label, values in sorted(groups.items())
        if len(values) >= min_abundance
    }
    n_rare = len(groups) - len(kept)
    if n_rare:
        logger.debug("Dropped %d species with fewer than %d observations", n_rare, min_abundance)
    return kept


def pairwise_overlaps(
    traits: Sequence[Any],
    species: Sequence[Hashable | None],
    normalize: bool = True,
    *,
    max_workers: int | None = None,
    config: OverlapConfig | None = None,
) -> list[PairwiseOverlap]:
    """Compute the hourly overlap of every unordered pair of eligible species.

    Pairs are enumerated in label order (``species_a`` before ``species_b``),
    giving ``n * (n - 1) / 2`` records for ``n`` eligible species and an empty
    list when fewer than two species qualify.

    Args:
        traits: Hour label per individual
        species: Species label per individual
        normalize: Passed to the hourly overlap estimator
        max_workers: Evaluate pairs on this many threads when greater than 1
        config: Numeric defaults

    Returns:
        One PairwiseOverlap per species pair, in pair-rank order.
    """
    cfg = config or DEFAULT_CONFIG
    groups = group_traits_by_species(traits, species, min_abundance=cfg.min_abundance)
    labels = list(groups)
    pairs = list(combinations(range(len(labels)), 2))

    results: list[PairwiseOverlap | None] = [None] * len(pairs)

    def _evaluate(rank: int) -> None:
        i, j = pairs[rank]
        sp_a, sp_b = labels[i], labels[j]
        traits_a, traits_b = groups[sp_a], groups[sp_b]
        overlap = circular_overlap_24hour(traits_a, traits_b, normalize=normalize, config=cfg)
        results[rank] = PairwiseOverlap(
            species_a=sp_a,
            species_b=sp_b,
            overlap=overlap.overlap,
            weight=harmonic_mean_weight(len(traits_a), len(traits_b)),
            n_a=len(traits_a),
            n_b=len(traits_b),
        )

    if max_workers is not None and max_workers > 1 and len(pairs) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            # list() re-raises the first worker exception
            list(pool.map(_evaluate, range(len(pairs))))
    else:
        for rank in range(len(pairs)):
            _evaluate(rank)

    logger.debug("Computed %d pairwise overlaps across %d species", len(pairs), len(labels))
    return [r for r in results if r is not None]


def community_overlap_circular(
    traits: Sequence[Any],
    species: Sequence[Hashable | None],
    normalize: bool = True,
    randomize_weights: bool = False,
    *,
    rng: np.random.Generator | None = None,
    seed: int | None = None,
    max_workers: int | None = None,
    config: OverlapConfig | None = None,
) -> float | None:
    """Community-level weighted median overlap of hourly activity.

    Args:
        traits: Hour label (0-23) per individual
        species: Species label per individual
        normalize: Use relative hourly frequencies (True) or raw counts (False)
        randomize_weights: Shuffle the pair weights relative to the pair
            overlaps before taking the median (null model for permutation
            tests)
        rng: Random generator used when ``randomize_weights`` is set
        seed: Seed for a fresh generator when ``rng`` is not given
        max_workers: Evaluate pairs on this many threads when greater than 1
        config: Numeric defaults

    Returns:
        Weighted median of the pairwise overlaps, or None when fewer than two
        species have at least ``config.min_abundance`` observations. None
        means the statistic is undefined, which is distinct from zero overlap.

    Example:
        >>> traits = [1, 1, 2, 13, 13, 14]
        >>> species = ["fox", "fox", "fox", "owl", "owl", "owl"]
        >>> community_overlap_circular(traits, species)
        0.0
    """
    cfg = config or DEFAULT_CONFIG
    pairs = pairwise_overlaps(
        traits, species, normalize=normalize, max_workers=max_workers, config=cfg
    )
    if not pairs:
        logger.debug("Fewer than two eligible species; community overlap not applicable")
        return None

    overlaps = np.array([p.overlap for p in pairs], dtype=np.float64)
    weights = np.array([p.weight for p in pairs], dtype=np.float64)

    if randomize_weights:
        generator = rng if rng is not None else np.random.default_rng(seed)
        weights = permute_weights(weights, generator)

    return weighted_median(overlaps, weights, interpolate=cfg.interpolate_median)
