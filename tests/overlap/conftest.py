"""Test fixtures for overlap estimation."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.typing import NDArray


@pytest.fixture
def nocturnal_hours() -> NDArray[np.int64]:
    """Hour labels concentrated around midnight (20:00 to 04:00)."""
    rng = np.random.default_rng(42)
    return (np.round(rng.normal(0.0, 2.0, 80)) % 24).astype(np.int64)


@pytest.fixture
def crepuscular_hours() -> NDArray[np.int64]:
    """Hour labels split between dawn (06:00) and dusk (19:00)."""
    rng = np.random.default_rng(7)
    dawn = rng.normal(6.0, 1.0, 30)
    dusk = rng.normal(19.0, 1.0, 30)
    return (np.round(np.concatenate([dawn, dusk])) % 24).astype(np.int64)


@pytest.fixture
def community() -> dict[str, list[object]]:
    """Camera-trap style records for four species plus incomplete rows.

    Returns:
        Dictionary with parallel "traits" and "species" lists.
    """
    records: list[tuple[object, object]] = [
        *[(h, "badger") for h in (22, 23, 23, 0, 1, 2)],
        *[(h, "deer") for h in (5, 6, 6, 7, 18, 19)],
        *[(h, "fox") for h in (21, 22, 0, 3)],
        *[(h, "squirrel") for h in (9, 10, 12, 14, 15)],
        (12, "marten"),
        (None, "badger"),
        (4, None),
    ]
    return {
        "traits": [t for t, _ in records],
        "species": [s for _, s in records],
    }
