"""Circular sample domain model.

This module provides:
- CircularUnits / CircularTemplate: the supported measurement conventions
- CircularSample: cleaned observations tagged with their unit and reference frame
- make_circular: Helper that builds a CircularSample from raw caller input

A template fixes the reference zero direction and the rotation sense, and for
the clock and compass templates also the unit. Building a sample never alters
the stored values; ``to_radians`` projects them into the standard frame
(zero at 0 radians, counter-clockwise) used by the density estimator.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

import numpy as np

from diel_overlap.compute.primitives import drop_missing

if TYPE_CHECKING:
    from collections.abc import Iterable

    from numpy.typing import ArrayLike, NDArray

logger = logging.getLogger(__name__)


class CircularUnits(str, Enum):
    RADIANS = "radians"
    DEGREES = "degrees"
    HOURS = "hours"


class CircularTemplate(str, Enum):
    NONE = "none"
    GEOGRAPHICS = "geographics"
    CLOCK24 = "clock24"
    CLOCK12 = "clock12"


class Rotation(str, Enum):
    COUNTER = "counter"
    CLOCK = "clock"


# One full turn expressed in each unit
_FULL_TURN: dict[CircularUnits, float] = {
    CircularUnits.RADIANS: 2.0 * math.pi,
    CircularUnits.DEGREES: 360.0,
    CircularUnits.HOURS: 24.0,
}

# template -> (forced units, zero in radians, rotation, period override)
_TEMPLATE_FRAMES: dict[
    CircularTemplate, tuple[CircularUnits | None, float, Rotation, float | None]
] = {
    CircularTemplate.NONE: (None, 0.0, Rotation.COUNTER, None),
    CircularTemplate.GEOGRAPHICS: (CircularUnits.DEGREES, math.pi / 2, Rotation.CLOCK, None),
    CircularTemplate.CLOCK24: (CircularUnits.HOURS, math.pi / 2, Rotation.CLOCK, 24.0),
    CircularTemplate.CLOCK12: (CircularUnits.HOURS, math.pi / 2, Rotation.CLOCK, 12.0),
}


@dataclass(frozen=True)
class CircularSample:
    """Observations on a circular domain.

    Attributes:
        values: Finite observations in ``units`` (float64, read-only)
        units: Measurement unit of ``values``
        template: Reference frame convention
        zero: Direction of the zero value, in standard-frame radians
        rotation: Direction in which values increase
        period: Length of one full turn, in ``units``
    """

    values: NDArray[np.float64]
    units: CircularUnits
    template: CircularTemplate
    zero: float
    rotation: Rotation
    period: float

    def __post_init__(self) -> None:
        if not isinstance(self.values, np.ndarray):
            raise TypeError(f"values must be a numpy array, got {type(self.values).__name__}")
        if self.values.dtype != np.float64:
            raise ValueError(f"values must be float64, got {self.values.dtype}")
        if self.values.ndim != 1:
            raise ValueError(f"values must be 1-D, got shape {self.values.shape}")
        if self.period <= 0:
            raise ValueError(f"period must be positive, got {self.period}")
        self.values.flags.writeable = False

    @property
    def n_obs(self) -> int:
        """Number of observations."""
        return len(self.values)

    def to_radians(self, values: ArrayLike | None = None) -> NDArray[np.float64]:
        """Project values of this sample's frame into standard radians in [0, 2*pi).

        Args:
            values: Values expressed in this sample's units and frame. Defaults
                to the sample's own observations.

        Returns:
            Angles measured counter-clockwise from 0 radians.
        """
        data = self.values if values is None else np.asarray(values, dtype=np.float64)
        sign = 1.0 if self.rotation is Rotation.COUNTER else -1.0
        theta = self.zero + sign * data * (2.0 * np.pi / self.period)
        result: NDArray[np.float64] = np.mod(theta, 2.0 * np.pi)
        return result


def make_circular(
    values: Iterable[float | None] | ArrayLike,
    units: CircularUnits | str,
    template: CircularTemplate | str = CircularTemplate.NONE,
) -> CircularSample:
    """Build a CircularSample from raw observations.

    Missing entries (None, NaN, inf) are removed. Clock and compass templates
    force their own unit; a conflicting ``units`` argument is overridden.

    Args:
        values: Raw observations
        units: Unit of the observations ("radians", "degrees" or "hours")
        template: Reference frame ("none", "geographics", "clock24", "clock12")

    Returns:
        CircularSample holding the cleaned values.

    Raises:
        ValueError: If ``units`` or ``template`` is not recognised.
    """
    try:
        units_enum = CircularUnits(units)
    except ValueError:
        raise ValueError(
            f"Unknown circular units {units!r}; expected one of "
            f"{[u.value for u in CircularUnits]}"
        ) from None
    try:
        template_enum = CircularTemplate(template)
    except ValueError:
        raise ValueError(
            f"Unknown circular template {template!r}; expected one of "
            f"{[t.value for t in CircularTemplate]}"
        ) from None

    forced_units, zero, rotation, period = _TEMPLATE_FRAMES[template_enum]
    if forced_units is not None and forced_units is not units_enum:
        logger.warning(
            "Template %s uses %s; overriding requested units %s",
            template_enum.value,
            forced_units.value,
            units_enum.value,
        )
        units_enum = forced_units

    return CircularSample(
        values=drop_missing(values),
        units=units_enum,
        template=template_enum,
        zero=zero,
        rotation=rotation,
        period=period if period is not None else _FULL_TURN[units_enum],
    )
