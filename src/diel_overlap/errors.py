"""Local error taxonomy for diel-overlap.

This library is compute-only and must not depend on any application runtime.
We keep a small, stable error enum/envelope that downstream analysis code can
translate into its own error formats.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorType(str, Enum):
    EMPTY_INPUT = "EMPTY_INPUT"
    DEGENERATE_INTEGRAL = "DEGENERATE_INTEGRAL"
    INVALID_DATA = "INVALID_DATA"


class ErrorEnvelope(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    type: ErrorType
    message: str
    context: dict[str, Any] = Field(default_factory=dict)


def make_error(error_type: ErrorType, message: str, **context: Any) -> ErrorEnvelope:
    return ErrorEnvelope(type=error_type, message=message, context=dict(context))


class OverlapError(ValueError):
    """Base class for failures of an overlap computation.

    Subclasses set ``error_type`` and collect the values that explain the
    failure in ``context`` so that ``to_envelope()`` can serialize them.
    """

    error_type: ErrorType = ErrorType.INVALID_DATA

    def __init__(self, message: str, **context: Any) -> None:
        self.context = dict(context)
        super().__init__(message)

    def to_envelope(self) -> ErrorEnvelope:
        return make_error(self.error_type, str(self), **self.context)


class EmptyInputError(OverlapError):
    """Raised when a sample has no usable observations.

    Attributes:
        sample: Which input was empty ("a" or "b").
    """

    error_type = ErrorType.EMPTY_INPUT

    def __init__(self, sample: str, message: str | None = None) -> None:
        self.sample = sample
        super().__init__(
            message or f"Sample '{sample}' is empty after removing missing values",
            sample=sample,
        )


class DegenerateIntegralError(OverlapError):
    """Raised when an integrated density area is zero, negative or not finite.

    Attributes:
        integral_a: Area under the first curve.
        integral_b: Area under the second curve.
    """

    error_type = ErrorType.DEGENERATE_INTEGRAL

    def __init__(self, integral_a: float, integral_b: float) -> None:
        self.integral_a = float(integral_a)
        self.integral_b = float(integral_b)
        super().__init__(
            "Overlap is undefined for non-positive curve areas: "
            f"integral_a={self.integral_a!r}, integral_b={self.integral_b!r}",
            integral_a=self.integral_a,
            integral_b=self.integral_b,
        )
