"""
Caller-facing entry points.

The orchestrating operations return a ``Result`` instead of raising, so a host
rendering many badges or charts handles each failure explicitly. Only engine
errors (``GrowthStatsError``) become failed results; anything else propagates.
The lower-level helpers are re-exported unchanged and raise on invalid input.
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

from .config import WHO_STANDARD
from .curves import generate_reference_curve as _generate_reference_curve
from .exceptions import ErrorKind, GrowthStatsError
from .interpolation import get_lms_for_age
from .models import GrowthPercentileResult, ReferenceCurve
from .normal import zscore_to_percentile
from .percentile import compute_growth_percentile as _compute_growth_percentile
from .tables import ReferenceTableStore
from .zscores import calculate_zscore

T = TypeVar("T")

__all__ = [
    "Result",
    "compute_growth_percentile",
    "generate_reference_curve",
    "get_lms_for_age",
    "calculate_zscore",
    "zscore_to_percentile",
]


class Result(BaseModel, Generic[T]):
    """Outcome of an engine call: either a value or an engine error."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Optional[T] = None
    error: Optional[GrowthStatsError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> T:
        """Return the value, raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def compute_growth_percentile(
    measurement: str,
    value: float,
    age_months: float,
    gender: str,
    standard: str = WHO_STANDARD,
    store: Optional[ReferenceTableStore] = None,
) -> Result[GrowthPercentileResult]:
    """Percentile and Z-score for one measurement, as a Result."""
    try:
        return Result[GrowthPercentileResult](
            value=_compute_growth_percentile(
                measurement, value, age_months, gender, standard, store
            )
        )
    except GrowthStatsError as e:
        return Result[GrowthPercentileResult](error=e)


def generate_reference_curve(
    measurement: str,
    gender: str,
    standard: str,
    max_age_months: float,
    store: Optional[ReferenceTableStore] = None,
) -> Result[ReferenceCurve]:
    """The seven canonical percentile curves, as a Result."""
    try:
        return Result[ReferenceCurve](
            value=_generate_reference_curve(
                measurement, gender, standard, max_age_months, store
            )
        )
    except GrowthStatsError as e:
        return Result[ReferenceCurve](error=e)
