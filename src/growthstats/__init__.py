"""
Growth percentile statistics against the WHO growth standards.

Converts weight, length/height and head circumference measurements into
Z-scores and percentiles with the LMS method, and generates the reference
percentile curves used on growth charts.
"""

from .api import Result, compute_growth_percentile, generate_reference_curve
from .curves import reference_curve_frame
from .exceptions import (
    EmptyTableError,
    ErrorKind,
    GrowthStatsError,
    InvalidAgeError,
    InvalidGenderError,
    InvalidMeasurementError,
    InvalidPercentileInputError,
    InvalidTableError,
    UnsupportedMeasurementError,
    UnsupportedStandardError,
)
from .frame import GrowthFrameScorer
from .interpolation import get_lms_for_age
from .models import (
    CurvePoint,
    GrowthPercentileResult,
    LMSRecord,
    ReferenceCurve,
    WeightObservation,
    WeightVelocity,
)
from .normal import percentile_to_zscore, zscore_to_percentile
from .percentile import classify_percentile, compute_growth_percentiles, resolve_gender
from .tables import WHO_STORE, ReferenceTableStore, select_dataset
from .velocity import weight_velocity
from .zscores import calculate_zscore, value_from_zscore

__all__ = [
    "Result",
    "compute_growth_percentile",
    "generate_reference_curve",
    "reference_curve_frame",
    "compute_growth_percentiles",
    "GrowthFrameScorer",
    "get_lms_for_age",
    "calculate_zscore",
    "value_from_zscore",
    "zscore_to_percentile",
    "percentile_to_zscore",
    "select_dataset",
    "ReferenceTableStore",
    "WHO_STORE",
    "classify_percentile",
    "resolve_gender",
    "weight_velocity",
    "LMSRecord",
    "GrowthPercentileResult",
    "CurvePoint",
    "ReferenceCurve",
    "WeightObservation",
    "WeightVelocity",
    "ErrorKind",
    "GrowthStatsError",
    "InvalidMeasurementError",
    "InvalidAgeError",
    "UnsupportedStandardError",
    "UnsupportedMeasurementError",
    "EmptyTableError",
    "InvalidPercentileInputError",
    "InvalidGenderError",
    "InvalidTableError",
]
