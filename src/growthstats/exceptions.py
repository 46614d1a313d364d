"""
Error taxonomy for the growth statistics engine.

Every error raised by the engine is a ``GrowthStatsError`` (and therefore a
``ValueError``) carrying an ``ErrorKind`` so callers can branch on the kind
without matching message text.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of failure the engine reports."""

    INVALID_MEASUREMENT = "InvalidMeasurement"
    INVALID_AGE = "InvalidAge"
    UNSUPPORTED_STANDARD = "UnsupportedStandard"
    UNSUPPORTED_MEASUREMENT = "UnsupportedMeasurement"
    EMPTY_TABLE = "EmptyTable"
    INVALID_PERCENTILE_INPUT = "InvalidPercentileInput"
    INVALID_GENDER = "InvalidGender"
    INVALID_TABLE = "InvalidTable"


class GrowthStatsError(ValueError):
    """Base class for all engine errors."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidMeasurementError(GrowthStatsError):
    """Measurement value or LMS M/S parameter is not positive."""

    kind = ErrorKind.INVALID_MEASUREMENT


class InvalidAgeError(GrowthStatsError):
    """Age in months is negative."""

    kind = ErrorKind.INVALID_AGE


class UnsupportedStandardError(GrowthStatsError):
    """Growth standard other than WHO requested."""

    kind = ErrorKind.UNSUPPORTED_STANDARD


class UnsupportedMeasurementError(GrowthStatsError):
    """Measurement type without reference data (e.g. BMI)."""

    kind = ErrorKind.UNSUPPORTED_MEASUREMENT


class EmptyTableError(GrowthStatsError):
    """Reference table has no records."""

    kind = ErrorKind.EMPTY_TABLE


class InvalidPercentileInputError(GrowthStatsError):
    """Percentile outside the open interval (0, 100)."""

    kind = ErrorKind.INVALID_PERCENTILE_INPUT


class InvalidGenderError(GrowthStatsError):
    """Gender label that cannot be mapped to male/female."""

    kind = ErrorKind.INVALID_GENDER


class InvalidTableError(GrowthStatsError):
    """Reference table violates ordering or positivity invariants."""

    kind = ErrorKind.INVALID_TABLE
