"""
Immutable value objects exchanged with callers.
"""

from datetime import date
from typing import Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictInt


Measurement = Literal["weight", "height", "headCircumference", "bmi"]
Gender = Literal["male", "female"]
PercentileBand = Literal["normal", "watch", "alert"]


class LMSRecord(BaseModel):
    """
    One calibration point of a reference distribution.

    Attributes:
        age: Age in months
        L: Box-Cox power (any real, including 0 and negatives)
        M: Median
        S: Coefficient of variation
    """

    model_config = ConfigDict(frozen=True)

    age: float = Field(ge=0)
    L: float
    M: float
    S: float


class GrowthPercentileResult(BaseModel):
    """Percentile and Z-score for a single measurement, echoing its inputs."""

    model_config = ConfigDict(frozen=True)

    measurement: Measurement
    value: float
    percentile: float = Field(ge=0, le=100)
    z_score: float = Field(ge=-3.5, le=3.5)
    age_in_months: float
    gender: Gender
    standard: str


class CurvePoint(BaseModel):
    """A single point on a reference percentile curve."""

    model_config = ConfigDict(frozen=True)

    age_months: StrictInt
    value: float


# Percentile rank -> points, one per integer month
ReferenceCurve = Dict[int, List[CurvePoint]]


class WeightObservation(BaseModel):
    """A dated weight measurement in kilograms."""

    model_config = ConfigDict(frozen=True)

    measured_on: date
    weight_kg: float = Field(gt=0)


class WeightVelocity(BaseModel):
    """Weight gain rate between the two most recent observations."""

    model_config = ConfigDict(frozen=True)

    value: float
    unit: Literal["g/day", "g/kg/day"]
