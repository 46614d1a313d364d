"""
Growth percentile computation for single measurements and batches.
"""

import logging
import math
from typing import Dict, Optional

import numpy as np

from .config import (
    HEAD_CIRCUMFERENCE,
    HEIGHT,
    NORMAL_BAND,
    SUSPECT_HEAD_CIRC_CM,
    SUSPECT_HEIGHT_CM,
    SUSPECT_MAX_AGE_MONTHS,
    SUSPECT_WEIGHT_KG,
    WATCH_BAND,
    WEIGHT,
    WHO_STANDARD,
)
from .exceptions import InvalidAgeError, InvalidGenderError, InvalidMeasurementError
from .interpolation import get_lms_for_age
from .models import Gender, GrowthPercentileResult, PercentileBand
from .normal import zscore_to_percentile, zscores_to_percentiles
from .tables import ReferenceTableStore, select_dataset
from .zscores import calculate_zscore, calculate_zscores, interpolate_lms

logger = logging.getLogger(__name__)

_GENDER_LABELS: Dict[str, Gender] = {
    "male": "male",
    "m": "male",
    "boy": "male",
    "男性": "male",
    "female": "female",
    "f": "female",
    "girl": "female",
    "女性": "female",
}


def resolve_gender(label: str) -> Gender:
    """
    Map a host gender label to 'male' or 'female'.

    Accepts English labels case-insensitively ('M', 'Female', ...) and the
    Japanese labels 男性 / 女性.

    Raises:
        InvalidGenderError: If the label is not recognised
    """
    key = label.strip().lower() if isinstance(label, str) else label
    try:
        return _GENDER_LABELS[key]
    except (KeyError, TypeError):
        raise InvalidGenderError(f"Unrecognised gender label: {label!r}") from None


def classify_percentile(percentile: float) -> PercentileBand:
    """
    Band a percentile for display.

    - normal: 25th to 75th inclusive
    - watch: 10th to <25th, or >75th to 90th
    - alert: below the 10th or above the 90th
    """
    if NORMAL_BAND[0] <= percentile <= NORMAL_BAND[1]:
        return "normal"
    if WATCH_BAND[0] <= percentile <= WATCH_BAND[1]:
        return "watch"
    return "alert"


def compute_growth_percentile(
    measurement: str,
    value: float,
    age_months: float,
    gender: str,
    standard: str = WHO_STANDARD,
    store: Optional[ReferenceTableStore] = None,
) -> GrowthPercentileResult:
    """
    Compute the growth percentile and Z-score for a single measurement.

    Args:
        measurement: 'weight', 'height' or 'headCircumference'
        value: Measured value (kg or cm)
        age_months: Age in months
        gender: 'male' or 'female'
        standard: Growth standard, defaults to 'who'
        store: Alternative reference table store

    Returns:
        GrowthPercentileResult echoing the inputs with percentile and z_score

    Raises:
        InvalidMeasurementError: If value <= 0
        InvalidAgeError: If age_months < 0
        UnsupportedStandardError, UnsupportedMeasurementError, InvalidGenderError:
            From dataset selection
    """
    if not math.isfinite(value) or value <= 0:
        raise InvalidMeasurementError(f"Measurement value must be positive: {value}")
    if math.isnan(age_months) or age_months < 0:
        raise InvalidAgeError(f"Age in months must be non-negative: {age_months}")

    table = select_dataset(measurement, gender, standard, store)
    lms = get_lms_for_age(age_months, table)
    z_score = calculate_zscore(value, lms)
    percentile = zscore_to_percentile(z_score)

    return GrowthPercentileResult(
        measurement=measurement,
        value=value,
        percentile=percentile,
        z_score=z_score,
        age_in_months=age_months,
        gender=gender,
        standard=standard,
    )


def _log_unit_warnings(measurement: str, values: np.ndarray, agemos: np.ndarray) -> None:
    """Log warnings for potential unit mismatches."""
    finite_values = values[np.isfinite(values)]
    finite_ages = agemos[np.isfinite(agemos)]

    if finite_values.size:
        if measurement == WEIGHT and np.nanmax(finite_values) > SUSPECT_WEIGHT_KG:
            logger.warning(
                f"Weight values >{SUSPECT_WEIGHT_KG:g} kg detected - may be lbs or g instead of kg"
            )
        elif measurement == HEIGHT and np.nanmax(finite_values) > SUSPECT_HEIGHT_CM:
            logger.warning(
                f"Height values >{SUSPECT_HEIGHT_CM:g} cm detected - may be mm instead of cm"
            )
        elif (
            measurement == HEAD_CIRCUMFERENCE
            and np.nanmax(finite_values) > SUSPECT_HEAD_CIRC_CM
        ):
            logger.warning(
                f"Head circumference values >{SUSPECT_HEAD_CIRC_CM:g} cm detected - may be mm instead of cm"
            )

    if finite_ages.size and np.nanmax(finite_ages) > SUSPECT_MAX_AGE_MONTHS:
        logger.warning(
            f"Age values >{SUSPECT_MAX_AGE_MONTHS:g} months detected - ages may be in days"
        )


def compute_growth_percentiles(
    measurement: str,
    values: np.ndarray,
    agemos: np.ndarray,
    gender: str,
    standard: str = WHO_STANDARD,
    store: Optional[ReferenceTableStore] = None,
) -> Dict[str, np.ndarray]:
    """
    Vectorised growth percentiles for many measurements of one gender.

    Rows with a non-positive or missing value, or a negative or missing age,
    are NaN in both outputs. Table selection errors (standard, measurement,
    gender) still raise, since they apply to the whole batch.

    Args:
        measurement: 'weight', 'height' or 'headCircumference'
        values: Measured values
        agemos: Ages in months, same shape as values
        gender: 'male' or 'female'
        standard: Growth standard, defaults to 'who'
        store: Alternative reference table store

    Returns:
        Dict with 'z_score' and 'percentile' arrays matching the input shape
    """
    values = np.asarray(values, dtype=np.float64)
    agemos = np.asarray(agemos, dtype=np.float64)
    if values.shape != agemos.shape:
        raise ValueError(
            f"values and agemos must have the same shape, got {values.shape} and {agemos.shape}"
        )

    table = select_dataset(measurement, gender, standard, store)
    if values.size == 0:
        return {"z_score": np.full_like(values, np.nan), "percentile": np.full_like(values, np.nan)}

    _log_unit_warnings(measurement, values.ravel(), agemos.ravel())

    invalid_age = ~(agemos >= 0)
    L, M, S = interpolate_lms(agemos, table)
    z = calculate_zscores(values, L, M, S)
    z = np.where(invalid_age, np.nan, z)

    return {"z_score": z, "percentile": zscores_to_percentiles(z)}
