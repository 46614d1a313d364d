"""
Reference percentile curves for growth charts.
"""

import logging
import math
from typing import Dict, List, Optional

import pandas as pd

from .config import CURVE_VALUE_ROUNDING, STANDARD_PERCENTILES
from .interpolation import get_lms_for_age
from .models import CurvePoint, ReferenceCurve
from .normal import percentile_to_zscore
from .tables import ReferenceTableStore, select_dataset
from .zscores import round_half_away, value_from_zscore

logger = logging.getLogger(__name__)


def generate_reference_curve(
    measurement: str,
    gender: str,
    standard: str,
    max_age_months: float,
    store: Optional[ReferenceTableStore] = None,
) -> ReferenceCurve:
    """
    Generate the 3rd-97th percentile reference curves for chart rendering.

    One point per integer month from the table's first age up to
    min(max_age_months, table's last age). Every curve has the same age ticks.
    A point whose value is undefined for that percentile and age is 0.0.

    Args:
        measurement: 'weight', 'height' or 'headCircumference'
        gender: 'male' or 'female'
        standard: Growth standard, only 'who'
        max_age_months: Last month to include
        store: Alternative reference table store

    Returns:
        Mapping of percentile rank (3, 10, 25, 50, 75, 90, 97) to points

    Raises:
        UnsupportedMeasurementError: For BMI or an unknown measurement
        UnsupportedStandardError, InvalidGenderError: From dataset selection
    """
    table = select_dataset(measurement, gender, standard, store)

    min_age = math.ceil(table[0].age)
    max_age = min(max_age_months, table[-1].age)
    ages = range(min_age, math.floor(max_age) + 1) if max_age >= min_age else range(0)

    z_scores = {p: percentile_to_zscore(p) for p in STANDARD_PERCENTILES}
    result: Dict[int, List[CurvePoint]] = {p: [] for p in STANDARD_PERCENTILES}

    for age in ages:
        lms = get_lms_for_age(age, table)
        for p, z in z_scores.items():
            value = round_half_away(value_from_zscore(z, lms), CURVE_VALUE_ROUNDING)
            result[p].append(CurvePoint(age_months=age, value=value))

    logger.debug(
        f"Generated {measurement} curves for {gender}: {len(ages)} points per percentile"
    )
    return result


def reference_curve_frame(curve: ReferenceCurve) -> pd.DataFrame:
    """
    Reshape reference curves into a chart table.

    Returns:
        DataFrame indexed by 'age_months' with one column per percentile
        ('p3', 'p10', ..., 'p97')
    """
    columns = {
        f"p{p}": pd.Series(
            [point.value for point in points],
            index=[point.age_months for point in points],
            dtype="float64",
        )
        for p, points in sorted(curve.items())
    }
    frame = pd.DataFrame(columns)
    frame.index.name = "age_months"
    return frame
