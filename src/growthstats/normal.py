"""
Rational approximations of the standard normal distribution.

Forward CDF: Abramowitz and Stegun formula 26.2.17 (max error 7.5e-8).
Inverse CDF: Abramowitz and Stegun formula 26.2.23 (max error 4.5e-4), used
only for the fixed set of chart percentiles.
"""

import math

import numpy as np

from .config import (
    CDF_B,
    CDF_P,
    CDF_SATURATION_Z,
    INV_CDF_C,
    INV_CDF_D,
    PERCENTILE_ROUNDING,
)
from .exceptions import InvalidPercentileInputError
from .zscores import round_half_away, round_half_away_array

_SQRT_2PI = math.sqrt(2 * math.pi)


def normal_cdf(z: float) -> float:
    """Standard normal CDF; exactly 0 below z=-8 and exactly 1 above z=8."""
    if z < -CDF_SATURATION_Z:
        return 0.0
    if z > CDF_SATURATION_Z:
        return 1.0

    is_negative = z < 0
    abs_z = abs(z)
    b1, b2, b3, b4, b5 = CDF_B

    t = 1.0 / (1.0 + CDF_P * abs_z)
    t2 = t * t
    t3 = t2 * t
    t4 = t3 * t
    t5 = t4 * t

    pdf = math.exp(-0.5 * abs_z * abs_z) / _SQRT_2PI
    cdf = 1.0 - pdf * (b1 * t + b2 * t2 + b3 * t3 + b4 * t4 + b5 * t5)

    return 1.0 - cdf if is_negative else cdf


def zscore_to_percentile(z: float) -> float:
    """
    Convert a Z-score to a percentile (0-100) rounded to 1 decimal place.

    Monotonically non-decreasing in z, and zscore_to_percentile(z) +
    zscore_to_percentile(-z) is 100 up to rounding. A NaN z gives NaN, as in
    zscores_to_percentiles.
    """
    return round_half_away(normal_cdf(z) * 100, PERCENTILE_ROUNDING)


def zscores_to_percentiles(z: np.ndarray) -> np.ndarray:
    """Vectorised zscore_to_percentile; NaN stays NaN."""
    z = np.asarray(z, dtype=np.float64)
    b1, b2, b3, b4, b5 = CDF_B
    abs_z = np.abs(z)

    t = 1.0 / (1.0 + CDF_P * abs_z)
    t2 = t * t
    t3 = t2 * t
    t4 = t3 * t
    t5 = t4 * t

    pdf = np.exp(-0.5 * abs_z * abs_z) / _SQRT_2PI
    cdf = 1.0 - pdf * (b1 * t + b2 * t2 + b3 * t3 + b4 * t4 + b5 * t5)
    cdf = np.where(z < 0, 1.0 - cdf, cdf)
    cdf = np.where(z < -CDF_SATURATION_Z, 0.0, cdf)
    cdf = np.where(z > CDF_SATURATION_Z, 1.0, cdf)

    return round_half_away_array(cdf * 100, PERCENTILE_ROUNDING)


def percentile_to_zscore(percentile: float) -> float:
    """
    Convert a percentile in (0, 100) to a Z-score.

    Args:
        percentile: Percentile rank, exclusive of 0 and 100

    Returns:
        Z-score; exactly 0 for the 50th percentile

    Raises:
        InvalidPercentileInputError: If percentile <= 0 or >= 100
    """
    if math.isnan(percentile) or percentile <= 0 or percentile >= 100:
        raise InvalidPercentileInputError(
            f"Percentile must be between 0 and 100 exclusive: {percentile}"
        )

    p = percentile / 100
    if p == 0.5:
        return 0.0

    is_lower = p < 0.5
    p_adj = p if is_lower else 1 - p
    c0, c1, c2 = INV_CDF_C
    d1, d2, d3 = INV_CDF_D

    t = math.sqrt(-2.0 * math.log(p_adj))
    z = t - (c0 + c1 * t + c2 * t * t) / (1 + d1 * t + d2 * t * t + d3 * t * t * t)

    return -z if is_lower else z
