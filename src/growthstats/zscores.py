"""
Z-Score Calculation Utilities for Growth Measurements

This module implements the LMS (Box-Cox) transform between raw measurements
and Z-scores, for single values and for numpy arrays, together with the
inverse transform used to draw reference curves.
"""

import math
from typing import Sequence, Tuple

import numpy as np
from numba import jit

from .config import L_ZERO_THRESHOLD, MAX_Z_SCORE, MIN_Z_SCORE, Z_SCORE_ROUNDING
from .exceptions import EmptyTableError, InvalidMeasurementError
from .models import LMSRecord


def round_half_away(x: float, digits: int) -> float:
    """Round to `digits` decimals, halves away from zero."""
    if not math.isfinite(x):
        return x
    factor = 10.0**digits
    return math.copysign(math.floor(abs(x) * factor + 0.5), x) / factor + 0.0


def round_half_away_array(x: np.ndarray, digits: int) -> np.ndarray:
    """Vectorised round_half_away; NaN stays NaN."""
    factor = 10.0**digits
    return np.sign(x) * np.floor(np.abs(x) * factor + 0.5) / factor + 0.0


def calculate_zscore(value: float, lms: LMSRecord) -> float:
    """
    Calculate a Z-score from a measurement and its LMS parameters.

    Implements the LMS method from Cole (1990):

    For L ≠ 0: z = ((X/M)^L - 1) / (L * S)
    For L ≈ 0: z = ln(X/M) / S, used when |L| < 1e-10

    The result is clamped to [-3.5, 3.5] so that extreme measurements read as
    off the chart, then rounded to 2 decimals.

    Args:
        value: Measured value (kg or cm)
        lms: LMS parameters at the child's age

    Returns:
        Clamped, rounded Z-score

    Raises:
        InvalidMeasurementError: If value, M or S is not positive, or any
            input (L included) is NaN or infinite
    """
    finite = all(math.isfinite(v) for v in (value, lms.L, lms.M, lms.S))
    if not finite or value <= 0 or lms.M <= 0 or lms.S <= 0:
        raise InvalidMeasurementError(
            f"Invalid input: value={value}, L={lms.L}, M={lms.M}, S={lms.S}. "
            "All must be finite and value, M, S positive."
        )

    ratio = value / lms.M

    if abs(lms.L) < L_ZERO_THRESHOLD:
        raw_z = math.log(ratio) / lms.S
    else:
        raw_z = (ratio**lms.L - 1) / (lms.L * lms.S)

    clamped_z = max(MIN_Z_SCORE, min(MAX_Z_SCORE, raw_z))
    return round_half_away(clamped_z, Z_SCORE_ROUNDING)


def value_from_zscore(z: float, lms: LMSRecord) -> float:
    """
    Solve for the measurement at a Z-score (inverse LMS transform).

    value = M * (1 + L*S*z)^(1/L), or M * exp(S*z) when L ≈ 0.

    Returns 0.0 when 1 + L*S*z <= 0, where the transform has no real value
    for that extreme Z at this age.
    """
    if abs(lms.L) < L_ZERO_THRESHOLD:
        return lms.M * math.exp(lms.S * z)

    inner = 1 + lms.L * lms.S * z
    if inner <= 0:
        return 0.0
    return lms.M * inner ** (1 / lms.L)


@jit(nopython=True, cache=True)
def lms_zscore(
    X: np.ndarray, L: np.ndarray, M: np.ndarray, S: np.ndarray
) -> np.ndarray:
    """
    Raw (unclamped, unrounded) LMS Z-scores for 1-D arrays.

    Rows with a non-finite or non-positive X, a non-finite L, or a non-finite or
    non-positive M or S, are NaN.

    Args:
        X: Observed values
        L: Box-Cox power per row
        M: Median per row
        S: Coefficient of variation per row

    Returns:
        Z-scores, float64
    """
    n = X.shape[0]
    z = np.full(n, np.nan)
    for i in range(n):
        x = X[i]
        m = M[i]
        s = S[i]
        lam = L[i]
        if not (
            np.isfinite(x)
            and np.isfinite(m)
            and np.isfinite(s)
            and np.isfinite(lam)
            and x > 0.0
            and m > 0.0
            and s > 0.0
        ):
            continue
        ratio = x / m
        if abs(lam) < L_ZERO_THRESHOLD:
            z[i] = np.log(ratio) / s
        else:
            z[i] = (ratio**lam - 1.0) / (lam * s)
    return z


def interpolate_lms(
    agemos: np.ndarray, table: Sequence[LMSRecord]
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Vectorised counterpart of get_lms_for_age over one reference table.

    Ages are clamped to the table range and interpolated between bracketing
    records; NaN ages give NaN parameters.

    Args:
        agemos: Ages in months
        table: Age-ordered LMS records

    Returns:
        Tuple of (L, M, S) arrays matching the input shape
    """
    if len(table) == 0:
        raise EmptyTableError("LMS data array must not be empty")

    ref_ages = np.array([record.age for record in table], dtype=np.float64)
    ref_L = np.array([record.L for record in table], dtype=np.float64)
    ref_M = np.array([record.M for record in table], dtype=np.float64)
    ref_S = np.array([record.S for record in table], dtype=np.float64)

    ages = np.clip(np.asarray(agemos, dtype=np.float64), ref_ages[0], ref_ages[-1])

    if len(table) == 1:
        shape = ages.shape
        L_out = np.full(shape, ref_L[0])
        M_out = np.full(shape, ref_M[0])
        S_out = np.full(shape, ref_S[0])
    else:
        # Same bracketing rule as the scalar lookup: last record with age <= a
        lower = np.searchsorted(ref_ages, ages, side="right") - 1
        lower = np.clip(lower, 0, len(table) - 2)
        upper = lower + 1
        span = ref_ages[upper] - ref_ages[lower]
        safe_span = np.where(span > 0, span, 1.0)
        fraction = (ages - ref_ages[lower]) / safe_span

        L_out = ref_L[lower] + fraction * (ref_L[upper] - ref_L[lower])
        M_out = ref_M[lower] + fraction * (ref_M[upper] - ref_M[lower])
        S_out = ref_S[lower] + fraction * (ref_S[upper] - ref_S[lower])

        # Ages at or past the last record take it unmodified
        at_end = ages >= ref_ages[-1]
        L_out = np.where(at_end, ref_L[-1], L_out)
        M_out = np.where(at_end, ref_M[-1], M_out)
        S_out = np.where(at_end, ref_S[-1], S_out)

    nan_age = np.isnan(ages)
    L_out = np.where(nan_age, np.nan, L_out)
    M_out = np.where(nan_age, np.nan, M_out)
    S_out = np.where(nan_age, np.nan, S_out)
    return L_out, M_out, S_out


def calculate_zscores(
    X: np.ndarray, L: np.ndarray, M: np.ndarray, S: np.ndarray
) -> np.ndarray:
    """
    Clamped, rounded Z-scores for arrays, matching calculate_zscore per row.

    Invalid rows are NaN instead of raising, since each row is independent.
    """
    X = np.asarray(X, dtype=np.float64)
    original_shape = X.shape
    if X.size == 0:
        return np.full_like(X, np.nan)

    z = lms_zscore(
        X.ravel(),
        np.asarray(L, dtype=np.float64).ravel(),
        np.asarray(M, dtype=np.float64).ravel(),
        np.asarray(S, dtype=np.float64).ravel(),
    )
    z = np.clip(z, MIN_Z_SCORE, MAX_Z_SCORE)
    return round_half_away_array(z, Z_SCORE_ROUNDING).reshape(original_shape)
