import math

import numpy as np
import pytest
from hypothesis import given, strategies as st, settings

from growthstats.config import L_ZERO_THRESHOLD
from growthstats.exceptions import ErrorKind, InvalidMeasurementError
from growthstats.models import LMSRecord
from growthstats.zscores import (
    calculate_zscore,
    calculate_zscores,
    interpolate_lms,
    lms_zscore,
    round_half_away,
    value_from_zscore,
)


def test_tc001_zscore_at_median(standard_lms: LMSRecord) -> None:
    """Value equal to M gives Z = 0"""
    assert calculate_zscore(standard_lms.M, standard_lms) == 0.0


def test_tc002_zscore_sign(standard_lms: LMSRecord) -> None:
    """Above median is positive, below median negative"""
    assert calculate_zscore(12.0, standard_lms) > 0
    assert calculate_zscore(8.0, standard_lms) < 0


def test_tc003_zscore_known_value(standard_lms: LMSRecord) -> None:
    """Box-Cox formula for L != 0"""
    ratio = 11 / standard_lms.M
    expected = (ratio**standard_lms.L - 1) / (standard_lms.L * standard_lms.S)
    assert calculate_zscore(11, standard_lms) == pytest.approx(expected, abs=0.005)


def test_tc004_zscore_log_branch_exact_zero() -> None:
    """L = 0 uses ln(X/M) / S"""
    lms = LMSRecord(age=6, L=0.0, M=67.6236, S=0.03168)
    expected = math.log(70.0 / lms.M) / lms.S
    assert calculate_zscore(70.0, lms) == pytest.approx(expected, abs=0.005)


def test_tc005_zscore_log_branch_near_zero() -> None:
    """|L| below the threshold also uses the log formula"""
    lms = LMSRecord(age=6, L=1e-12, M=67.6236, S=0.03168)
    expected = math.log(70.0 / lms.M) / lms.S
    assert calculate_zscore(70.0, lms) == pytest.approx(expected, abs=0.005)


def test_tc006_zscore_clamps_high(standard_lms: LMSRecord) -> None:
    """Extreme high measurement clamps to exactly 3.5"""
    assert calculate_zscore(50, standard_lms) == 3.5


def test_tc007_zscore_clamps_low(standard_lms: LMSRecord) -> None:
    """Extreme low measurement clamps to exactly -3.5"""
    assert calculate_zscore(2, standard_lms) == -3.5


def test_tc008_zscore_rounded_to_two_decimals(standard_lms: LMSRecord) -> None:
    """Z-score carries at most 2 decimals"""
    z = calculate_zscore(10.5, standard_lms)
    assert z == round(z, 2)


@pytest.mark.parametrize(
    "value, lms",
    [
        (0, LMSRecord(age=0, L=1, M=10, S=0.1)),
        (-1, LMSRecord(age=0, L=1, M=10, S=0.1)),
        (float("nan"), LMSRecord(age=0, L=1, M=10, S=0.1)),
        (5, LMSRecord(age=0, L=1, M=0, S=0.1)),
        (5, LMSRecord(age=0, L=1, M=10, S=0)),
        (5, LMSRecord(age=0, L=1, M=10, S=-0.1)),
        (5, LMSRecord(age=0, L=1, M=float("nan"), S=0.1)),
        (5, LMSRecord(age=0, L=1, M=10, S=float("nan"))),
        (5, LMSRecord(age=0, L=float("nan"), M=10, S=0.1)),
        (5, LMSRecord(age=0, L=1, M=float("inf"), S=0.1)),
    ],
)
def test_tc009_zscore_invalid_inputs(value: float, lms: LMSRecord) -> None:
    """Non-positive or non-finite inputs raise InvalidMeasurement"""
    with pytest.raises(InvalidMeasurementError, match="Invalid input") as exc_info:
        calculate_zscore(value, lms)
    assert exc_info.value.kind == ErrorKind.INVALID_MEASUREMENT


def test_tc010_zscore_negative_L() -> None:
    """Negative L at the median still gives 0"""
    lms = LMSRecord(age=24, L=-0.107, M=12.1515, S=0.10415)
    assert calculate_zscore(12.1515, lms) == pytest.approx(0, abs=0.01)


def test_tc011_round_half_away() -> None:
    """Halves round away from zero, negative zero is normalised"""
    assert round_half_away(2.5, 0) == 3.0
    assert round_half_away(-2.5, 0) == -3.0
    assert round_half_away(0.125, 2) == 0.13
    assert math.copysign(1.0, round_half_away(-0.001, 2)) == 1.0


def test_tc012_value_from_zscore_inverts_zscore(standard_lms: LMSRecord) -> None:
    """Inverse transform recovers the median and round-trips a Z-score"""
    assert value_from_zscore(0.0, standard_lms) == pytest.approx(standard_lms.M)
    value = value_from_zscore(1.25, standard_lms)
    assert calculate_zscore(value, standard_lms) == pytest.approx(1.25, abs=0.01)


def test_tc013_value_from_zscore_log_branch() -> None:
    """L = 0 uses M * exp(S * z)"""
    lms = LMSRecord(age=0, L=0.0, M=10.0, S=0.1)
    assert value_from_zscore(2.0, lms) == pytest.approx(10.0 * math.exp(0.2))


def test_tc014_value_from_zscore_out_of_domain() -> None:
    """1 + L*S*z <= 0 gives the 0.0 sentinel"""
    lms = LMSRecord(age=0, L=1.0, M=10.0, S=0.5)
    assert value_from_zscore(-3.0, lms) == 0.0
    assert value_from_zscore(-2.0, lms) == 0.0


@settings(max_examples=100, deadline=None)
@given(
    L=st.floats(min_value=-2, max_value=2),
    M=st.floats(min_value=0.1, max_value=200),
    S=st.floats(min_value=0.01, max_value=0.5),
)
def test_tc015_hypothesis_median_is_zero(L: float, M: float, S: float) -> None:
    """For any valid LMS, the median maps to Z ≈ 0"""
    lms = LMSRecord(age=0, L=L, M=M, S=S)
    assert abs(calculate_zscore(M, lms)) <= 0.01


@settings(max_examples=100, deadline=None)
@given(
    value=st.floats(min_value=0.01, max_value=1000),
    L=st.floats(min_value=-2, max_value=2),
    M=st.floats(min_value=0.1, max_value=200),
    S=st.floats(min_value=0.01, max_value=0.5),
)
def test_tc016_hypothesis_zscore_bounds(
    value: float, L: float, M: float, S: float
) -> None:
    """Z-scores always lie in [-3.5, 3.5]"""
    z = calculate_zscore(value, LMSRecord(age=0, L=L, M=M, S=S))
    assert -3.5 <= z <= 3.5


def test_tc017_lms_zscore_matches_formula() -> None:
    """Vectorised kernel matches the scalar formula for both branches"""
    X = np.array([17.9, 18.0, 70.0])
    L = np.array([0.5, 0.0001, 0.0])
    M = np.array([18.0, 18.0, 67.6236])
    S = np.array([0.1, 0.1, 0.03168])
    z = lms_zscore(X, L, M, S)
    assert np.isclose(z[0], ((17.9 / 18.0) ** 0.5 - 1) / (0.5 * 0.1), atol=1e-9)
    assert np.isclose(z[1], 0.0, atol=1e-9)
    assert np.isclose(z[2], math.log(70.0 / 67.6236) / 0.03168, atol=1e-9)


def test_tc018_lms_zscore_invalid_rows_nan() -> None:
    """Non-positive or missing values and non-positive M/S give NaN"""
    X = np.array([-1.0, np.nan, 5.0, 5.0, np.inf])
    L = np.full(5, 1.0)
    M = np.array([10.0, 10.0, 0.0, 10.0, 10.0])
    S = np.array([0.1, 0.1, 0.1, 0.0, 0.1])
    assert np.all(np.isnan(lms_zscore(X, L, M, S)))


def test_tc026_lms_zscore_non_finite_parameters_nan() -> None:
    """NaN or infinite L, M or S give NaN rather than a clamped score"""
    X = np.full(4, 5.0)
    L = np.array([1.0, 1.0, np.nan, 1.0])
    M = np.array([np.nan, 10.0, 10.0, np.inf])
    S = np.array([0.1, np.nan, 0.1, 0.1])
    assert np.all(np.isnan(lms_zscore(X, L, M, S)))
    assert np.all(np.isnan(calculate_zscores(X, L, M, S)))


def test_tc027_round_half_away_non_finite() -> None:
    """NaN and infinities pass through rounding unchanged"""
    assert math.isnan(round_half_away(float("nan"), 2))
    assert round_half_away(float("inf"), 1) == float("inf")


def test_tc019_calculate_zscores_matches_scalar(standard_lms: LMSRecord) -> None:
    """Array path clamps and rounds like calculate_zscore"""
    values = np.array([2.0, 8.0, 9.871, 10.5, 12.0, 50.0])
    n = len(values)
    z = calculate_zscores(
        values,
        np.full(n, standard_lms.L),
        np.full(n, standard_lms.M),
        np.full(n, standard_lms.S),
    )
    expected = [calculate_zscore(v, standard_lms) for v in values]
    np.testing.assert_allclose(z, expected, atol=0.011)
    assert z[0] == -3.5
    assert z[-1] == 3.5


def test_tc020_calculate_zscores_empty() -> None:
    """Empty input gives empty output"""
    z = calculate_zscores(np.array([]), np.array([]), np.array([]), np.array([]))
    assert z.shape == (0,)


def test_tc021_calculate_zscores_2d_shape(standard_lms: LMSRecord) -> None:
    """Shape is preserved for 2-D input"""
    values = np.array([[9.0, 10.0], [11.0, 12.0]])
    z = calculate_zscores(
        values,
        np.full(values.shape, standard_lms.L),
        np.full(values.shape, standard_lms.M),
        np.full(values.shape, standard_lms.S),
    )
    assert z.shape == (2, 2)


def test_tc022_interpolate_lms_matches_scalar_lookup(sample_table) -> None:
    """Vectorised lookup agrees with get_lms_for_age, including clamping"""
    from growthstats.interpolation import get_lms_for_age

    ages = np.array([-1.0, 0.0, 1.5, 4.0, 6.0, 18.0, 24.0, 36.0])
    L, M, S = interpolate_lms(ages, sample_table)
    for i, age in enumerate(ages):
        record = get_lms_for_age(age, sample_table)
        assert L[i] == pytest.approx(record.L, abs=1e-12)
        assert M[i] == pytest.approx(record.M, abs=1e-12)
        assert S[i] == pytest.approx(record.S, abs=1e-12)


def test_tc023_interpolate_lms_nan_age(sample_table) -> None:
    """Missing ages give NaN parameters"""
    L, M, S = interpolate_lms(np.array([np.nan, 3.0]), sample_table)
    assert np.isnan(L[0]) and np.isnan(M[0]) and np.isnan(S[0])
    assert M[1] == pytest.approx(6.3762)


def test_tc024_interpolate_lms_single_record() -> None:
    """A one-record table always returns that record"""
    table = (LMSRecord(age=10, L=1, M=50, S=0.05),)
    L, M, S = interpolate_lms(np.array([0.0, 10.0, 20.0]), table)
    assert np.all(M == 50) and np.all(L == 1) and np.all(S == 0.05)


def test_tc025_l_zero_threshold_constant() -> None:
    """Log branch threshold"""
    assert L_ZERO_THRESHOLD == 1e-10
