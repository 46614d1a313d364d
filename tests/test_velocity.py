from datetime import date

import pytest
from pydantic import ValidationError

from growthstats.models import WeightObservation
from growthstats.velocity import weight_velocity


def _obs(day: date, kg: float) -> WeightObservation:
    return WeightObservation(measured_on=day, weight_kg=kg)


def test_tc601_small_child_per_kg() -> None:
    """Under 10 kg the rate is reported per kg of body weight"""
    velocity = weight_velocity([_obs(date(2024, 1, 1), 4.0), _obs(date(2024, 1, 11), 4.3)])
    assert velocity.unit == "g/kg/day"
    assert velocity.value == 7.5


def test_tc602_larger_child_per_day() -> None:
    """From 10 kg the rate is grams per day"""
    velocity = weight_velocity([_obs(date(2024, 3, 1), 12.0), _obs(date(2024, 3, 11), 12.5)])
    assert velocity.unit == "g/day"
    assert velocity.value == 50.0


def test_tc603_uses_two_latest_in_any_order() -> None:
    """Observations are sorted by date before picking the last two"""
    observations = [
        _obs(date(2024, 2, 1), 5.0),
        _obs(date(2024, 1, 1), 4.0),
        _obs(date(2024, 1, 21), 4.6),
    ]
    velocity = weight_velocity(observations)
    # 400 g over 11 days at 4.6 kg
    assert velocity.value == pytest.approx(round(400 / 11 / 4.6, 1))


def test_tc604_weight_loss_is_negative() -> None:
    """Losing weight gives a negative velocity"""
    velocity = weight_velocity([_obs(date(2024, 1, 1), 15.0), _obs(date(2024, 1, 5), 14.8)])
    assert velocity.value == -50.0


def test_tc605_not_enough_observations() -> None:
    """Fewer than two weighings give None"""
    assert weight_velocity([]) is None
    assert weight_velocity([_obs(date(2024, 1, 1), 4.0)]) is None


def test_tc606_same_day_gives_none() -> None:
    """Two weighings on the same date give None"""
    assert (
        weight_velocity([_obs(date(2024, 1, 1), 4.0), _obs(date(2024, 1, 1), 4.1)]) is None
    )


def test_tc607_observation_requires_positive_weight() -> None:
    """Observations reject zero or negative weights"""
    with pytest.raises(ValidationError):
        WeightObservation(measured_on=date(2024, 1, 1), weight_kg=0)
