"""
Weight gain velocity between the two most recent weighings.
"""

from typing import Optional, Sequence

from .config import SMALL_CHILD_WEIGHT_KG
from .models import WeightObservation, WeightVelocity
from .zscores import round_half_away


def weight_velocity(
    observations: Sequence[WeightObservation],
) -> Optional[WeightVelocity]:
    """
    Calculate weight velocity from the latest two observations by date.

    Children under 10 kg at the earlier weighing are reported in g/kg/day,
    everyone else in g/day, rounded to 1 decimal.

    Parameters
    ----------
    observations : Sequence[WeightObservation]
        Dated weights in kg, in any order

    Returns
    -------
    WeightVelocity or None
        None when there are fewer than two observations or the two latest
        share a date
    """
    if len(observations) < 2:
        return None

    ordered = sorted(observations, key=lambda obs: obs.measured_on)
    previous, latest = ordered[-2], ordered[-1]

    days = (latest.measured_on - previous.measured_on).days
    if days <= 0:
        return None

    weight_diff_g = (latest.weight_kg - previous.weight_kg) * 1000

    if previous.weight_kg < SMALL_CHILD_WEIGHT_KG:
        per_kg = weight_diff_g / days / previous.weight_kg
        return WeightVelocity(value=round_half_away(per_kg, 1), unit="g/kg/day")

    return WeightVelocity(value=round_half_away(weight_diff_g / days, 1), unit="g/day")
