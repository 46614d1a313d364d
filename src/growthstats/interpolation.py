"""
LMS parameter lookup by age.
"""

import logging
from bisect import bisect_right
from typing import Sequence

from .exceptions import EmptyTableError
from .models import LMSRecord

logger = logging.getLogger(__name__)


def get_lms_for_age(age_months: float, table: Sequence[LMSRecord]) -> LMSRecord:
    """
    Get LMS parameters for an age by linear interpolation between the two
    bracketing table records.

    Ages at or below the first record return the first record, ages at or above
    the last record return the last record, both unmodified. Interpolated
    records carry the requested age rather than a table age.

    Args:
        age_months: Age in months
        table: Age-ordered LMS records

    Returns:
        LMS parameters at the requested age

    Raises:
        EmptyTableError: If the table has no records
    """
    if len(table) == 0:
        raise EmptyTableError("LMS data array must not be empty")

    first = table[0]
    if age_months <= first.age:
        return first

    last = table[-1]
    if age_months >= last.age:
        if age_months > last.age:
            logger.debug(
                f"Age {age_months} months beyond reference range, using {last.age} months"
            )
        return last

    # lower.age <= age_months < upper.age; a repeated boundary age resolves to the later table
    upper_index = bisect_right(table, age_months, key=lambda record: record.age)
    lower = table[upper_index - 1]
    upper = table[upper_index]
    fraction = (age_months - lower.age) / (upper.age - lower.age)

    return LMSRecord(
        age=age_months,
        L=lower.L + fraction * (upper.L - lower.L),
        M=lower.M + fraction * (upper.M - lower.M),
        S=lower.S + fraction * (upper.S - lower.S),
    )
