"""
Reference table store and dataset selection.

Tables are supplied once per (measurement, gender, age sub-range), checked for
ordering and positivity, and concatenated into one age-ordered tuple per
(measurement, gender). Selection afterwards is a dictionary lookup that always
returns the same tuple object.
"""

import logging
import math
from typing import Dict, Iterable, Mapping, Optional, Sequence, Tuple

from .config import BMI, GENDERS, MEASUREMENTS, WHO_STANDARD
from .data.who_standards import WHO_SUBTABLES
from .exceptions import (
    EmptyTableError,
    InvalidGenderError,
    InvalidTableError,
    UnsupportedMeasurementError,
    UnsupportedStandardError,
)
from .models import LMSRecord

logger = logging.getLogger(__name__)

ReferenceTable = Tuple[LMSRecord, ...]


def validate_table(
    table: Sequence[LMSRecord], name: str = "table", strict: bool = True
) -> None:
    """
    Check the invariants every reference table must satisfy.

    Args:
        table: Age-ordered LMS records
        name: Label used in error messages
        strict: Require strictly increasing ages. Concatenated tables are
            checked with strict=False since two studies may share a boundary age.

    Raises:
        EmptyTableError: If the table has no records
        InvalidTableError: If ages are out of order, any L/M/S is not finite,
            or any M/S is not positive
    """
    if len(table) == 0:
        raise EmptyTableError(f"Reference table '{name}' must not be empty")

    for i, record in enumerate(table):
        if not all(math.isfinite(v) for v in (record.L, record.M, record.S)):
            raise InvalidTableError(
                f"Reference table '{name}' has non-finite L, M or S at age {record.age}"
            )
        if record.M <= 0 or record.S <= 0:
            raise InvalidTableError(
                f"Reference table '{name}' has non-positive M or S at age {record.age}"
            )
        if i == 0:
            continue
        previous = table[i - 1].age
        if record.age < previous or (strict and record.age == previous):
            raise InvalidTableError(
                f"Reference table '{name}' ages must be increasing "
                f"(age {record.age} follows {previous})"
            )


class ReferenceTableStore:
    """
    Immutable lookup of concatenated reference tables for one growth standard.

    Usage:
        store = ReferenceTableStore.from_subtables({("weight", "male"): (t0_60, t5_18)})
        table = store.get("weight", "male")
    """

    def __init__(self, standard: str, tables: Mapping[Tuple[str, str], ReferenceTable]):
        self.standard = standard
        self._tables: Dict[Tuple[str, str], ReferenceTable] = dict(tables)

    @classmethod
    def from_subtables(
        cls,
        subtables: Mapping[Tuple[str, str], Iterable[Sequence[LMSRecord]]],
        standard: str = WHO_STANDARD,
    ) -> "ReferenceTableStore":
        """
        Build a store by concatenating sub-range tables in the order given.

        Each sub-table and each concatenation is validated; a sub-range boundary
        where two studies meet is kept exactly as supplied.

        Raises:
            EmptyTableError: If any sub-table is empty
            InvalidTableError: If any table violates ordering or positivity
        """
        tables: Dict[Tuple[str, str], ReferenceTable] = {}
        for (measurement, gender), parts in subtables.items():
            name = f"{standard}:{measurement}:{gender}"
            combined = []
            for part in parts:
                validate_table(part, name)
                combined.extend(part)
            validate_table(combined, name, strict=False)
            tables[(measurement, gender)] = tuple(combined)
            logger.debug(
                f"Registered {name} with {len(combined)} records "
                f"({combined[0].age}-{combined[-1].age} months)"
            )
        return cls(standard, tables)

    def get(self, measurement: str, gender: str) -> ReferenceTable:
        """Return the concatenated table for a measurement and gender."""
        try:
            return self._tables[(measurement, gender)]
        except KeyError:
            raise UnsupportedMeasurementError(
                f"No {self.standard} reference data for {measurement} ({gender})"
            ) from None

    def keys(self) -> Tuple[Tuple[str, str], ...]:
        return tuple(self._tables)


WHO_STORE = ReferenceTableStore.from_subtables(WHO_SUBTABLES)


def select_dataset(
    measurement: str,
    gender: str,
    standard: str = WHO_STANDARD,
    store: Optional[ReferenceTableStore] = None,
) -> ReferenceTable:
    """
    Select the reference table for a measurement, gender and growth standard.

    Weight and height combine the 0-60 month and 5-18 year tables into one
    table covering 0-216 months. Head circumference covers 0-60 months only.

    Args:
        measurement: 'weight', 'height', 'headCircumference' or 'bmi'
        gender: 'male' or 'female'
        standard: Growth standard; only 'who' is available
        store: Alternative table store (defaults to the embedded WHO tables)

    Returns:
        Age-ordered tuple of LMS records (the same object on every call)

    Raises:
        UnsupportedStandardError: If standard is not 'who'
        UnsupportedMeasurementError: For BMI or an unknown measurement
        InvalidGenderError: If gender is not 'male' or 'female'
    """
    if standard != WHO_STANDARD:
        raise UnsupportedStandardError(
            f'Growth standard "{standard}" is not yet supported. Only "who" is available.'
        )

    if measurement == BMI:
        raise UnsupportedMeasurementError(
            "BMI-for-age data is not yet available in this implementation."
        )

    if measurement not in MEASUREMENTS:
        raise UnsupportedMeasurementError(
            f"Unknown measurement '{measurement}'. Supported: {list(MEASUREMENTS[:-1])}"
        )

    if gender not in GENDERS:
        raise InvalidGenderError(f"Gender must be 'male' or 'female', got {gender!r}")

    return (store or WHO_STORE).get(measurement, gender)
