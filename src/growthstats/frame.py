"""
DataFrame scoring of anthropometric measurements.

Appends Z-score and percentile columns to a table of visits, one pair per
measurement column, using the vectorised percentile pipeline.
"""

from typing import Dict, List, Optional

import numpy as np
import pandas as pd
from pydantic import BaseModel, ValidationError, field_validator

from .config import HEAD_CIRCUMFERENCE, HEIGHT, WEIGHT, WHO_STANDARD
from .percentile import compute_growth_percentiles, resolve_gender
from .tables import ReferenceTableStore

# Column-to-measurement mapping
COLUMN_MEASUREMENT_MAPPING = {
    "weight_kg": WEIGHT,
    "height_cm": HEIGHT,
    "head_circ_cm": HEAD_CIRCUMFERENCE,
}


class FrameConfig(BaseModel):
    """
    Configuration for DataFrame scoring.

    Attributes:
        age_col (str): Column holding age in months ('age' by default)
        sex_col (str): Column holding gender labels ('sex' by default). Any label
            accepted by resolve_gender, e.g. 'M', 'female', '女性'.
        standard (str): Growth standard ('who')
    """

    age_col: str = "age"
    sex_col: str = "sex"
    standard: str = WHO_STANDARD

    @field_validator("age_col", "sex_col")
    @classmethod
    def validate_column_names(cls, v: str) -> str:
        """Ensure column names are non-empty strings."""
        if not isinstance(v, str) or not v.strip():
            raise ValueError("Column name must be a non-empty string")
        return v


class GrowthFrameScorer:
    """
    Scores growth measurements held in a DataFrame.

    Usage:
        scorer = GrowthFrameScorer(age_col="age_months", sex_col="gender")
        scored = scorer.score(df, ["weight_kg", "height_cm"])
        scored["weight_kg_pct"]

    Rows with missing or non-positive values, negative ages or a missing sex
    get NaN scores; unrecognised sex labels raise.

    Attributes:
        config (FrameConfig): Column mapping and growth standard
    """

    def __init__(
        self,
        age_col: str = "age",
        sex_col: str = "sex",
        standard: str = WHO_STANDARD,
        store: Optional[ReferenceTableStore] = None,
    ):
        """
        Initialize with column mappings.

        Raises:
            ValueError: If configuration is invalid
        """
        try:
            self.config = FrameConfig(age_col=age_col, sex_col=sex_col, standard=standard)
        except ValidationError as e:
            raise ValueError(f"Invalid configuration: {e}") from e

        if self.config.age_col == self.config.sex_col:
            raise ValueError("Configuration must specify unique column names")
        self.store = store

    def score(self, df: pd.DataFrame, columns: List[str]) -> pd.DataFrame:
        """
        Return a copy of df with '<column>_z' and '<column>_pct' added per column.

        Args:
            df: Visits with age, sex and measurement columns
            columns: Measurement columns to score ('weight_kg', 'height_cm', 'head_circ_cm')

        Returns:
            New DataFrame; the input is not modified

        Raises:
            ValueError: If a column is missing or unsupported
            InvalidGenderError: If a sex label cannot be resolved
        """
        self._validate_column(df, self.config.age_col)
        self._validate_column(df, self.config.sex_col)
        for col in columns:
            if col not in COLUMN_MEASUREMENT_MAPPING:
                supported = list(COLUMN_MEASUREMENT_MAPPING.keys())
                raise ValueError(
                    f"Unsupported column '{col}' for growth scoring. "
                    f"Supported columns: {supported}"
                )
            self._validate_column(df, col)

        genders = self._resolve_genders(df[self.config.sex_col])
        agemos = pd.to_numeric(df[self.config.age_col], errors="coerce").to_numpy(
            dtype=np.float64
        )

        scored = df.copy()
        for col in columns:
            measurement = COLUMN_MEASUREMENT_MAPPING[col]
            values = pd.to_numeric(df[col], errors="coerce").to_numpy(dtype=np.float64)
            z = np.full(len(df), np.nan)
            pct = np.full(len(df), np.nan)

            for gender in ("male", "female"):
                mask = (genders == gender).to_numpy()
                if not mask.any():
                    continue
                result = compute_growth_percentiles(
                    measurement,
                    values[mask],
                    agemos[mask],
                    gender,
                    self.config.standard,
                    self.store,
                )
                z[mask] = result["z_score"]
                pct[mask] = result["percentile"]

            scored[f"{col}_z"] = pd.Series(z, index=df.index)
            scored[f"{col}_pct"] = pd.Series(pct, index=df.index)

        return scored

    @staticmethod
    def _resolve_genders(labels: pd.Series) -> pd.Series:
        """Map raw sex labels to 'male'/'female', keeping missing labels as None."""
        resolved: Dict[object, Optional[str]] = {}
        for label in labels.dropna().unique():
            resolved[label] = resolve_gender(str(label))
        return labels.map(lambda label: resolved.get(label) if pd.notna(label) else None)

    @staticmethod
    def _validate_column(df: pd.DataFrame, column: str) -> None:
        """
        Validate that a column exists in the DataFrame.

        Raises:
            ValueError: If column does not exist.
        """
        if column not in df.columns:
            raise ValueError(f"Column '{column}' does not exist in DataFrame")
