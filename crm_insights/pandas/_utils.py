"""Shared utilities for pandas conversion operations."""

from decimal import Decimal
from typing import Any

import pandas as pd  # type: ignore


def decimal_to_float(value: Decimal) -> float:
    """Convert Decimal to float for pandas compatibility."""
    return float(value)


def nan_to_none(value: Any) -> Any:
    """Map pandas missing markers (NaN, NaT, None) to None.

    Example:
        >>> nan_to_none(float("nan")) is None
        True
        >>> nan_to_none("champions")
        'champions'
    """
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return None
    return value
