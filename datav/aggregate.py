"""Reduce a series to a single value for stat panels."""

import math
from collections.abc import Callable
from typing import Any

from datav.models import SeriesData

CALC_LAST = "last"


def _valid(values: list[Any]) -> list[float]:
    """Drop invalid samples (None markers) and NaN samples."""
    return [v for v in values if v is not None and not math.isnan(v)]


def _average(values: list[Any]) -> float:
    valid = _valid(values)
    if not valid:
        return 0
    return sum(valid) / len(valid)


def _min(values: list[Any]) -> float | None:
    valid = _valid(values)
    return min(valid) if valid else None


def _max(values: list[Any]) -> float | None:
    valid = _valid(values)
    return max(valid) if valid else None


def _sum(values: list[Any]) -> float:
    return sum(_valid(values))


def _last(values: list[Any]) -> float | None:
    valid = _valid(values)
    return valid[-1] if valid else None


def _first(values: list[Any]) -> float | None:
    valid = _valid(values)
    return valid[0] if valid else None


def _count(values: list[Any]) -> int:
    # Invalid and NaN samples still count
    return len(values)


CALCULATIONS: dict[str, Callable[[list[Any]], Any]] = {
    "average": _average,
    "min": _min,
    "max": _max,
    "sum": _sum,
    "last": _last,
    "first": _first,
    "count": _count,
}


def get_supported_calcs() -> list[str]:
    """Get list of supported calculation modes."""
    return list(CALCULATIONS.keys())


def calc_value_on_series_data(series: SeriesData, calc: str | None = None) -> float | int | None:
    """
    Calculate a single value from a series' Value field.

    Args:
        series: Series to reduce
        calc: Calculation mode (average, min, max, sum, last, first, count).
            Absent or unknown modes fall back to "last".

    Returns:
        The calculated value. Invalid and NaN samples are skipped by every
        mode except count. min, max, first and last return None when the
        series has no valid samples.
    """
    calculation = CALCULATIONS.get(calc or CALC_LAST, _last)
    return calculation(series.value_field.values)
