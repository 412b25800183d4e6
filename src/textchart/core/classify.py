"""Column classification by sampling: numeric vs. non-numeric."""

from __future__ import annotations

import math
from collections.abc import Iterable
from decimal import Decimal
from itertools import islice
from typing import Any

from textchart.core.models import SAMPLE_SIZE, Table


def to_number(value: Any) -> float | None:
    """Return value as a float, or None if it doesn't look like a number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        try:
            return float(value)
        except OverflowError:
            # int beyond float range; still a number, numeric_series zeroes it
            return math.inf if value > 0 else -math.inf
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def is_number(value: Any) -> bool:
    return to_number(value) is not None


def _sample(values: Iterable[Any]) -> list[Any]:
    return list(islice(values, SAMPLE_SIZE))


def find_first_numeric_column(table: Table) -> str | None:
    """First column whose sampled values all parse as numbers.

    Missing values are skipped, but a column needs at least one sampled
    number unless it has no rows at all.
    """
    for name in table.column_names:
        present = [v for v in _sample(table.column(name)) if v is not None]
        if not present and table.row_count:
            continue
        if all(is_number(v) for v in present):
            return name
    return None


def find_first_non_numeric_column(table: Table) -> str | None:
    """First column with no numeric value among its samples (missing values allowed)."""
    for name in table.column_names:
        if not any(is_number(v) for v in _sample(table.column(name))):
            return name
    return None


def numeric_series(values: Iterable[Any]) -> list[float]:
    """Materialize a column as floats; missing, non-finite and non-numeric become 0."""
    series = []
    for v in values:
        n = to_number(v)
        series.append(n if n is not None and math.isfinite(n) else 0.0)
    return series
