"""Chart façade: resolve table and columns, render each data column."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from textchart.core.classify import (
    find_first_non_numeric_column, find_first_numeric_column,
    numeric_series,
)
from textchart.core.errors import (
    ChartArgumentError, MissingInputError, MissingTypeError,
    NoLabelColumnError, NoNumericColumnError, UnknownColumnError,
    UnsupportedTypeError,
)
from textchart.core.models import CHART_TYPES, DEFAULT_CHART_HEIGHT, ChartResult, Table
from textchart.core.tables import build_table
from textchart.display.charts import sparkline


def _check_height(chart_height: Any) -> int:
    if isinstance(chart_height, bool) or not isinstance(chart_height, int) or chart_height < 1:
        raise ChartArgumentError(f"chart_height must be a positive integer, got {chart_height!r}")
    return chart_height


def resolve_data_columns(table: Table, data_column: str | list[str] | None) -> list[str]:
    if data_column is None:
        col = find_first_numeric_column(table)
        if col is None:
            raise NoNumericColumnError()
        return [col]

    cols = [data_column] if isinstance(data_column, str) else list(data_column)
    if not cols:
        raise ChartArgumentError("data_column must name at least one column")
    for col in cols:
        if not table.has_column(col):
            raise UnknownColumnError(col, table.column_names)
    return cols


def resolve_label_column(table: Table, label_column: str | None,
                         data_columns: list[str]) -> str | None:
    if label_column is not None:
        if not table.has_column(label_column):
            raise UnknownColumnError(label_column, table.column_names)
        return label_column

    # Only non-data columns are label candidates
    candidates = Table({
        name: values for name, values in table.columns.items()
        if name not in data_columns
    })
    return find_first_non_numeric_column(candidates)


def _label_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_chart(
    data: Any = None,
    spec: Mapping[str, Any] | None = None,
    type: str | None = None,
    label_column: str | None = None,
    data_column: str | list[str] | None = None,
    chart_height: int = DEFAULT_CHART_HEIGHT,
    chart_width: int | None = None,
    show_data_label: bool = False,
) -> ChartResult:
    """Generate a text-based chart and the columns used to build it.

    chart_width is accepted but unused: series are never resampled, so the
    output is always as wide as the data.
    """
    if data is None:
        raise MissingInputError()
    if not type:
        raise MissingTypeError()
    if type not in CHART_TYPES:
        raise UnsupportedTypeError(type, CHART_TYPES)
    height = _check_height(chart_height)

    table = build_table(data, spec)
    data_cols = resolve_data_columns(table, data_column)
    label_col = resolve_label_column(table, label_column, data_cols)
    if label_col is None and show_data_label:
        raise NoLabelColumnError()

    buf = []
    for col in data_cols:
        buf.append(sparkline(numeric_series(table.column(col)), height))

    labels = None
    if label_col is not None:
        labels = [_label_text(v) for v in table.column(label_col)]

    return ChartResult(
        type=type,
        text="".join(buf),
        data_columns=data_cols,
        chart_height=height,
        label_column=label_col,
        labels=labels,
    )


def generate_chart(data: Any = None, **kwargs: Any) -> str:
    """Generate a text-based chart; returns the rendered text."""
    return build_chart(data, **kwargs).text
