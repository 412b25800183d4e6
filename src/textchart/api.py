"""Public Python API.

Usage:
    import textchart.api as tc

    tc.gen_text_chart(data=[1, 5, 3, 9, 2], type="sparkline")
    # ' ▅▃█▂\\n'

    result = tc.chart(data=[{"name": "a", "value": 1}, ...], type="sparkline")
    result.data_columns, result.label_column

    tc.frame([["China", 1366], ["India", 1248]]).to_polars()
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import ibis

from textchart.core.chart import build_chart, generate_chart
from textchart.core.models import ChartResult
from textchart.core.tables import build_table


def gen_text_chart(**kwargs: Any) -> str:
    """Generate text-based chart."""
    return generate_chart(**kwargs)


def chart(**kwargs: Any) -> ChartResult:
    """Generate a chart along with the resolved data/label columns."""
    return build_chart(**kwargs)


def frame(data: Any, spec: Mapping[str, Any] | None = None) -> ibis.Table:
    """Chart data as an ibis memtable."""
    from textchart.frames import table_frame
    return table_frame(build_table(data, spec))
