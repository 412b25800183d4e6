"""Convert chart tables to and from ibis memtables.

Tables can be materialized to any backend:

    table_frame(build_table(data)).to_polars()
    build_table(ibis.memtable({"x": [1, 2, 3]}))
"""

from __future__ import annotations

import sys
from typing import Any

import ibis

from textchart.core.errors import ChartArgumentError
from textchart.core.models import Table

EXPORT_FORMATS = ("csv", "parquet")


def is_frame(obj: Any) -> bool:
    return isinstance(obj, ibis.Table)


def table_frame(table: Table) -> ibis.Table:
    """Create a memtable from a Table's columns."""
    return ibis.memtable({name: list(values) for name, values in table.columns.items()})


def table_from_frame(expr: ibis.Table) -> Table:
    """Execute an ibis table expression into a Table, keeping column order."""
    data = expr.to_pyarrow().to_pydict()
    return Table({name: tuple(data[name]) for name in expr.columns})


def export_table(frame: ibis.Table, fmt: str, name: str = "table") -> None:
    """Export an ibis table to stdout (csv) or a file (parquet)."""
    if fmt == "csv":
        frame.to_pandas().to_csv(sys.stdout, index=False)
    elif fmt == "parquet":
        path = f"{name}.parquet"
        frame.to_pandas().to_parquet(path)
        sys.stderr.write(f"Wrote {path}\n")
    else:
        raise ChartArgumentError(
            f"Unknown export format '{fmt}' (expected one of: {', '.join(EXPORT_FORMATS)})"
        )
