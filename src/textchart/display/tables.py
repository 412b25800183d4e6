"""Rich formatters for the ingested table."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table as RichTable

from textchart.core.classify import is_number
from textchart.core.models import Table

console = Console()

PREVIEW_ROWS = 10


def display_table(table: Table, max_rows: int = PREVIEW_ROWS) -> None:
    """Print the first rows of a table, numeric cells right-aligned."""
    rt = RichTable(
        title=f"{len(table.column_names)} columns × {table.row_count} rows",
        border_style="dim",
    )
    for name in table.column_names:
        sample = table.column(name)[:max_rows]
        numeric = bool(sample) and all(is_number(v) for v in sample)
        rt.add_column(escape(name), justify="right" if numeric else "left",
                      style="cyan" if numeric else None)
    for row in table.rows()[:max_rows]:
        rt.add_row(*("" if v is None else escape(str(v)) for v in row.values()))
    if table.row_count > max_rows:
        rt.caption = f"… {table.row_count - max_rows} more rows"
    console.print(rt)

