"""Inspect the ingested table: preview, classification, export."""

from __future__ import annotations

from rich.markup import escape

from textchart.cli import TextchartContext
from textchart.core.classify import find_first_non_numeric_column, find_first_numeric_column
from textchart.core.tables import build_table
from textchart.display.tables import console, display_table


def run_table(ctx: TextchartContext, export_fmt: str | None = None, max_rows: int = 10) -> None:
    table = build_table(ctx.data, ctx.spec)
    ctx.log(f"columns: {', '.join(table.column_names) or '-'} ({table.row_count} rows)")

    if export_fmt:
        from textchart.frames import export_table, table_frame
        export_table(table_frame(table), export_fmt)
        return

    display_table(table, max_rows=max_rows)
    numeric = find_first_numeric_column(table)
    label = find_first_non_numeric_column(table)
    console.print(f"  [bold]data column[/]   {escape(numeric) if numeric else '[dim]none[/]'}")
    console.print(f"  [bold]label column[/]  {escape(label) if label else '[dim]none[/]'}")
