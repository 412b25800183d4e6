"""Render a chart from the context's data."""

from __future__ import annotations

import click

from textchart.cli import TextchartContext
from textchart.core.chart import build_chart
from textchart.display.json_out import print_json


def run_chart(ctx: TextchartContext, **options) -> None:
    result = build_chart(ctx.data, spec=ctx.spec, type=options.pop("chart_type"), **options)

    ctx.log(f"data column(s): {', '.join(result.data_columns)}")
    ctx.log(f"label column: {result.label_column or '-'}")
    ctx.log(f"height: {result.chart_height}")

    if ctx.json_output:
        print_json(result)
    else:
        click.echo(result.text, nl=False)
