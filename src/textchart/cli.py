"""CLI entry point — click group with shared input options and subcommand routing."""

from __future__ import annotations

import csv
import json
import sys
from typing import Any, NoReturn

import click
from rich.console import Console
from rich.markup import escape

from textchart.core.errors import TextChartError
from textchart.core.models import CHART_TYPES, DEFAULT_CHART_HEIGHT
from textchart.frames import EXPORT_FORMATS

err_console = Console(stderr=True)

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "auto_envvar_prefix": "TEXTCHART",
}


class TextchartContext:
    """Shared context passed to all commands."""

    def __init__(self, data: Any, spec: dict | None, verbose: bool,
                 json_output: bool = False):
        self.data = data
        self.spec = spec
        self.verbose = verbose
        self.json_output = json_output

    def log(self, message: str) -> None:
        if self.verbose:
            err_console.print(f"[dim]{message}[/]")


class TextchartGroup(click.Group):
    """Custom group that allows `textchart <input>` as well as `textchart <cmd> <input>`."""

    def parse_args(self, ctx, args):
        # Anything that isn't a subcommand or a help flag goes to the default chart command
        if args and args[0] not in self.commands and args[0] not in ("-h", "--help"):
            args = ["chart"] + args
        return super().parse_args(ctx, args)


def fail(message: str) -> NoReturn:
    err_console.print(f"[red]Error:[/] {escape(message)}")
    sys.exit(1)


def _read_csv(stream) -> list[dict[str, Any]]:
    # Empty cells are missing values, not empty strings
    return [
        {key: (value if value != "" else None) for key, value in row.items()}
        for row in csv.DictReader(stream)
    ]


def _read_input(stream, as_csv: bool) -> Any:
    try:
        if as_csv:
            try:
                return _read_csv(stream)
            except csv.Error as e:
                fail(f"Invalid CSV input: {e}")
        try:
            return json.load(stream)
        except json.JSONDecodeError as e:
            fail(f"Invalid JSON input: {e}")
    except UnicodeDecodeError as e:
        fail(f"Input is not valid UTF-8: {e}")


def _parse_spec(spec: str | None) -> dict | None:
    if not spec:
        return None
    try:
        parsed = json.loads(spec)
    except json.JSONDecodeError as e:
        fail(f"Invalid --spec JSON: {e}")
    if not isinstance(parsed, dict):
        fail("--spec must be a JSON object")
    return parsed


def _input_options(f):
    """Common input options decorator."""
    f = click.argument("input", type=click.File("r", encoding="utf-8"), default="-")(f)
    f = click.option("--csv", "as_csv", is_flag=True, help="Parse INPUT as CSV with a header row")(f)
    f = click.option("--spec", help="Table spec as JSON, e.g. '{\"fields\": {\"name\": {\"pos\": 0}}}'")(f)
    f = click.option("--verbose", "-v", is_flag=True, help="Verbose output")(f)
    return f


def _make_context(input, as_csv, spec, verbose, json_output=False) -> TextchartContext:
    data = _read_input(input, as_csv)
    return TextchartContext(data, _parse_spec(spec), verbose, json_output)


@click.group(cls=TextchartGroup, context_settings=CONTEXT_SETTINGS)
def main():
    """Text-based charts from tabular data.

    \b
    Usage:
      textchart <input>                 Sparkline of the first numeric column (default)
      textchart chart <input> [opts]    Same, with explicit command
      textchart table <input> [opts]    Preview or export the ingested table

    INPUT is a JSON file (or CSV with --csv); use - for stdin.
    """
    pass


@main.command("chart")
@_input_options
@click.option("--type", "-t", "chart_type", default="sparkline", show_default=True,
              type=click.Choice(CHART_TYPES), help="Chart type")
@click.option("--data-column", "-c", multiple=True, help="Column(s) to plot (repeatable)")
@click.option("--label-column", "-L", help="Column holding data labels")
@click.option("--height", "-H", default=DEFAULT_CHART_HEIGHT, show_default=True,
              type=click.IntRange(min=1), help="Chart height in text rows")
@click.option("--width", "-W", type=click.IntRange(min=1),
              help="Chart width (reserved, currently ignored)")
@click.option("--show-label", is_flag=True, help="Require a label column")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
def chart_cmd(input, as_csv, spec, verbose, chart_type, data_column, label_column,
              height, width, show_label, json_output):
    """Render a chart (default)."""
    ctx = _make_context(input, as_csv, spec, verbose, json_output)
    from textchart.commands.chart import run_chart
    try:
        run_chart(ctx, chart_type=chart_type, data_column=list(data_column) or None,
                  label_column=label_column, chart_height=height,
                  chart_width=width, show_data_label=show_label)
    except TextChartError as e:
        fail(str(e))


@main.command("table")
@_input_options
@click.option("--export", "export_fmt", type=click.Choice(EXPORT_FORMATS),
              help="Export the table through ibis instead of previewing it")
@click.option("--rows", "-n", "max_rows", default=10, show_default=True,
              type=click.IntRange(min=1), help="Rows to preview")
def table_cmd(input, as_csv, spec, verbose, export_fmt, max_rows):
    """Preview the ingested table and its column classification."""
    ctx = _make_context(input, as_csv, spec, verbose)
    from textchart.commands.table import run_table
    try:
        run_table(ctx, export_fmt=export_fmt, max_rows=max_rows)
    except TextChartError as e:
        fail(str(e))
