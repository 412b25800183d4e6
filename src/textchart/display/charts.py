"""Block-glyph sparklines, optionally spanning several text rows."""

from __future__ import annotations

from collections.abc import Sequence

from textchart.core.errors import ChartArgumentError

SPARK_CHARS = "▁▂▃▄▅▆▇█"
BLANK = " "


def render_sparkline(series: Sequence[float], height: int = 1) -> list[list[str]]:
    """Quantize a numeric series into a height x len(series) grid of glyphs.

    Each value is scaled to [0, height] between the series min and max. A row
    whose band the value fully clears gets the full block; the row the value
    ends in gets a partial glyph; rows above stay blank. Rows are returned
    top-first. A flat series (max == min) renders blank.
    """
    if height < 1:
        raise ChartArgumentError(f"chart height must be >= 1, got {height}")

    grid = [[BLANK] * len(series) for _ in range(height)]
    if not series:
        return grid
    lo = min(series)
    hi = max(series)
    if hi == lo:
        return grid

    heights = [(v - lo) / (hi - lo) * height for v in series]
    top = len(SPARK_CHARS) - 1
    for line, row in enumerate(grid, start=1):
        h1 = height - line
        for i, h in enumerate(heights):
            if h > h1 + 1:
                row[i] = SPARK_CHARS[top]
            elif h > h1:
                # round() is half-to-even
                row[i] = SPARK_CHARS[round((h - h1) * top)]
    return grid


def grid_to_text(grid: list[list[str]]) -> str:
    return "".join("".join(row) + "\n" for row in grid)


def sparkline(values: Sequence[float], height: int = 1) -> str:
    """Render a sparkline string from a list of numbers."""
    return grid_to_text(render_sparkline(values, height))
