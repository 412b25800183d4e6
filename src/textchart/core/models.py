"""Data models as dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

CHART_TYPES = ("sparkline",)
DEFAULT_CHART_HEIGHT = 1
SAMPLE_SIZE = 10  # rows inspected per column when classifying


@dataclass(frozen=True)
class Table:
    """Column-oriented table. All columns share the same length."""

    columns: dict[str, tuple[Any, ...]] = field(default_factory=dict)

    @property
    def column_names(self) -> list[str]:
        return list(self.columns)

    @property
    def row_count(self) -> int:
        for values in self.columns.values():
            return len(values)
        return 0

    def has_column(self, name: str) -> bool:
        return name in self.columns

    def column(self, name: str) -> tuple[Any, ...]:
        return self.columns[name]

    def rows(self) -> list[dict[str, Any]]:
        names = self.column_names
        return [
            {name: self.columns[name][i] for name in names}
            for i in range(self.row_count)
        ]


@dataclass
class ChartResult:
    type: str
    text: str
    data_columns: list[str]
    chart_height: int = DEFAULT_CHART_HEIGHT
    label_column: str | None = None
    labels: list[str] | None = None
