"""Exceptions raised while building a chart."""

from __future__ import annotations


class TextChartError(ValueError):
    pass


class MissingInputError(TextChartError):
    def __init__(self, message: str = "Please specify 'data'"):
        super().__init__(message)


class MissingTypeError(TextChartError):
    def __init__(self, message: str = "Please specify 'type'"):
        super().__init__(message)


class UnsupportedTypeError(TextChartError):
    def __init__(self, chart_type: str, supported: tuple[str, ...]):
        self.chart_type = chart_type
        super().__init__(
            f"Unsupported chart type '{chart_type}' (supported: {', '.join(supported)})"
        )


class NoNumericColumnError(TextChartError):
    def __init__(self, message: str = "No numeric column found in data"):
        super().__init__(message)


class NoLabelColumnError(TextChartError):
    def __init__(self, message: str = "No label (non-numeric) column found in data"):
        super().__init__(message)


class UnknownColumnError(TextChartError):
    def __init__(self, column: str, available: list[str]):
        self.column = column
        super().__init__(
            f"Unknown column '{column}' (available: {', '.join(available) or 'none'})"
        )


class InvalidDataError(TextChartError):
    pass


class ChartArgumentError(TextChartError):
    pass
