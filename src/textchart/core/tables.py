"""Tabular source: normalize raw input shapes into a column-oriented Table.

Accepted shapes:

    [1366, 1248, 319, 252]                      -> column "data"
    [["China", 1366], ["India", 1248]]          -> columns "column0", "column1"
    [{"country": "China", "pop": 1366}, ...]    -> columns named by the keys

An ibis table expression is materialized as-is.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

from textchart.core.errors import InvalidDataError
from textchart.core.models import Table


def _is_scalar(value: Any) -> bool:
    return value is None or isinstance(value, (int, float, Decimal, str, bool))


def _is_row(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def spec_field_names(spec: Mapping[str, Any] | None) -> list[str]:
    """Field names from a TableDef-style spec, ordered by their ``pos``."""
    if not spec:
        return []
    fields = spec.get("fields") or {}
    if not isinstance(fields, Mapping):
        raise InvalidDataError("spec 'fields' must be a mapping of name -> field definition")
    order = list(fields)
    for name in order:
        if fields[name] is not None and not isinstance(fields[name], Mapping):
            raise InvalidDataError(f"spec field '{name}' must be a mapping, e.g. {{\"pos\": 0}}")

    def sort_key(name: str) -> tuple[int, int]:
        pos = (fields[name] or {}).get("pos")
        return (pos if isinstance(pos, int) else len(order), order.index(name))

    return sorted(order, key=sort_key)


def _from_scalars(data: Sequence[Any], names: list[str]) -> Table:
    if len(names) > 1:
        raise InvalidDataError("spec for a flat list must define exactly one field")
    name = names[0] if names else "data"
    return Table({name: tuple(data)})


def _from_arrays(data: Sequence[Sequence[Any]], names: list[str]) -> Table:
    width = max((len(row) for row in data), default=0)
    width = max(width, len(names))
    cols: dict[str, tuple[Any, ...]] = {}
    for i in range(width):
        name = names[i] if i < len(names) else f"column{i}"
        cols[name] = tuple(row[i] if i < len(row) else None for row in data)
    return Table(cols)


def _from_records(data: Sequence[Mapping[str, Any]], names: list[str]) -> Table:
    keys: list[str] = list(names)
    for row in data:
        for key in row:
            if key not in keys:
                keys.append(key)
    return Table({key: tuple(row.get(key) for row in data) for key in keys})


def build_table(data: Any, spec: Mapping[str, Any] | None = None) -> Table:
    """Resolve raw chart data into a Table."""
    if isinstance(data, Table):
        return data

    if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
        from textchart.frames import is_frame, table_from_frame
        if is_frame(data):
            return table_from_frame(data)
        raise InvalidDataError(
            f"data must be a list of numbers, arrays or records, not {type(data).__name__}"
        )

    names = spec_field_names(spec)
    if all(_is_scalar(v) for v in data):
        return _from_scalars(data, names)
    if all(_is_row(v) for v in data):
        return _from_arrays(data, names)
    if all(isinstance(v, Mapping) for v in data):
        return _from_records(data, names)
    raise InvalidDataError(
        "data rows must all be numbers, all arrays, or all records (mixed shapes given)"
    )
