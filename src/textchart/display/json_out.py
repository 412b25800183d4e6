"""JSON serialization for --json flag."""

from __future__ import annotations

import dataclasses
import json
from typing import Any

from rich.console import Console

console = Console()


class _Encoder(json.JSONEncoder):
    def default(self, obj: Any) -> Any:
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            return dataclasses.asdict(obj)
        return super().default(obj)


def to_json(data: Any) -> str:
    return json.dumps(data, cls=_Encoder, indent=2, ensure_ascii=False)


def print_json(data: Any) -> None:
    """Print data as formatted JSON to stdout."""
    console.print_json(to_json(data))
