"""JSON snapshot of the ledger for the dashboard."""

import json
from decimal import Decimal
from typing import Any, Iterable, Mapping


def _default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return f"{value:.2f}"
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def render_snapshot(rows: Iterable[Mapping[str, Any]]) -> str:
    """Render rows as a pretty-printed JSON array, keeping each row's own keys."""
    return json.dumps([dict(row) for row in rows], indent=2, ensure_ascii=False, default=_default)

