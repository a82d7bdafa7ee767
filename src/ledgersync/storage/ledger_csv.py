"""Reading and writing the ledger CSV."""

import csv
import io
from pathlib import Path
from typing import Any, Iterable, Iterator, Mapping

from ledgersync.domain import schema
from ledgersync.domain.errors import ValidationError, missing_ledger_columns


def iter_ledger_rows(path: str | Path) -> Iterator[dict[str, str]]:
    """Yield ledger rows keyed by the file's own header.

    The generator reads the file lazily and can be consumed once.

    Raises:
        FileNotFoundError: If the ledger doesn't exist
        ValidationError: If the header is missing or lacks required columns
        csv.Error: If the file is not valid CSV
    """
    ledger_path = Path(path)
    with open(ledger_path, "r", encoding="utf-8-sig", newline="") as f:
        reader = csv.DictReader(f)

        columns = reader.fieldnames
        if not columns:
            raise ValidationError(f"Ledger {ledger_path.name} has no header row")
        missing = [c for c in schema.REQUIRED_LEDGER_COLUMNS if c not in columns]
        if missing:
            raise ValidationError(missing_ledger_columns(ledger_path, missing))

        for row in reader:
            # Short rows leave None values, overlong rows a None key
            yield {
                key: (value if value is not None else "")
                for key, value in row.items()
                if key is not None
            }


def read_ledger(path: str | Path) -> list[dict[str, str]]:
    """Read all ledger rows into memory."""
    return list(iter_ledger_rows(path))


def render_ledger(rows: Iterable[Mapping[str, Any]]) -> str:
    """Render rows as ledger CSV text projected onto ``LEDGER_COLUMNS``."""
    buffer = io.StringIO()
    writer = csv.DictWriter(
        buffer,
        fieldnames=schema.LEDGER_COLUMNS,
        extrasaction="ignore",
        restval="",
        quoting=csv.QUOTE_ALL,
        lineterminator="\n",
    )
    writer.writeheader()
    for row in rows:
        writer.writerow({column: _cell(row.get(column)) for column in schema.LEDGER_COLUMNS})
    return buffer.getvalue()


def _cell(value: Any) -> str:
    return "" if value is None else str(value)
