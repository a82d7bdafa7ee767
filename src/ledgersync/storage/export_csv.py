"""Reading WeChat Pay bill exports.

An export starts with ``EXPORT_PREAMBLE_LINES`` lines of account summary text,
followed by a header row and the transaction rows. The header text is not
trusted; cells are mapped by position onto ``EXPORT_COLUMNS``. Rows of any
other width are rejected so a layout change fails loudly instead of shifting
values into the wrong fields.
"""

import csv
from itertools import islice
from pathlib import Path
from typing import Iterator

from ledgersync.domain import schema
from ledgersync.domain.errors import ValidationError, export_row_shape


def iter_export_rows(path: str | Path) -> Iterator[dict[str, str]]:
    """Yield export rows keyed by ``EXPORT_COLUMNS``.

    Raises:
        FileNotFoundError: If the export doesn't exist
        ValidationError: If a row doesn't have the expected number of columns
        csv.Error: If the file is not valid CSV
    """
    export_path = Path(path)
    expected = len(schema.EXPORT_COLUMNS)

    with open(export_path, "r", encoding="utf-8-sig", newline="") as f:
        # Skip physical lines; the preamble is not valid CSV
        for _ in islice(f, schema.EXPORT_PREAMBLE_LINES):
            pass

        reader = csv.reader(f)
        for cells in reader:
            line_num = schema.EXPORT_PREAMBLE_LINES + reader.line_num
            cells = [cell.strip() for cell in cells]
            if not any(cells):
                continue
            # Some exports end rows with a separator; drop only cells past the layout
            while len(cells) > expected and cells[-1] == "":
                cells.pop()
            if cells == schema.EXPORT_COLUMNS:
                continue
            if len(cells) != expected:
                raise ValidationError(
                    export_row_shape(export_path, line_num, expected, len(cells))
                )
            yield dict(zip(schema.EXPORT_COLUMNS, cells))


def read_export(path: str | Path) -> list[dict[str, str]]:
    """Read all export rows into memory."""
    return list(iter_export_rows(path))


def is_expense(row: dict[str, str]) -> bool:
    """Return True for rows that record money spent."""
    return bool(row.get(schema.TX_TIME)) and row.get(schema.DIRECTION) == schema.EXPENSE
