"""Combining and ordering ledger rows."""

from typing import Any, Mapping, Sequence

from ledgersync.domain import schema
from ledgersync.domain.errors import ValidationError
from ledgersync.utils.date_parser import parse_ledger_date

Row = Mapping[str, Any]


def merge(existing: Sequence[Row], incoming: Sequence[Row]) -> list[Row]:
    """Concatenate existing rows and new rows.

    Uniqueness is not re-checked here; incoming rows were already deduplicated
    against the ledger's fingerprints.
    """
    return [*existing, *incoming]


def sort_by_purchase_date(rows: Sequence[Row]) -> list[Row]:
    """Order rows by purchase date, oldest first.

    Rows on the same date keep their position in ``rows``: existing ledger rows
    first, then new rows in the order they were imported. The stored date text
    is not modified.

    Raises:
        ValidationError: If a row's purchase date cannot be parsed
    """
    keyed = []
    for position, row in enumerate(rows):
        try:
            purchase_date = parse_ledger_date(row.get(schema.PURCHASE_DATE))
        except ValueError as e:
            raise ValidationError(f"Record {position + 1}: {e}") from e
        keyed.append(((purchase_date, position), row))

    keyed.sort(key=lambda item: item[0])
    return [row for _, row in keyed]
