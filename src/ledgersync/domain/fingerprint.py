"""Deduplication keys for ledger transactions.

A transaction is identified by its date, absolute amount and merchant
keyword. Keys are compared as plain strings.
"""

import re
from decimal import Decimal
from typing import Any, Iterable, Mapping

from ledgersync.domain import schema
from ledgersync.domain.errors import ValidationError
from ledgersync.utils.amount_parser import format_amount, parse_amount

SEPARATOR = "|"

_PAREN = re.compile(r"[(（]")


def merchant_keyword(merchant: str | None) -> str:
    """Return the merchant text before the first ASCII or full-width parenthesis.

    Providers append branch names in parentheses ("CoffeeShop(Downtown)"), which
    must not change the key.
    """
    if not merchant:
        return ""
    return _PAREN.split(merchant, maxsplit=1)[0].strip()


def normalize_date(date_str: str | None) -> str:
    """Reduce a ledger date to ``Y-M-D`` without zero padding.

    ``2024年3月1日``, ``2024-03-01`` and ``2024/3/1`` all become ``2024-3-1``.
    Anything that does not split into three integers is returned stripped but
    otherwise as-is.
    """
    if not date_str:
        return ""
    cleaned = re.sub("[年月/.]", "-", date_str).replace("日", "").strip()
    parts = cleaned.split("-")
    if len(parts) == 3 and all(part.strip().isdigit() for part in parts):
        return "-".join(str(int(part)) for part in parts)
    return cleaned


def normalize_amount(amount: Any) -> str:
    """Return the absolute amount with two decimals, e.g. ``"50.00"``.

    Raises:
        ValidationError: If the amount cannot be parsed
    """
    if isinstance(amount, Decimal):
        return format_amount(amount)
    try:
        return format_amount(parse_amount(amount))
    except ValueError as e:
        raise ValidationError(str(e)) from e


def fingerprint(date: str | None, amount: Any, merchant: str | None) -> str:
    """Return the dedup key for a transaction."""
    return SEPARATOR.join(
        (normalize_date(date), normalize_amount(amount), merchant_keyword(merchant))
    )


def row_merchant(row: Mapping[str, Any]) -> str:
    """Return the merchant of an existing ledger row, trying each known column."""
    for column in schema.LEDGER_MERCHANT_COLUMNS:
        value = row.get(column)
        if value:
            return value
    return ""


def seed_fingerprints(rows: Iterable[Mapping[str, Any]]) -> set[str]:
    """Build the set of keys already present in the ledger."""
    return {
        fingerprint(row.get(schema.PURCHASE_DATE), row.get(schema.AMOUNT), row_merchant(row))
        for row in rows
    }
