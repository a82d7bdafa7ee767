"""Utility functions for ledgersync."""

from ledgersync.utils.amount_parser import format_amount, parse_amount, to_cents
from ledgersync.utils.date_parser import (
    format_ledger_date,
    parse_export_timestamp,
    parse_ledger_date,
)

__all__ = [
    "parse_amount",
    "to_cents",
    "format_amount",
    "format_ledger_date",
    "parse_ledger_date",
    "parse_export_timestamp",
]
