"""File layer for ledgersync: locating, reading and writing ledger files."""

from ledgersync.storage.export_csv import iter_export_rows, read_export
from ledgersync.storage.files import atomic_write_text
from ledgersync.storage.ledger_csv import iter_ledger_rows, read_ledger, render_ledger
from ledgersync.storage.locator import find_exports, find_ledger
from ledgersync.storage.snapshot import render_snapshot

__all__ = [
    "find_ledger",
    "find_exports",
    "iter_ledger_rows",
    "read_ledger",
    "render_ledger",
    "iter_export_rows",
    "read_export",
    "render_snapshot",
    "atomic_write_text",
]
