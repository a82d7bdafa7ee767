"""Ledger reconciliation domain service."""

import logging
from pathlib import Path
from typing import Any, Optional, Sequence

from ledgersync.config import LedgerConfig
from ledgersync.domain import schema
from ledgersync.domain.classifier import classify, load_rules
from ledgersync.domain.entities import ClassificationRule, TransactionRecord
from ledgersync.domain.errors import ValidationError
from ledgersync.domain.fingerprint import fingerprint, seed_fingerprints
from ledgersync.domain.merge import merge, sort_by_purchase_date
from ledgersync.storage.export_csv import is_expense, read_export
from ledgersync.storage.ledger_csv import read_ledger, render_ledger
from ledgersync.storage.files import atomic_write_text
from ledgersync.storage.locator import find_exports, find_ledger
from ledgersync.storage.snapshot import render_snapshot
from ledgersync.utils.amount_parser import parse_amount, to_cents
from ledgersync.utils.date_parser import format_ledger_date, parse_export_timestamp


class ReconcileService:
    """Service for merging bill exports into the household ledger."""

    def __init__(self, config: LedgerConfig, log: Optional[logging.Logger] = None):
        """Initialize reconcile service.

        Args:
            config: Run configuration
            log: Run logger; defaults to a logger with no output configured
        """
        self.config = config
        self.log = log or logging.getLogger("ledgersync.run")

    def build_record(
        self, row: dict[str, str], rules: Sequence[ClassificationRule]
    ) -> TransactionRecord:
        """Turn an expense row from an export into a classified ledger record.

        Raises:
            ValidationError: If the amount or transaction time cannot be parsed
        """
        try:
            amount = to_cents(parse_amount(row[schema.TX_AMOUNT]))
            purchase_date = format_ledger_date(parse_export_timestamp(row[schema.TX_TIME]))
        except ValueError as e:
            raise ValidationError(str(e)) from e

        merchant = row.get(schema.COUNTERPARTY, "")
        category, product, platform = classify(
            rules, merchant, default_product=row.get(schema.ITEM) or schema.UNKNOWN_PRODUCT
        )
        return TransactionRecord(
            product=product,
            quantity="",
            purchase_date=purchase_date,
            amount=amount,
            category=category,
            note=merchant,
            platform=platform,
        )

    def collect_new(
        self,
        export_files: Sequence[Path],
        rules: Sequence[ClassificationRule],
        known: set[str],
    ) -> tuple[list[TransactionRecord], int]:
        """Read exports and keep expense rows whose fingerprint is unknown.

        ``known`` is extended with every accepted record, so a transaction that
        appears in several exports is only added once.

        Returns:
            Tuple of (new records in import order, number of duplicates skipped)
        """
        new_records: list[TransactionRecord] = []
        skipped = 0

        for export_file in export_files:
            rows = read_export(export_file)
            added = 0
            for row in rows:
                if not is_expense(row):
                    continue
                record = self.build_record(row, rules)
                key = fingerprint(record.purchase_date, record.amount, record.note)
                if key in known:
                    skipped += 1
                    continue
                known.add(key)
                new_records.append(record)
                added += 1
            self.log.info("- Processed %s: %d rows, %d new", export_file.name, len(rows), added)

        return new_records, skipped

    def run(self) -> dict[str, Any]:
        """Run one reconciliation.

        Returns:
            Dict with run statistics:
            - ledger: path of the ledger file
            - exports: number of export files processed
            - added: number of new transactions
            - skipped: number of duplicates skipped
            - ledger_rewritten: whether the ledger file was replaced
            - total: number of records in the snapshot

        Raises:
            NotFoundError: If there is no ledger
            ConflictError: If more than one file could be the ledger
            ValidationError: If the rules, the ledger or an export is malformed
            OSError: If a file cannot be read or written
        """
        config = self.config
        ledger_path = find_ledger(config.work_dir, config.ledger_prefix, config.extension)
        self.log.info("- Found main ledger file: %s", ledger_path.name)

        rules = load_rules(config.rules_path)
        self.log.info("- Loaded %d rules from %s", len(rules), config.rules_path.name)

        existing = read_ledger(ledger_path)
        known = seed_fingerprints(existing)
        self.log.info("- Read %d existing records", len(existing))

        export_files = find_exports(config.work_dir, config.export_prefix, config.extension)
        result: dict[str, Any] = {
            "ledger": ledger_path,
            "exports": len(export_files),
            "added": 0,
            "skipped": 0,
            "ledger_rewritten": False,
            "total": len(existing),
        }

        if not export_files:
            self.log.info("- No export files found; refreshing snapshot only")
            self._write_snapshot_only(existing)
            return result

        new_records, skipped = self.collect_new(export_files, rules, known)
        result["skipped"] = skipped

        if not new_records:
            self.log.info("- No new transactions; %d duplicates skipped", skipped)
            self._write_snapshot_only(existing)
            return result

        combined = sort_by_purchase_date(
            merge(existing, [record.to_row() for record in new_records])
        )

        # Render both outputs before touching either file
        ledger_text = render_ledger(combined)
        snapshot_text = render_snapshot(combined)

        atomic_write_text(ledger_path, ledger_text)
        self.log.info("- Overwrote %s with sorted data.", ledger_path.name)
        atomic_write_text(config.output_path, snapshot_text)
        self.log.info(
            "- Generated %s with %d total records.", config.output_path.name, len(combined)
        )

        result.update(added=len(new_records), ledger_rewritten=True, total=len(combined))
        return result

    def _write_snapshot_only(self, existing: list[dict[str, str]]) -> None:
        atomic_write_text(self.config.output_path, render_snapshot(existing))
        self.log.info(
            "- Generated %s with %d total records.", self.config.output_path.name, len(existing)
        )
