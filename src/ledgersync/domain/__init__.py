"""Domain layer for ledgersync application.

``ReconcileService`` lives in ``ledgersync.domain.reconcile`` and is not
re-exported here; it depends on the storage layer, which itself imports
``ledgersync.domain.schema``.
"""

from ledgersync.domain.classifier import classify, load_rules
from ledgersync.domain.fingerprint import fingerprint, seed_fingerprints
from ledgersync.domain.merge import merge, sort_by_purchase_date

__all__ = [
    "classify",
    "load_rules",
    "fingerprint",
    "seed_fingerprints",
    "merge",
    "sort_by_purchase_date",
]
