"""Domain model entities for ledgersync.

Existing ledger rows travel through the pipeline as plain mappings so that
their original field spellings survive into the JSON snapshot. Only freshly
imported transactions are built as entities and then flattened with
``to_row``.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import NamedTuple, Optional

from ledgersync.domain import schema
from ledgersync.utils.amount_parser import format_amount


@dataclass(frozen=True)
class TransactionRecord:
    """A single ledger transaction."""

    product: str
    quantity: str
    purchase_date: str
    amount: Decimal
    category: str
    note: str
    platform: str

    def to_row(self) -> dict[str, str]:
        """Return the record keyed by ledger column names."""
        return {
            schema.PRODUCT: self.product,
            schema.QUANTITY: self.quantity,
            schema.PURCHASE_DATE: self.purchase_date,
            schema.AMOUNT: format_amount(self.amount),
            schema.CATEGORY: self.category,
            schema.NOTE: self.note,
            schema.PLATFORM: self.platform,
        }


@dataclass(frozen=True)
class ClassificationRule:
    """Keyword rule assigning category, product and platform."""

    keywords: tuple[str, ...]
    category: str
    product: str
    platform: Optional[str] = None

    def matches(self, merchant: str) -> bool:
        """Return True if any keyword occurs in the merchant text."""
        return any(keyword in merchant for keyword in self.keywords)


class Classification(NamedTuple):
    """Outcome of classifying one merchant."""

    category: str
    product: str
    platform: str
