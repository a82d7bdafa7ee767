"""Keyword-rule classification of new transactions."""

import json
from pathlib import Path
from typing import Any, Optional, Sequence

from ledgersync.domain import schema
from ledgersync.domain.entities import Classification, ClassificationRule
from ledgersync.domain.errors import ValidationError, invalid_rule


def parse_rule(index: int, raw: Any) -> ClassificationRule:
    """Build a rule from one element of the rules document.

    Raises:
        ValidationError: If the element is malformed
    """
    if not isinstance(raw, dict):
        raise ValidationError(invalid_rule(index, "expected an object"))

    keyword = raw.get("keyword")
    if isinstance(keyword, str):
        keywords = (keyword,)
    elif isinstance(keyword, list) and all(isinstance(k, str) for k in keyword):
        keywords = tuple(keyword)
    else:
        raise ValidationError(
            invalid_rule(index, "'keyword' must be a string or a list of strings")
        )
    # An empty keyword would match every merchant
    if not keywords or not all(keywords):
        raise ValidationError(invalid_rule(index, "'keyword' must not be empty"))

    for field in ("category", "product"):
        if not isinstance(raw.get(field), str):
            raise ValidationError(invalid_rule(index, f"'{field}' must be a string"))

    platform = raw.get("platform")
    if platform is not None and not isinstance(platform, str):
        raise ValidationError(invalid_rule(index, "'platform' must be a string"))

    return ClassificationRule(
        keywords=keywords,
        category=raw["category"],
        product=raw["product"],
        platform=platform or None,
    )


def load_rules(path: str | Path) -> list[ClassificationRule]:
    """Load classification rules from a JSON file.

    Args:
        path: Path to the rules file

    Returns:
        Rules in declaration order

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValidationError: If the file is not a valid rules document
    """
    rules_path = Path(path)
    with open(rules_path, "r", encoding="utf-8-sig") as f:
        try:
            document = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Rules file {rules_path.name} is not valid JSON: {e}") from e

    if not isinstance(document, list):
        raise ValidationError(f"Rules file {rules_path.name} must contain a JSON array")

    return [parse_rule(index, raw) for index, raw in enumerate(document)]


def find_rule(
    rules: Sequence[ClassificationRule], merchant: str
) -> Optional[ClassificationRule]:
    """Return the first rule matching the merchant, or None."""
    merchant = merchant or ""
    for rule in rules:
        if rule.matches(merchant):
            return rule
    return None


def classify(
    rules: Sequence[ClassificationRule],
    merchant: str,
    default_product: str = schema.UNKNOWN_PRODUCT,
) -> Classification:
    """Classify a merchant with the first matching rule.

    Args:
        rules: Rules in priority order
        merchant: Counterparty text, also stored as the record's note
        default_product: Product label kept when no rule matches

    Returns:
        Category, product and platform for the transaction
    """
    rule = find_rule(rules, merchant)
    if rule is not None:
        return Classification(
            category=rule.category,
            product=rule.product,
            platform=rule.platform or schema.OFFLINE,
        )
    return Classification(
        category=schema.UNCATEGORIZED,
        product=default_product or schema.UNKNOWN_PRODUCT,
        platform=schema.OFFLINE,
    )
