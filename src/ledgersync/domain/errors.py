"""Shared domain error messages and error types."""

from pathlib import Path
from typing import Iterable


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested file or directory does not exist."""


class ConflictError(DomainError):
    """Ambiguous input, such as more than one candidate ledger."""


def directory_not_found(directory: Path) -> str:
    """Return message for a missing working directory."""
    return f"Directory '{directory}' not found"


def ledger_not_found(directory: Path, prefix: str) -> str:
    """Return message when no ledger file matches."""
    return f"No main ledger file found starting with \"{prefix}\" in {directory}"


def ambiguous_ledger(prefix: str, candidates: Iterable[str]) -> str:
    """Return message when more than one ledger file matches."""
    return (
        f"Multiple ledger files found ({', '.join(candidates)}). "
        f"Please keep only one file starting with \"{prefix}\"."
    )


def missing_ledger_columns(path: Path, missing: Iterable[str]) -> str:
    """Return message for a ledger header lacking required columns."""
    return f"Ledger {path.name} missing required columns: {', '.join(missing)}"


def export_row_shape(path: Path, line_num: int, expected: int, actual: int) -> str:
    """Return message for an export row whose cell count does not match the schema."""
    return (
        f"{path.name} line {line_num}: expected {expected} columns, got {actual}. "
        "The export layout may have changed."
    )


def invalid_rule(index: int, reason: str) -> str:
    """Return message for a malformed classification rule."""
    return f"Rule {index}: {reason}"
