"""Locating the ledger and the export files in a working directory."""

from pathlib import Path

from ledgersync.domain.errors import (
    ConflictError,
    NotFoundError,
    ambiguous_ledger,
    directory_not_found,
    ledger_not_found,
)


def _matching_files(directory: Path, prefix: str, extension: str) -> list[Path]:
    if not directory.is_dir():
        raise NotFoundError(directory_not_found(directory))
    return sorted(
        (
            entry
            for entry in directory.iterdir()
            if entry.is_file() and entry.name.startswith(prefix) and entry.name.endswith(extension)
        ),
        key=lambda entry: entry.name,
    )


def find_ledger(directory: str | Path, prefix: str, extension: str = ".csv") -> Path:
    """Find the single ledger file in a directory.

    Args:
        directory: Directory to scan
        prefix: Ledger filename prefix
        extension: Ledger filename extension

    Returns:
        Path of the ledger file

    Raises:
        NotFoundError: If the directory or the ledger doesn't exist
        ConflictError: If more than one file could be the ledger
    """
    directory = Path(directory)
    candidates = _matching_files(directory, prefix, extension)
    if not candidates:
        raise NotFoundError(ledger_not_found(directory, prefix))
    if len(candidates) > 1:
        raise ConflictError(ambiguous_ledger(prefix, [c.name for c in candidates]))
    return candidates[0]


def find_exports(directory: str | Path, prefix: str, extension: str = ".csv") -> list[Path]:
    """Find export files in a directory, sorted by filename.

    An empty list is a valid result.
    """
    return _matching_files(Path(directory), prefix, extension)
