"""Mini README: Exception taxonomy shared by the ledger, storage and cache layers.

Web routes and the CLI translate these into user-facing responses; nothing in
the package retries on failure.
"""

from __future__ import annotations


class HomeLedgerError(Exception):
    """Base class for every error raised by Home Ledger."""


class EntryValidationError(HomeLedgerError, ValueError):
    """Raised when a description or amount supplied by the user is unusable."""


class EmptyLedgerError(HomeLedgerError):
    """Raised when an export is requested but the ledger holds no entries."""


class EntryNotFoundError(HomeLedgerError, LookupError):
    """Raised when a delete addresses a position or identifier that does not exist."""


class StorageError(HomeLedgerError, IOError):
    """Raised when the key-value storage cannot be read or written."""


class AssetFetchError(HomeLedgerError):
    """Raised by asset fetchers when a single asset cannot be retrieved."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Unable to fetch asset {path}: {reason}")
        self.path = path
        self.reason = reason


class CacheInstallError(HomeLedgerError):
    """Raised when the asset cache worker fails to populate its bucket."""
