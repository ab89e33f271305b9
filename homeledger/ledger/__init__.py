"""Mini README: Household ledger domain.

This package groups the persisted ledger (``LedgerStore``), the caller-side
input validation that guards it, and the CSV export used for downloads. The
store is constructed once and handed to whichever component needs it.
"""

from .export import export_filename, format_plain_amount, to_csv
from .store import DATE_FORMAT, Entry, LedgerStore
from .validation import validate_entry_input

__all__ = [
    "DATE_FORMAT",
    "Entry",
    "LedgerStore",
    "export_filename",
    "format_plain_amount",
    "to_csv",
    "validate_entry_input",
]
