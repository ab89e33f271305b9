"""Mini README: CSV export of the ledger.

Structure:
    * to_csv - serialise entries into a spreadsheet-friendly CSV document.
    * export_filename - dated download name for the export.
    * format_plain_amount - bare decimal rendering used in the amount column.

The document starts with a UTF-8 byte-order mark so spreadsheet tools pick the
right encoding for non-ASCII descriptions. Descriptions are always quoted with
embedded quotes doubled; dates and amounts are written bare.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Sequence

from ..errors import EmptyLedgerError
from .store import Entry

BYTE_ORDER_MARK = "\ufeff"
DEFAULT_HEADER = ("date", "description", "amount")
CSV_MEDIA_TYPE = "text/csv; charset=utf-8"


def format_plain_amount(amount: float) -> str:
    """Render ``4.0`` as ``4``, ``3.5`` as ``3.5`` and ``1e-05`` as ``0.00001``."""

    if float(amount).is_integer():
        return str(int(amount))
    return format(Decimal(repr(float(amount))), "f")


def _quote(value: str) -> str:
    escaped = value.replace('"', '""')
    return f'"{escaped}"'


def to_csv(entries: Sequence[Entry], header: Sequence[str] = DEFAULT_HEADER) -> str:
    """Serialise ``entries`` into CSV text, raising when there is nothing to export."""

    if not entries:
        raise EmptyLedgerError("There are no records to export.")
    lines = [",".join(header)]
    for entry in entries:
        lines.append(
            f"{entry.date},{_quote(entry.description)},{format_plain_amount(entry.amount)}"
        )
    return BYTE_ORDER_MARK + "\n".join(lines) + "\n"


def export_filename(today: date, prefix: str = "household_ledger") -> str:
    """Return ``<prefix>_<YYYYMMDD>.csv`` for the given day."""

    return f"{prefix}_{today.strftime('%Y%m%d')}.csv"
