"""Mini README: Turns the persisted ledger into display-ready view models.

Structure:
    * format_amount - grouping separators with at most two fractional digits.
    * RenderedRow / LedgerView - immutable snapshots handed to templates.
    * ViewRenderer - reads the injected ``LedgerStore`` and builds a ``LedgerView``.

Each render is a full replacement: the view is rebuilt from the complete list
every time, and each row carries both its current position and its stable
entry identifier so delete actions can address it.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List, Tuple

from ..ledger import LedgerStore
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

EMPTY_PLACEHOLDER = "No records yet"


def format_amount(value: float) -> str:
    """Format a money amount like ``1,234.5`` (0-2 fractional digits)."""

    rounded = Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    text = f"{rounded:,.2f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


@dataclass(frozen=True, slots=True)
class RenderedRow:
    """One visible record with its delete target."""

    position: int
    entry_id: str
    date: str
    description: str
    formatted_amount: str


@dataclass(frozen=True, slots=True)
class LedgerView:
    """Everything the ledger page needs to draw the record list and total."""

    rows: Tuple[RenderedRow, ...]
    total: float
    formatted_total: str
    placeholder: str = EMPTY_PLACEHOLDER

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def as_dict(self) -> Dict[str, object]:
        return {
            "entries": [
                {
                    "position": row.position,
                    "entry_id": row.entry_id,
                    "date": row.date,
                    "description": row.description,
                    "formatted_amount": row.formatted_amount,
                }
                for row in self.rows
            ],
            "total": self.total,
            "formatted_total": self.formatted_total,
        }


class ViewRenderer:
    """Build ledger views from the store it was constructed with."""

    def __init__(self, store: LedgerStore) -> None:
        self._store = store

    def render(self) -> LedgerView:
        """Re-read the ledger and produce a fresh view with a running total."""

        entries = self._store.list_all()
        if not entries:
            LOGGER.debug("Rendering empty ledger placeholder")
            return LedgerView(rows=(), total=0.0, formatted_total="0")

        total = 0.0
        rows: List[RenderedRow] = []
        for position, entry in enumerate(entries):
            total += entry.amount
            rows.append(
                RenderedRow(
                    position=position,
                    entry_id=entry.entry_id,
                    date=entry.date,
                    description=entry.description,
                    formatted_amount=format_amount(entry.amount),
                )
            )
        LOGGER.debug("Rendered %s ledger rows with total %.2f", len(rows), total)
        return LedgerView(rows=tuple(rows), total=total, formatted_total=format_amount(total))
