"""Mini README: Persisted household ledger.

Structure:
    * Entry - dataclass storing one ledger line and its serialised form.
    * LedgerStore - whole-list read-modify-write access to the persisted ledger.

The ledger lives in one key-value slot as a JSON array. Every mutation reads
the full list, changes it and writes the full list back; a lock serialises
these cycles so concurrent requests behave as a single writer. Entries carry a
stable identifier assigned at creation, and deletion is available by
identifier as well as by position.
"""

from __future__ import annotations

import json
import math
import threading
import uuid
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Dict, List, Optional

from ..errors import EntryNotFoundError
from ..logging_utils import get_logger
from ..storage import KeyValueStorage

LOGGER = get_logger(__name__)

DATE_FORMAT = "%Y/%m/%d"
DEFAULT_STORAGE_KEY = "myAccounts"


def _new_entry_id() -> str:
    return uuid.uuid4().hex


@dataclass(slots=True)
class Entry:
    """Represent a single ledger line."""

    description: str
    amount: float
    date: str
    entry_id: str = field(default_factory=_new_entry_id)

    def as_dict(self) -> Dict[str, object]:
        """Export the entry with JSON-serialisable values."""

        return {
            "description": self.description,
            "amount": self.amount,
            "date": self.date,
            "entry_id": self.entry_id,
        }

    @classmethod
    def from_dict(cls, payload: object) -> "Entry":
        """Build an entry from its persisted form.

        Accepts the legacy ``desc`` key used by the browser-only version and
        leaves ``entry_id`` empty when it was never assigned so the store can
        backfill it.
        """

        if not isinstance(payload, dict):
            raise ValueError("Ledger entries must be JSON objects")
        description = payload.get("description", payload.get("desc"))
        if not isinstance(description, str):
            raise ValueError("Ledger entries require a text description")
        amount = payload.get("amount")
        if isinstance(amount, bool) or not isinstance(amount, (int, float, str)):
            raise ValueError("Ledger entries require a numeric amount")
        try:
            value = float(amount)
        except OverflowError as error:
            raise ValueError("Ledger entry amount is out of range") from error
        if not math.isfinite(value):
            raise ValueError("Ledger entry amount must be a finite number")
        entry_date = payload.get("date")
        if not isinstance(entry_date, str):
            raise ValueError("Ledger entries require a date string")
        return cls(
            description=description,
            amount=value,
            date=entry_date,
            entry_id=str(payload.get("entry_id") or ""),
        )


class LedgerStore:
    """Manage the ordered list of entries held in key-value storage."""

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        key: str = DEFAULT_STORAGE_KEY,
        clock: Optional[Callable[[], date]] = None,
    ) -> None:
        self._storage = storage
        self._key = key
        self._clock = clock or date.today
        self._lock = threading.RLock()
        LOGGER.debug("Ledger store bound to storage key %s", key)

    def current_date(self) -> date:
        return self._clock()

    def today(self) -> str:
        """Return the current date in the ledger's ``YYYY/MM/DD`` form."""

        return self.current_date().strftime(DATE_FORMAT)

    def _load(self) -> List[Entry]:
        raw = self._storage.get_item(self._key)
        if raw is None:
            return []
        try:
            payload = json.loads(raw)
            if not isinstance(payload, list):
                raise ValueError("persisted ledger is not a JSON array")
            entries = [Entry.from_dict(item) for item in payload]
        except (json.JSONDecodeError, ValueError) as error:
            LOGGER.warning(
                "Ignoring malformed ledger data under key %s: %s", self._key, error
            )
            return []

        missing_ids = [entry for entry in entries if not entry.entry_id]
        if missing_ids:
            for entry in missing_ids:
                entry.entry_id = _new_entry_id()
            self._save(entries)
            LOGGER.info("Assigned identifiers to %s legacy entries", len(missing_ids))
        return entries

    def _save(self, entries: List[Entry]) -> None:
        snapshot = json.dumps([entry.as_dict() for entry in entries], ensure_ascii=False)
        self._storage.set_item(self._key, snapshot)

    def list_all(self) -> List[Entry]:
        """Return every entry in insertion order."""

        with self._lock:
            entries = self._load()
        LOGGER.debug("Loaded %s ledger entries", len(entries))
        return entries

    def add(self, description: str, amount: float) -> Entry:
        """Append an entry stamped with today's date.

        Input is expected to be validated already (see ``validate_entry_input``).
        """

        with self._lock:
            entries = self._load()
            entry = Entry(description=description, amount=float(amount), date=self.today())
            entries.append(entry)
            self._save(entries)
        LOGGER.info("Recorded entry %s (%s) on %s", entry.entry_id, entry.amount, entry.date)
        return entry

    def delete_at(self, index: int) -> Entry:
        """Remove the entry at zero-based ``index``."""

        with self._lock:
            entries = self._load()
            if not 0 <= index < len(entries):
                raise EntryNotFoundError(
                    f"No entry at position {index}; ledger holds {len(entries)} entries"
                )
            removed = entries.pop(index)
            self._save(entries)
        LOGGER.info("Deleted entry at position %s (%s)", index, removed.entry_id)
        return removed

    def delete_entry(self, entry_id: str) -> Entry:
        """Remove the entry carrying ``entry_id``."""

        with self._lock:
            entries = self._load()
            for index, entry in enumerate(entries):
                if entry.entry_id == entry_id:
                    del entries[index]
                    self._save(entries)
                    LOGGER.info("Deleted entry %s", entry_id)
                    return entry
        raise EntryNotFoundError(f"Entry {entry_id} not found")

    def get_entry(self, entry_id: str) -> Entry:
        """Retrieve an entry by identifier, raising informative errors when missing."""

        for entry in self.list_all():
            if entry.entry_id == entry_id:
                return entry
        raise EntryNotFoundError(f"Entry {entry_id} not found")

    def total(self) -> float:
        """Sum of every recorded amount."""

        return sum(entry.amount for entry in self.list_all())
