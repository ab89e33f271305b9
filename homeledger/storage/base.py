"""Mini README: Abstract key-value storage contract.

Values are opaque strings; callers own serialisation. The interface is kept to
the three operations the ledger needs so alternative backends stay trivial.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStorage(ABC):
    """String slots addressed by key, persisted by the concrete backend."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value, or ``None`` when the key has never been set."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Replace the value stored under ``key``."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Forget ``key``; removing an absent key is not an error."""
