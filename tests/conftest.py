"""Mini README: Shared fixtures for the Home Ledger test suite.

Provides a fixed clock so stamped dates are predictable and an in-memory
ledger store for tests that do not care about the file backend.
"""

from __future__ import annotations

from datetime import date
from typing import Callable

import pytest

from homeledger.ledger import LedgerStore
from homeledger.storage import InMemoryStorage

FIXED_DAY = date(2024, 3, 9)


@pytest.fixture
def clock() -> Callable[[], date]:
    """Clock pinned to a fixed day so stamped dates are deterministic."""

    return lambda: FIXED_DAY


@pytest.fixture
def storage() -> InMemoryStorage:
    """Fresh in-memory key-value storage."""

    return InMemoryStorage()


@pytest.fixture
def store(storage: InMemoryStorage, clock: Callable[[], date]) -> LedgerStore:
    """Ledger store bound to the in-memory storage and fixed clock."""

    return LedgerStore(storage, clock=clock)
