"""Mini README: Tests for caller-side entry validation."""

from __future__ import annotations

import pytest

from homeledger.errors import EntryValidationError
from homeledger.ledger import LedgerStore, validate_entry_input


def test_valid_input_is_cleaned() -> None:
    """Surrounding whitespace is stripped from both fields."""

    assert validate_entry_input("  Coffee ", " 3.5 ") == ("Coffee", 3.5)


def test_numeric_amounts_are_accepted() -> None:
    """Numbers passed directly are accepted as amounts."""

    assert validate_entry_input("Tea", 4) == ("Tea", 4.0)


@pytest.mark.parametrize(
    ("description", "amount"),
    [
        ("", "5"),
        ("   ", "5"),
        ("Tea", ""),
        ("Tea", "-1"),
        ("Tea", "0"),
        ("Tea", "abc"),
        ("Tea", "nan"),
        ("Tea", "inf"),
    ],
)
def test_invalid_input_is_rejected(description: str, amount: str) -> None:
    """Empty fields and non-positive or non-numeric amounts are refused."""

    with pytest.raises(EntryValidationError):
        validate_entry_input(description, amount)


def test_rejected_input_never_reaches_storage(store: LedgerStore) -> None:
    """A failed validation leaves the persisted ledger untouched."""

    store.add("Existing", 1)
    for description, amount in [("", "5"), ("Tea", "-1"), ("Tea", "abc")]:
        try:
            store.add(*validate_entry_input(description, amount))
        except EntryValidationError:
            pass
    assert [entry.description for entry in store.list_all()] == ["Existing"]
