"""Mini README: Tests for the view renderer and amount formatting."""

from __future__ import annotations

from datetime import date
from typing import Callable

import pytest

from homeledger.interface.view import EMPTY_PLACEHOLDER, ViewRenderer, format_amount
from homeledger.ledger import LedgerStore
from homeledger.storage import InMemoryStorage


def test_empty_ledger_renders_placeholder_and_zero_total(store: LedgerStore) -> None:
    """An empty ledger shows the placeholder and a zero total."""

    view = ViewRenderer(store).render()

    assert view.is_empty
    assert view.placeholder == EMPTY_PLACEHOLDER
    assert view.formatted_total == "0"
    assert view.total == 0


def test_rows_follow_insertion_order_with_running_total(store: LedgerStore) -> None:
    """Rows carry position, id and formatted amount; the total sums every entry."""

    first = store.add("Rent", 1200)
    store.add("Coffee", 3.5)

    view = ViewRenderer(store).render()

    assert [row.position for row in view.rows] == [0, 1]
    assert view.rows[0].entry_id == first.entry_id
    assert view.rows[0].formatted_amount == "1,200"
    assert view.rows[1].formatted_amount == "3.5"
    assert view.formatted_total == "1,203.5"


def test_render_is_idempotent(store: LedgerStore) -> None:
    """Rendering twice without changes gives the same rows and total."""

    store.add("a", 1.1)
    store.add("b", 2.2)
    renderer = ViewRenderer(store)

    first = renderer.render()
    second = renderer.render()

    assert first == second
    assert len(first.rows) == len(second.rows) == 2


def test_render_reflects_mutations(store: LedgerStore) -> None:
    """Each render re-reads the store after adds and deletes."""

    renderer = ViewRenderer(store)
    store.add("a", 5)
    assert renderer.render().formatted_total == "5"
    store.delete_at(0)
    assert renderer.render().is_empty


@pytest.mark.parametrize("amount", ["1e400", "Infinity", "NaN", "1" + "0" * 400])
def test_non_finite_saved_amounts_render_placeholder(
    clock: Callable[[], date], amount: str
) -> None:
    """Saved amounts that overflow or are not finite render as an empty ledger."""

    raw = f'[{{"description": "x", "amount": {amount}, "date": "2024/01/01"}}]'
    store = LedgerStore(InMemoryStorage({"myAccounts": raw}), clock=clock)

    view = ViewRenderer(store).render()

    assert view.is_empty
    assert view.formatted_total == "0"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, "0"),
        (4, "4"),
        (3.5, "3.5"),
        (1234.5, "1,234.5"),
        (1234.567, "1,234.57"),
        (1000000, "1,000,000"),
        (0.004, "0"),
        (1.005, "1"),
        (2.005, "2"),
        (2.675, "2.67"),
    ],
)
def test_format_amount(value: float, expected: str) -> None:
    """Amounts get grouping separators and at most two digits, rounded from the exact double."""

    assert format_amount(value) == expected
