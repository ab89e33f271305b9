"""Mini README: Tests for the CSV export.

Exports are parsed back with the standard ``csv`` module to confirm quoting
survives commas, quotes and non-ASCII text.
"""

from __future__ import annotations

import csv
import io
from datetime import date
from typing import List

import pytest

from homeledger.errors import EmptyLedgerError
from homeledger.ledger import LedgerStore, export_filename, format_plain_amount, to_csv


def _parse(document: str) -> List[List[str]]:
    assert document.startswith("\ufeff")
    return list(csv.reader(io.StringIO(document[1:])))


def test_export_scenario_keeps_embedded_comma(store: LedgerStore) -> None:
    """Two coffees export as a header plus two rows with the comma kept in quotes."""

    store.add("Coffee", 3.5)
    store.add("Coffee, Large", 4)

    document = to_csv(store.list_all())

    assert document.splitlines()[0] == "\ufeffdate,description,amount"
    assert document.splitlines()[2] == '2024/03/09,"Coffee, Large",4'
    rows = _parse(document)
    assert len(rows) == 3
    assert rows[2] == ["2024/03/09", "Coffee, Large", "4"]


def test_export_round_trip_preserves_tuples(store: LedgerStore) -> None:
    """Parsing the export back reproduces every (date, description, amount)."""

    for description, amount in [('He said "hi"', 12.75), ("茶, 大杯", 60), ("Plain", 0.1)]:
        store.add(description, amount)
    entries = store.list_all()

    rows = _parse(to_csv(entries))[1:]

    assert [(row[0], row[1], float(row[2])) for row in rows] == [
        (entry.date, entry.description, entry.amount) for entry in entries
    ]


def test_embedded_quotes_are_doubled(store: LedgerStore) -> None:
    """Double quotes inside a description are doubled."""

    store.add('5" ruler', 2)
    assert '"5"" ruler"' in to_csv(store.list_all())


def test_custom_header(store: LedgerStore) -> None:
    """The header row uses the configured column labels."""

    store.add("Coffee", 3.5)
    document = to_csv(store.list_all(), header=("日期", "項目", "金額"))
    assert document.splitlines()[0] == "\ufeff日期,項目,金額"


def test_empty_export_is_refused() -> None:
    """Exporting nothing raises instead of producing a file."""

    with pytest.raises(EmptyLedgerError):
        to_csv([])


@pytest.mark.parametrize(
    ("amount", "expected"),
    [
        (4.0, "4"),
        (3.5, "3.5"),
        (1234.56, "1234.56"),
        (0.1, "0.1"),
        (0.00001, "0.00001"),
        (0.000123, "0.000123"),
        (1e20, "100000000000000000000"),
    ],
)
def test_format_plain_amount(amount: float, expected: str) -> None:
    """Amounts are written as bare fixed-point decimals."""

    assert format_plain_amount(amount) == expected


def test_export_filename_strips_date_separators() -> None:
    """The download name embeds the date without separators."""

    assert export_filename(date(2024, 3, 9)) == "household_ledger_20240309.csv"
    assert export_filename(date(2024, 12, 1), prefix="ledger") == "ledger_20241201.csv"
