"""Mini README: Tests for the Typer command line interface."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from typer.testing import CliRunner

import main_home_ledger
from homeledger.configuration import get_settings
from homeledger.ledger import LedgerStore
from homeledger.storage import JsonFileStorage

runner = CliRunner()


@pytest.fixture
def data_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point settings at a temporary data directory for the duration of a test."""

    monkeypatch.setenv("HOMELEDGER_DATA_DIRECTORY", str(tmp_path))
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()


def test_list_and_export_commands(data_directory: Path) -> None:
    """Entries written to the JSON file are listed and exported."""

    store = LedgerStore(JsonFileStorage(data_directory / "ledger.json"))
    store.add("Coffee", 3.5)
    store.add("Lunch, office", 12)
    destination = data_directory / "out.csv"

    listed = runner.invoke(main_home_ledger.cli, ["list"])
    exported = runner.invoke(main_home_ledger.cli, ["export", "--output", str(destination)])

    assert listed.exit_code == 0
    assert "[1]" in listed.output
    assert "Total: 15.5" in listed.output
    assert exported.exit_code == 0
    content = destination.read_text(encoding="utf-8-sig")
    assert content.splitlines()[2].endswith('"Lunch, office",12')


def test_export_of_empty_ledger_fails(data_directory: Path) -> None:
    """Exporting an empty ledger exits with an error and writes nothing."""

    result = runner.invoke(main_home_ledger.cli, ["export", "--output", str(data_directory / "x.csv")])

    assert result.exit_code == 1
    assert not (data_directory / "x.csv").exists()
