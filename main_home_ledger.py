"""Mini README: Entry point CLI for the Home Ledger service.

Commands:
    * run - start the FastAPI application with uvicorn.
    * list - print recorded entries with their positions and the total.
    * export - write the ledger to a CSV file.

Settings come from ``HOMELEDGER_*`` environment variables or a ``.env`` file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
import uvicorn

from homeledger.configuration import get_settings
from homeledger.errors import EmptyLedgerError
from homeledger.interface.view import ViewRenderer
from homeledger.ledger import LedgerStore, export_filename, to_csv
from homeledger.logging_utils import configure_root_logger
from homeledger.storage import JsonFileStorage

cli = typer.Typer(help="Run and manage the Home Ledger web service.")


def _build_store() -> LedgerStore:
    settings = get_settings()
    return LedgerStore(JsonFileStorage(settings.storage_path), key=settings.storage_key)


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level.upper())

    # Browsers cannot navigate to the wildcard bind address.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Home Ledger on {effective_host}:{effective_port}.\n"
        f"Open your browser at http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "homeledger.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not (production or settings.is_production),
    )


@cli.command("list")
def list_entries() -> None:
    """Print every entry with its position and the running total."""

    view = ViewRenderer(_build_store()).render()
    if view.is_empty:
        typer.echo(view.placeholder)
    for row in view.rows:
        typer.echo(f"[{row.position}] {row.date}  {row.description}  {row.formatted_amount}")
    typer.echo(f"Total: {view.formatted_total}")


@cli.command()
def export(
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Destination file (defaults to a dated name)."
    ),
) -> None:
    """Write the ledger to a CSV file."""

    settings = get_settings()
    store = _build_store()
    try:
        document = to_csv(store.list_all(), header=settings.csv_header)
    except EmptyLedgerError as error:
        typer.echo(str(error), err=True)
        raise typer.Exit(code=1) from error
    destination = output or Path(
        export_filename(store.current_date(), settings.export_filename_prefix)
    )
    destination.write_text(document, encoding="utf-8", newline="")
    typer.echo(f"Exported ledger to {destination}")


if __name__ == "__main__":
    cli()
