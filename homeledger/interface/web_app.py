"""Mini README: FastAPI-powered ledger page for Home Ledger.

Structure:
    * create_application - application factory wiring storage, the ledger
      store, the view renderer, the asset cache worker, routes and templates.
    * NOTICES - short status messages shown after redirects.

Every route that changes the ledger redirects back to ``/`` so the page is
re-rendered from the full persisted list. Deletion goes through a
confirmation page; only an explicit ``confirm=yes`` removes the entry.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import date
from pathlib import Path
from typing import AsyncIterator, Callable, Dict, Optional
from urllib.parse import urlencode

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse, Response
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.concurrency import run_in_threadpool

from ..configuration import HomeLedgerSettings, get_settings
from ..errors import CacheInstallError, EmptyLedgerError, EntryNotFoundError, EntryValidationError
from ..ledger import LedgerStore, export_filename, to_csv, validate_entry_input
from ..ledger.export import CSV_MEDIA_TYPE
from ..logging_utils import configure_root_logger, get_logger
from ..offline import (
    AssetCacheWorker,
    AssetFetcher,
    HttpAssetFetcher,
    StaticDirectoryFetcher,
    install_asset_cache_middleware,
)
from ..storage import JsonFileStorage, KeyValueStorage
from .view import ViewRenderer

LOGGER = get_logger(__name__)

TEMPLATE_DIRECTORY = Path(__file__).parent / "templates"
STATIC_DIRECTORY = Path(__file__).parent / "static"

NOTICES: Dict[str, str] = {
    "added": "Record added.",
    "deleted": "Record deleted.",
    "kept": "Deletion cancelled; the record was kept.",
    "empty-export": "There are no records to export.",
}


def _redirect_home(notice: Optional[str] = None) -> RedirectResponse:
    url = "/" if notice is None else f"/?{urlencode({'notice': notice})}"
    return RedirectResponse(url, status_code=303)


def _build_fetcher(settings: HomeLedgerSettings) -> AssetFetcher:
    if settings.asset_origin_url:
        return HttpAssetFetcher(settings.asset_origin_url)
    return StaticDirectoryFetcher(STATIC_DIRECTORY, mount_path="/static")


def create_application(
    settings: Optional[HomeLedgerSettings] = None,
    storage: Optional[KeyValueStorage] = None,
    clock: Optional[Callable[[], date]] = None,
    fetcher: Optional[AssetFetcher] = None,
) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = settings or get_settings()
    configure_root_logger(settings.log_level.upper())
    storage = storage or JsonFileStorage(settings.storage_path)
    store = LedgerStore(storage, key=settings.storage_key, clock=clock)
    renderer = ViewRenderer(store)
    worker = AssetCacheWorker(
        settings.cache_name,
        settings.cache_manifest,
        fetcher or _build_fetcher(settings),
    )

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        try:
            await run_in_threadpool(worker.install)
        except CacheInstallError as error:
            LOGGER.error("%s; serving assets from the network only", error)
        yield

    app = FastAPI(title="Home Ledger", version="1.0.0", lifespan=lifespan)
    app.state.store = store
    app.state.renderer = renderer
    app.state.asset_cache = worker
    templates = Jinja2Templates(directory=str(TEMPLATE_DIRECTORY))
    app.mount("/static", StaticFiles(directory=str(STATIC_DIRECTORY)), name="static")
    install_asset_cache_middleware(app, worker)

    def render_page(
        request: Request,
        *,
        notice: Optional[str] = None,
        error: Optional[str] = None,
        description: str = "",
        amount: str = "",
        status_code: int = 200,
    ) -> HTMLResponse:
        view = renderer.render()
        return templates.TemplateResponse(
            request,
            "ledger.html",
            {
                "view": view,
                "notice": NOTICES.get(notice or ""),
                "error": error,
                "description": description,
                "amount": amount,
            },
            status_code=status_code,
        )

    @app.get("/", response_class=HTMLResponse)
    async def ledger_page(request: Request, notice: Optional[str] = None) -> HTMLResponse:
        """Render the ledger with its running total."""

        return render_page(request, notice=notice)

    @app.post("/entries")
    async def add_entry(
        request: Request,
        description: str = Form(""),
        amount: str = Form(""),
    ) -> Response:
        """Validate the form and append a new entry."""

        try:
            cleaned_description, value = validate_entry_input(description, amount)
        except EntryValidationError as error:
            LOGGER.info("Rejected entry input: %s", error)
            return render_page(
                request,
                error=str(error),
                description=description,
                amount=amount,
                status_code=400,
            )
        store.add(cleaned_description, value)
        return _redirect_home("added")

    @app.get("/entries/{entry_id}/delete", response_class=HTMLResponse)
    async def confirm_delete(request: Request, entry_id: str) -> HTMLResponse:
        """Ask the user to confirm before removing an entry."""

        try:
            entry = store.get_entry(entry_id)
        except EntryNotFoundError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        return templates.TemplateResponse(request, "confirm_delete.html", {"entry": entry})

    @app.post("/entries/{entry_id}/delete")
    async def delete_entry(entry_id: str, confirm: str = Form("no")) -> RedirectResponse:
        """Delete the entry only when the user confirmed."""

        if confirm.strip().lower() != "yes":
            LOGGER.debug("Deletion of %s declined", entry_id)
            return _redirect_home("kept")
        try:
            store.delete_entry(entry_id)
        except EntryNotFoundError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        return _redirect_home("deleted")

    @app.get("/export.csv")
    async def export_csv() -> Response:
        """Download the whole ledger as CSV."""

        try:
            document = to_csv(store.list_all(), header=settings.csv_header)
        except EmptyLedgerError:
            LOGGER.info("Export requested for an empty ledger")
            return _redirect_home("empty-export")
        filename = export_filename(store.current_date(), settings.export_filename_prefix)
        LOGGER.info("Exporting ledger as %s", filename)
        return Response(
            content=document.encode("utf-8"),
            media_type=CSV_MEDIA_TYPE,
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    @app.get("/api/entries")
    async def list_entries() -> JSONResponse:
        """Return the rendered ledger as JSON."""

        return JSONResponse(renderer.render().as_dict())

    @app.get("/api/asset-cache")
    async def asset_cache_status() -> JSONResponse:
        """Expose the cache worker state for diagnostics."""

        return JSONResponse(worker.describe())

    return app
