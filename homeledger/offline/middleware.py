"""Mini README: HTTP middleware that puts the asset cache in front of the app.

Every incoming request is offered to the ``AssetCacheWorker``; cache hits are
answered directly and everything else continues down the normal route stack.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from starlette.responses import Response

from .cache import CachedAsset
from .worker import AssetCacheWorker


def _cached_response(asset: CachedAsset) -> Response:
    return Response(
        content=asset.body,
        status_code=asset.status_code,
        media_type=asset.media_type,
        headers={**asset.headers, "X-Asset-Cache": "hit"},
    )


def install_asset_cache_middleware(app: FastAPI, worker: AssetCacheWorker) -> None:
    """Register cache-first request interception on ``app``."""

    @app.middleware("http")
    async def serve_from_asset_cache(request: Request, call_next) -> Response:
        result = await worker.handle_fetch(
            request.method,
            request.url.path,
            lambda: call_next(request),
            query=request.url.query,
        )
        if isinstance(result, CachedAsset):
            return _cached_response(result)
        return result
