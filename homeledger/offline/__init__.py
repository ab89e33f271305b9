"""Mini README: Offline asset cache for the Home Ledger web interface.

Structure:
    * cache - named cache buckets holding pre-fetched asset responses.
    * fetchers - strategies that retrieve assets from disk or over HTTP.
    * worker - lifecycle (install/activate) and cache-first request handling.
    * middleware - HTTP middleware routing requests through the worker.

Only the fixed manifest is ever cached; runtime responses pass through
untouched.
"""

from .cache import CacheBucket, CachedAsset, CacheStorage, request_key, resolve_asset_path
from .fetchers import AssetFetcher, HttpAssetFetcher, StaticDirectoryFetcher
from .middleware import install_asset_cache_middleware
from .worker import AssetCacheWorker, WorkerState

__all__ = [
    "AssetCacheWorker",
    "AssetFetcher",
    "CacheBucket",
    "CacheStorage",
    "CachedAsset",
    "HttpAssetFetcher",
    "StaticDirectoryFetcher",
    "WorkerState",
    "install_asset_cache_middleware",
    "request_key",
    "resolve_asset_path",
]
