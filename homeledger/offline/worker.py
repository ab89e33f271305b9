"""Mini README: Asset cache worker lifecycle and request handling.

Structure:
    * WorkerState - uninstalled, installing or active.
    * AssetCacheWorker - installs the fixed manifest into a versioned bucket and
      answers requests cache-first with a network fallback.

Installation is all-or-nothing and never retried; a failure leaves the worker
uninstalled and every request goes to the network. Responses obtained from
the network are returned unmodified and never stored.
"""

from __future__ import annotations

from enum import Enum
from typing import Awaitable, Callable, Dict, Optional, Sequence, TypeVar, Union

from ..errors import AssetFetchError, CacheInstallError
from ..logging_utils import get_logger
from .cache import CachedAsset, CacheStorage, request_key
from .fetchers import AssetFetcher

LOGGER = get_logger(__name__)

T = TypeVar("T")


class WorkerState(str, Enum):
    """Lifecycle stages of the cache worker."""

    UNINSTALLED = "uninstalled"
    INSTALLING = "installing"
    ACTIVE = "active"


class AssetCacheWorker:
    """Pre-fetch a fixed asset manifest and serve it cache-first."""

    def __init__(
        self,
        cache_name: str,
        manifest: Sequence[str],
        fetcher: AssetFetcher,
        *,
        caches: Optional[CacheStorage] = None,
    ) -> None:
        self.cache_name = cache_name
        self.manifest = tuple(manifest)
        self.fetcher = fetcher
        self.caches = caches or CacheStorage()
        self.state = WorkerState.UNINSTALLED

    @property
    def is_active(self) -> bool:
        return self.state is WorkerState.ACTIVE

    def install(self) -> None:
        """Populate the cache bucket with every manifest asset."""

        self.state = WorkerState.INSTALLING
        LOGGER.info(
            "Installing asset cache %s with %s assets", self.cache_name, len(self.manifest)
        )
        try:
            bucket = self.caches.open(self.cache_name)
            bucket.add_all(self.manifest, self.fetcher)
        except AssetFetchError as error:
            self.state = WorkerState.UNINSTALLED
            raise CacheInstallError(
                f"Asset cache {self.cache_name} failed to install: {error}"
            ) from error
        self.state = WorkerState.ACTIVE
        LOGGER.info("Asset cache %s is active", self.cache_name)

    def match(self, method: str, path: str, query: str = "") -> Optional[CachedAsset]:
        """Return the cached copy for a request when the worker is active."""

        if not self.is_active:
            return None
        key = request_key(method, path, query)
        if key is None:
            return None
        return self.caches.match(key)

    async def handle_fetch(
        self,
        method: str,
        path: str,
        network: Callable[[], Awaitable[T]],
        *,
        query: str = "",
    ) -> Union[CachedAsset, T]:
        """Answer from the cache if possible, otherwise await ``network``."""

        cached = self.match(method, path, query)
        if cached is not None:
            LOGGER.debug("Serving %s from cache %s", path, self.cache_name)
            return cached
        return await network()

    def describe(self) -> Dict[str, object]:
        """Summarise the worker for diagnostics endpoints."""

        cached_keys = (
            self.caches.open(self.cache_name).keys() if self.caches.has(self.cache_name) else []
        )
        return {
            "cache_name": self.cache_name,
            "state": self.state.value,
            "manifest": list(self.manifest),
            "cached": cached_keys,
        }
