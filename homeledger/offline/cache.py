"""Mini README: Named cache buckets for pre-fetched assets.

Structure:
    * CachedAsset - stored response body, media type and headers.
    * CacheBucket - one named bucket; ``add_all`` is all-or-nothing.
    * CacheStorage - registry of buckets, with cross-bucket ``match``.
    * resolve_asset_path / request_key - cache key helpers.

Keys are the request as issued: method, path and query string. Only ``GET``
requests can match, mirroring how browser caches answer lookups.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional
from urllib.parse import urljoin

from ..logging_utils import get_logger

if TYPE_CHECKING:
    from .fetchers import AssetFetcher

LOGGER = get_logger(__name__)


def resolve_asset_path(relative_path: str, base: str = "/") -> str:
    """Resolve a manifest entry such as ``./static/style.css`` against ``base``."""

    return urljoin(base, relative_path)


def request_key(method: str, path: str, query: str = "") -> Optional[str]:
    """Build the lookup key for a request, or ``None`` when it is not cacheable."""

    if method.upper() != "GET":
        return None
    return f"{path}?{query}" if query else path


@dataclass(slots=True)
class CachedAsset:
    """A fetched asset kept verbatim for later responses."""

    path: str
    body: bytes
    media_type: str
    status_code: int = 200
    headers: Dict[str, str] = field(default_factory=dict)


class CacheBucket:
    """Assets stored under one versioned cache name."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._assets: Dict[str, CachedAsset] = {}

    def keys(self) -> List[str]:
        return sorted(self._assets)

    def match(self, key: str) -> Optional[CachedAsset]:
        return self._assets.get(key)

    def add_all(self, relative_paths: Iterable[str], fetcher: "AssetFetcher") -> List[str]:
        """Fetch every path and store the results only if all fetches succeed.

        Any ``AssetFetchError`` propagates and the bucket keeps its previous
        contents.
        """

        fetched: Dict[str, CachedAsset] = {}
        for relative_path in relative_paths:
            path = resolve_asset_path(relative_path)
            fetched[path] = fetcher.fetch(path)
        self._assets.update(fetched)
        LOGGER.info("Cached %s assets in bucket %s", len(fetched), self.name)
        return list(fetched)


class CacheStorage:
    """Registry of named cache buckets."""

    def __init__(self) -> None:
        self._buckets: Dict[str, CacheBucket] = {}

    def open(self, name: str) -> CacheBucket:
        """Return the bucket called ``name``, creating it on first use."""

        if name not in self._buckets:
            self._buckets[name] = CacheBucket(name)
            LOGGER.debug("Opened new cache bucket %s", name)
        return self._buckets[name]

    def has(self, name: str) -> bool:
        return name in self._buckets

    def delete(self, name: str) -> bool:
        return self._buckets.pop(name, None) is not None

    def keys(self) -> List[str]:
        return list(self._buckets)

    def match(self, key: str) -> Optional[CachedAsset]:
        """Search every bucket, in creation order, for ``key``."""

        for bucket in self._buckets.values():
            asset = bucket.match(key)
            if asset is not None:
                return asset
        return None
