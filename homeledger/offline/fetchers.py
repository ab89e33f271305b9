"""Mini README: Strategies for retrieving assets during cache installation.

Structure:
    * AssetFetcher - abstract fetcher returning ``CachedAsset`` instances.
    * StaticDirectoryFetcher - reads files from the bundled static directory.
    * HttpAssetFetcher - downloads assets from a remote origin using ``requests``.

Fetchers raise ``AssetFetchError`` for anything other than a successful
response so the bucket can abandon the whole install.
"""

from __future__ import annotations

import mimetypes
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional
from urllib.parse import urljoin

import requests

from ..errors import AssetFetchError
from ..logging_utils import get_logger
from .cache import CachedAsset

LOGGER = get_logger(__name__)

DEFAULT_MEDIA_TYPE = "application/octet-stream"


def _guess_media_type(path: str) -> str:
    media_type, _ = mimetypes.guess_type(path)
    return media_type or DEFAULT_MEDIA_TYPE


class AssetFetcher(ABC):
    """Retrieve one asset by its absolute same-origin path."""

    @abstractmethod
    def fetch(self, path: str) -> CachedAsset:
        """Return the asset at ``path`` or raise ``AssetFetchError``."""


class StaticDirectoryFetcher(AssetFetcher):
    """Serve assets from the directory mounted at ``mount_path``."""

    def __init__(self, directory: Path, mount_path: str = "/static") -> None:
        self.directory = Path(directory).resolve()
        self.mount_path = mount_path.rstrip("/") + "/"

    def fetch(self, path: str) -> CachedAsset:
        if not path.startswith(self.mount_path):
            raise AssetFetchError(path, f"outside of {self.mount_path}")
        candidate = (self.directory / path[len(self.mount_path):]).resolve()
        if self.directory not in candidate.parents or not candidate.is_file():
            raise AssetFetchError(path, "file not found")
        try:
            body = candidate.read_bytes()
        except OSError as error:
            raise AssetFetchError(path, str(error)) from error
        LOGGER.debug("Loaded %s (%s bytes) from %s", path, len(body), candidate)
        return CachedAsset(path=path, body=body, media_type=_guess_media_type(path))


class HttpAssetFetcher(AssetFetcher):
    """Download assets from ``base_url`` over HTTP."""

    def __init__(
        self,
        base_url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 10.0,
    ) -> None:
        self.base_url = base_url.rstrip("/") + "/"
        self.session = session or requests.Session()
        self.timeout = timeout

    def fetch(self, path: str) -> CachedAsset:
        url = urljoin(self.base_url, path.lstrip("/"))
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as error:
            raise AssetFetchError(path, str(error)) from error
        if not response.ok:
            raise AssetFetchError(path, f"HTTP {response.status_code}")
        media_type = response.headers.get("Content-Type") or _guess_media_type(path)
        LOGGER.debug("Downloaded %s (%s bytes) from %s", path, len(response.content), url)
        return CachedAsset(
            path=path,
            body=response.content,
            media_type=media_type,
            status_code=response.status_code,
        )
