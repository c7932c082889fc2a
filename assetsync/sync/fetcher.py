"""
Asset downloader for Asset Sync.

Streams a single URL to a local file with aiohttp, following a bounded
number of 301/302 redirects by hand.
"""

import asyncio
import ssl
from pathlib import Path
from typing import Optional

import aiohttp
import certifi
from yarl import URL

from ..config import SyncConfig
from ..core.constants import (
    REDIRECT_STATUSES,
    MAX_REDIRECTS,
    CONNECT_TIMEOUT,
    READ_TIMEOUT,
    CHUNK_SIZE,
)
from ..errors import HttpStatusError, TooManyRedirectsError, InvalidRedirectError


def redirect_target(location: Optional[str]) -> str:
    """
    Validate a redirect Location header.

    Only absolute http(s) URLs are followed.

    Raises:
        InvalidRedirectError: If the location is missing, relative or
            uses another scheme
    """
    if not location:
        raise InvalidRedirectError(location)
    try:
        url = URL(location)
    except ValueError as e:
        raise InvalidRedirectError(location) from e
    if not url.is_absolute() or url.scheme not in ("http", "https"):
        raise InvalidRedirectError(location)
    return location


class AssetFetcher:
    """
    Downloads assets over HTTP(S), one at a time.

    Use as an async context manager so the underlying session is closed:

        async with AssetFetcher.from_config(config) as fetcher:
            await fetcher.fetch(url, dest)
    """

    def __init__(
        self,
        max_redirects: int = MAX_REDIRECTS,
        connect_timeout: float = CONNECT_TIMEOUT,
        read_timeout: float = READ_TIMEOUT,
        chunk_size: int = CHUNK_SIZE,
    ):
        self.max_redirects = max_redirects
        self.timeout = aiohttp.ClientTimeout(connect=connect_timeout, sock_read=read_timeout)
        self.chunk_size = chunk_size
        self._session: Optional[aiohttp.ClientSession] = None

    @classmethod
    def from_config(cls, config: SyncConfig) -> "AssetFetcher":
        return cls(
            max_redirects=config.max_redirects,
            connect_timeout=config.connect_timeout,
            read_timeout=config.read_timeout,
        )

    async def __aenter__(self) -> "AssetFetcher":
        ssl_context = ssl.create_default_context(cafile=certifi.where())
        connector = aiohttp.TCPConnector(ssl=ssl_context)
        self._session = aiohttp.ClientSession(connector=connector, timeout=self.timeout)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if self._session:
            await self._session.close()
            self._session = None

    async def fetch(self, url: str, dest: Path):
        """
        Download url to dest, creating parent directories.

        Raises:
            HttpStatusError: Final response was not 200
            TooManyRedirectsError: More than max_redirects hops
            InvalidRedirectError: Redirect to a non-absolute URL
            aiohttp.ClientError, asyncio.TimeoutError: Transport failure;
                any file at dest is removed first
        """
        if self._session is None:
            raise RuntimeError("AssetFetcher must be used as an async context manager")

        dest = Path(dest)
        dest.parent.mkdir(parents=True, exist_ok=True)

        try:
            await self._get(url, dest, url, 0)
        except (aiohttp.ClientError, asyncio.TimeoutError):
            self._remove_partial(dest)
            raise

    async def _get(self, url: str, dest: Path, origin: str, redirects: int):
        async with self._session.get(url, allow_redirects=False) as response:
            if response.status == 200:
                await self._write_response(response, dest)
                return
            if response.status not in REDIRECT_STATUSES:
                raise HttpStatusError(response.status, url)
            location = response.headers.get("Location")

        if redirects >= self.max_redirects:
            raise TooManyRedirectsError(origin, self.max_redirects)
        await self._get(redirect_target(location), dest, origin, redirects + 1)

    async def _write_response(self, response: aiohttp.ClientResponse, dest: Path):
        """Stream response body to file."""
        with open(dest, "wb") as f:
            async for chunk in response.content.iter_chunked(self.chunk_size):
                if chunk:
                    f.write(chunk)

    @staticmethod
    def _remove_partial(dest: Path):
        try:
            dest.unlink()
        except OSError:
            pass
