# site_tree/crawler/fetcher.py
"""
Fetcher module: retrieves raw page content over HTTP.

The crawler only depends on the :class:`Fetcher` protocol, so tests can plug in
canned responses while production code issues real GET requests.
"""
from __future__ import annotations

import asyncio
from typing import Optional, Protocol, Union

from aiohttp import ClientError, ClientSession, ClientTimeout

from site_tree.config import CrawlerConfig
from site_tree.exceptions import FetchError

Content = Union[str, bytes]


class Fetcher(Protocol):
    async def fetch(self, url: str) -> Content:
        """Return the content of *url* or raise :class:`FetchError`."""
        ...


class HttpFetcher:
    """Plain HTTP GET fetcher backed by one aiohttp session.

    Any HTTP status is returned as content; only transport failures (refused
    connection, bad URL, timeout, broken body) raise :class:`FetchError`.
    No retries.
    """

    def __init__(
        self,
        config: Optional[CrawlerConfig] = None,
        session: Optional[ClientSession] = None,
    ) -> None:
        self.config = config or CrawlerConfig()
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self) -> HttpFetcher:
        if self.session is None:
            headers = {"User-Agent": self.config.user_agent} if self.config.user_agent else None
            timeout = ClientTimeout(total=self.config.timeout)
            self.session = ClientSession(timeout=timeout, headers=headers, raise_for_status=False)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    async def fetch(self, url: str) -> bytes:
        if not self.session:
            raise RuntimeError("Session not initialized")
        try:
            async with self.session.get(url) as resp:
                return await resp.read()
        except (ClientError, asyncio.TimeoutError, ValueError) as exc:
            raise FetchError(url, exc) from exc
