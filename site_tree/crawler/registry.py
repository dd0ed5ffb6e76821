# site_tree/crawler/registry.py
"""
Visited registry: the single authority deciding whether a URL is new.
"""
from __future__ import annotations

import asyncio
from typing import Dict, List, Optional, Tuple

from site_tree.crawler.models import Page


class VisitedRegistry:
    """URL -> Page map shared by every task of one crawl.

    The lock guards every mutation of the map and makes check-and-insert
    atomic. The read-only helpers (`get`, `pages`, `in`, `len`) skip it: they
    never await, so on one event loop they cannot interleave with an insert.
    Page contents are written by the task that owns the URL and need no locking.
    """

    def __init__(self) -> None:
        self._pages: Dict[str, Page] = {}
        self._lock = asyncio.Lock()

    async def register_or_get(self, url: str) -> Tuple[Page, bool]:
        """Return ``(page, already_present)`` for *url*, creating the page if new."""
        async with self._lock:
            page = self._pages.get(url)
            if page is not None:
                return page, True
            page = Page(url=url)
            self._pages[url] = page
            return page, False

    def get(self, url: str) -> Optional[Page]:
        return self._pages.get(url)

    def pages(self) -> List[Page]:
        """Snapshot of registered pages in discovery order."""
        return list(self._pages.values())

    def __contains__(self, url: object) -> bool:
        return url in self._pages

    def __len__(self) -> int:
        return len(self._pages)
