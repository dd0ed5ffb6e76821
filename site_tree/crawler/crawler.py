# === FILE: site_tree/crawler/crawler.py ===
from __future__ import annotations

import time
from typing import Optional

from bs4.element import Tag

from site_tree.crawler.fetcher import Fetcher
from site_tree.crawler.gate import ConcurrencyGate
from site_tree.crawler.models import Link, Page
from site_tree.crawler.registry import VisitedRegistry
from site_tree.crawler.tracker import CompletionTracker
from site_tree.exceptions import FetchError, ParseError
from site_tree.logger import logger
from site_tree.parser.html_parser import HtmlParser, Parser, attribute_values, iter_elements

__all__ = ("Crawler", "crawl")


class Crawler:
    """Обходит один сайт от seed URL и строит граф страниц.

    Каждая найденная страница обрабатывается своей задачей; одновременно в
    работе не больше ``gate.capacity`` загрузок. Один экземпляр = один обход.
    """

    def __init__(
        self,
        seed: str,
        fetcher: Fetcher,
        parser: Optional[Parser] = None,
        gate: Optional[ConcurrencyGate] = None,
    ) -> None:
        self.domain = seed
        self.fetcher = fetcher
        self.parser = parser or HtmlParser()
        self.gate = gate or ConcurrencyGate()
        self.registry = VisitedRegistry()
        self.tracker = CompletionTracker()

    async def crawl(self) -> Page:
        logger.info("Старт обхода: %s", self.domain)
        start = time.monotonic()
        root, _ = await self.registry.register_or_get(self.domain)
        self._spawn(root)
        await self.tracker.wait()
        failed = sum(1 for p in self.registry.pages() if p.fail)
        logger.info(
            "Завершено %s: %d страниц (%d с ошибкой) за %.2f с, пик загрузок %d/%d",
            self.domain,
            len(self.registry),
            failed,
            time.monotonic() - start,
            self.gate.peak,
            self.gate.capacity,
        )
        return root

    def _spawn(self, page: Page) -> None:
        logger.debug("Queued %s", page.url)
        self.tracker.spawn(self._crawl_page(page), name=f"crawl:{page.url}")

    async def _crawl_page(self, page: Page) -> None:
        async with self.gate:
            try:
                content = await self.fetcher.fetch(page.url)
                root = self.parser.parse(content)
            except (FetchError, ParseError) as exc:
                logger.warning("Failed %s: %s", page.url, exc)
                page.fail = True
                return
            await self._extract(root, page)

    async def _extract(self, root: Tag, page: Page) -> None:
        for node in iter_elements(root):
            if node.name == "a":
                await self._add_anchor(node, page)
            elif node.name == "link":
                self._add_asset(node, "href", page)
            elif node.name in ("img", "script"):
                self._add_asset(node, "src", page)

    async def _add_anchor(self, node: Tag, page: Page) -> None:
        hrefs = attribute_values(node, "href")
        if not hrefs:
            page.links.append(Link())
            return
        url = hrefs[0].strip()
        if url.startswith("/"):
            url = self.domain + url
        # same-site check is a plain prefix match against the seed
        if not url.startswith(self.domain):
            return
        target, seen = await self.registry.register_or_get(url)
        page.links.append(Link(page=target, cyclic=seen))
        if not seen:
            self._spawn(target)

    @staticmethod
    def _add_asset(node: Tag, attr: str, page: Page) -> None:
        page.static_assets.extend(attribute_values(node, attr))


async def crawl(
    seed: str,
    fetcher: Fetcher,
    parser: Optional[Parser] = None,
    gate: Optional[ConcurrencyGate] = None,
) -> Page:
    """Crawl everything reachable from *seed* and return its root page."""
    return await Crawler(seed, fetcher, parser=parser, gate=gate).crawl()
