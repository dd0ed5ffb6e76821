# File: site_tree/engine.py
"""site_tree.engine: Orchestration layer для последовательного запуска обходов по списку seed URL."""

from __future__ import annotations

from contextlib import AsyncExitStack
from typing import List, Optional, Sequence

from site_tree.config import CrawlerConfig
from site_tree.crawler.crawler import Crawler
from site_tree.crawler.fetcher import Fetcher, HttpFetcher
from site_tree.crawler.gate import ConcurrencyGate
from site_tree.crawler.models import Page
from site_tree.logger import logger
from site_tree.parser.html_parser import HtmlParser, Parser
from site_tree.report.tree import crawl_summary

__all__ = ["start_crawl"]


async def start_crawl(
    seeds: Sequence[str],
    config: Optional[CrawlerConfig] = None,
    fetcher: Optional[Fetcher] = None,
    parser: Optional[Parser] = None,
) -> List[Page]:
    """Обходит каждый seed по очереди и возвращает корневые страницы в том же порядке.

    Все обходы делят одну HTTP-сессию, один парсер и один ConcurrencyGate.
    Если fetcher не передан, создаётся HttpFetcher по конфигу и закрывается в конце.
    """
    config = config or CrawlerConfig()
    parser = parser or HtmlParser()
    gate = ConcurrencyGate(config.concurrency)
    roots: List[Page] = []

    async with AsyncExitStack() as stack:
        if fetcher is None:
            fetcher = await stack.enter_async_context(HttpFetcher(config))
        for seed in seeds:
            root = await Crawler(seed, fetcher, parser=parser, gate=gate).crawl()
            logger.info("Итог %s: %s", seed, crawl_summary(root))
            roots.append(root)
    return roots
