"""site_tree.crawler: concurrent crawl engine (gate, registry, tracker, tasks)."""

from site_tree.crawler.crawler import Crawler, crawl
from site_tree.crawler.fetcher import Fetcher, HttpFetcher
from site_tree.crawler.gate import ConcurrencyGate
from site_tree.crawler.models import Link, Page
from site_tree.crawler.registry import VisitedRegistry
from site_tree.crawler.tracker import CompletionTracker

__all__ = [
    "Crawler",
    "crawl",
    "Fetcher",
    "HttpFetcher",
    "ConcurrencyGate",
    "Link",
    "Page",
    "VisitedRegistry",
    "CompletionTracker",
]
