"""
SiteTree package initializer.
Defines package version and exposes the crawl API.
"""
__version__ = "0.1.0"

from site_tree.crawler import ConcurrencyGate, Crawler, Link, Page, crawl
from site_tree.exceptions import FetchError, ParseError, SiteTreeError

__all__ = [
    "__version__",
    "Crawler",
    "ConcurrencyGate",
    "Link",
    "Page",
    "crawl",
    "FetchError",
    "ParseError",
    "SiteTreeError",
]
