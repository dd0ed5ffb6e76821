# site_tree/exceptions.py
"""Exception hierarchy shared by the crawler and its collaborators."""
from __future__ import annotations


class SiteTreeError(Exception):
    """Base class for SiteTree errors."""


class FetchError(SiteTreeError):
    """The content of a URL could not be retrieved."""

    def __init__(self, url: str, reason: object = None) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"failed to fetch {url}: {reason}" if reason else f"failed to fetch {url}")


class ParseError(SiteTreeError):
    """Fetched content could not be turned into a node tree."""


__all__ = ["SiteTreeError", "FetchError", "ParseError"]
