# site_tree/crawler/models.py
"""
Data models for the SiteTree crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(slots=True, eq=False)
class Link:
    """Edge from the owning page to another page.

    ``page`` is ``None`` for anchors without an href. ``cyclic`` marks a
    back-edge: the target was already registered when the anchor was found.
    """

    page: Optional[Page] = None
    cyclic: bool = False


@dataclass(slots=True, eq=False)
class Page:
    """Canonical record of one discovered URL within a crawl run."""

    url: str
    fail: bool = False
    links: List[Link] = field(default_factory=list)
    static_assets: List[str] = field(default_factory=list)

    def __repr__(self) -> str:
        # default repr would recurse through cyclic links
        return (
            f"Page(url={self.url!r}, fail={self.fail}, "
            f"links={len(self.links)}, static_assets={len(self.static_assets)})"
        )
