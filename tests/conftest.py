import asyncio
from typing import Dict, List, Optional, Union

import pytest

from site_tree.config import CrawlerConfig
from site_tree.exceptions import FetchError

EXAMPLE_HTML = """<html>
  <head>
    <link rel="stylesheet" type="text/css" href="example.css">
  </head>
  <body>
    <a href="example.com/test">Example</a>
    <img src="example.png" alt="example"/>
    <script type="text/javascript" src="example.js"/>
  </body>
</html>"""


class FakeFetcher:
    """
    Serves canned content per URL; unknown URLs fail with FetchError.
    Records every fetched URL and the peak number of simultaneous fetches.
    """

    def __init__(self, site: Dict[str, Union[str, bytes]], delay: float = 0.0) -> None:
        self.site = site
        self.delay = delay
        self.fetched: List[str] = []
        self.in_flight = 0
        self.peak = 0

    async def fetch(self, url: str) -> Union[str, bytes]:
        self.fetched.append(url)
        self.in_flight += 1
        self.peak = max(self.peak, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
            if url not in self.site:
                raise FetchError(url, "not found")
            return self.site[url]
        finally:
            self.in_flight -= 1


def site_of(pages: Dict[str, List[str]], assets: Optional[Dict[str, List[str]]] = None) -> Dict[str, str]:
    """Build HTML documents from a {url: [hrefs]} adjacency map."""
    assets = assets or {}
    site = {}
    for url, hrefs in pages.items():
        body = "".join(f'<a href="{h}">{h}</a>' for h in hrefs)
        body += "".join(f'<img src="{a}">' for a in assets.get(url, []))
        site[url] = f"<html><body>{body}</body></html>"
    return site


@pytest.fixture()
def example_site() -> Dict[str, str]:
    """
    The reference scenario: a seed page with three assets and one link,
    and a linked page that is empty.
    """
    return {"example.com": EXAMPLE_HTML, "example.com/test": ""}


@pytest.fixture()
def basic_config() -> CrawlerConfig:
    """
    Return a small valid CrawlerConfig for crawler tests.
    """
    return CrawlerConfig(concurrency=4, timeout=2.0)
