# File: site_tree/report/tree.py
"""site_tree.report.tree: Плоское представление графа страниц для всех форматов отчёта."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple, Union

from site_tree.crawler.models import Page

PAGE = "page"
ASSET = "asset"
LINK = "link"
EMPTY_LINK = "empty_link"
CYCLIC_LINK = "cyclic_link"


@dataclass(slots=True, frozen=True)
class TreeLine:
    """Одна строка дерева: глубина, вид строки, текст (URL) и признак ошибки."""

    depth: int
    kind: str
    text: Optional[str] = None
    failed: bool = False


def iter_tree(root: Page) -> Iterator[TreeLine]:
    """Обходит граф в прямом порядке без рекурсии.

    Циклические ссылки не раскрываются, поэтому обход всегда конечен.
    """
    stack: List[Tuple[int, Union[Page, TreeLine]]] = [(0, root)]
    while stack:
        depth, item = stack.pop()
        if isinstance(item, TreeLine):
            yield item
            continue
        yield TreeLine(depth, PAGE, item.url, item.fail)
        pending: List[Tuple[int, Union[Page, TreeLine]]] = []
        for asset in item.static_assets:
            pending.append((depth + 1, TreeLine(depth + 1, ASSET, asset)))
        for link in item.links:
            if link.page is None:
                pending.append((depth + 1, TreeLine(depth + 1, EMPTY_LINK)))
            elif link.cyclic:
                pending.append((depth + 1, TreeLine(depth + 1, CYCLIC_LINK, link.page.url)))
            else:
                pending.append((depth + 1, TreeLine(depth + 1, LINK)))
                pending.append((depth + 2, link.page))
        stack.extend(reversed(pending))


def crawl_summary(root: Page) -> Dict[str, int]:
    """Считает страницы, ошибки, ссылки и ресурсы, достижимые из root."""
    summary = {"pages": 0, "failed": 0, "links": 0, "cyclic_links": 0, "static_assets": 0}
    for line in iter_tree(root):
        if line.kind == PAGE:
            summary["pages"] += 1
            summary["failed"] += int(line.failed)
        elif line.kind == ASSET:
            summary["static_assets"] += 1
        else:
            summary["links"] += 1
            summary["cyclic_links"] += int(line.kind == CYCLIC_LINK)
    return summary


__all__ = ["TreeLine", "iter_tree", "crawl_summary", "PAGE", "ASSET", "LINK", "EMPTY_LINK", "CYCLIC_LINK"]
