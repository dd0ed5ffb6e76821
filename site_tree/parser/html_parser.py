# site_tree/parser/html_parser.py
"""HTML parsing for SiteTree.

The crawler needs very little from a parser: a tree of elements, each with a
tag name and its attributes, walkable in document order. BeautifulSoup gives
us that directly, so :class:`HtmlParser` is a thin wrapper that

* keeps attribute values verbatim (no splitting of ``class`` and friends),
* keeps every value of a repeated attribute, in source order,
* turns any failure of the builder into :class:`ParseError`.

:func:`iter_elements` walks the result without recursion, so pathologically
deep markup cannot exhaust the interpreter stack.
"""
from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Protocol, Union

from bs4 import BeautifulSoup, ParserRejectedMarkup
from bs4.element import Tag

from site_tree.exceptions import ParseError

__all__: Sequence[str] = ("Parser", "HtmlParser", "attribute_values", "iter_elements")


class Parser(Protocol):
    def parse(self, content: Union[str, bytes]) -> Tag:
        """Return the root of the node tree or raise :class:`ParseError`."""
        ...


def _keep_all_values(attrs: dict, key: str, value: str) -> None:
    # repeated attribute: the value becomes a list, first occurrence first
    current = attrs[key]
    if isinstance(current, list):
        current.append(value)
    else:
        attrs[key] = [current, value]


class HtmlParser:
    """BeautifulSoup-backed :class:`Parser`."""

    def parse(self, content: Union[str, bytes]) -> BeautifulSoup:
        try:
            return BeautifulSoup(
                content,
                "html.parser",
                multi_valued_attributes=None,
                on_duplicate_attribute=_keep_all_values,
            )
        except (ParserRejectedMarkup, UnicodeDecodeError) as exc:
            raise ParseError(str(exc)) from exc


def iter_elements(root: Tag) -> Iterator[Tag]:
    """Yield every element of the tree, depth-first in document order.

    A document root (the ``BeautifulSoup`` object itself) is not an element
    and is skipped; its children are not.
    """
    stack: list[Tag] = [root]
    while stack:
        node = stack.pop()
        if not isinstance(node, BeautifulSoup):
            yield node
        stack.extend(child for child in reversed(node.contents) if isinstance(child, Tag))


def attribute_values(tag: Tag, name: str) -> list[str]:
    """Every value of attribute *name* on *tag*, in source order (empty if absent)."""
    value = tag.get(name)
    if value is None:
        return []
    if isinstance(value, list):
        return list(value)
    return [value]
