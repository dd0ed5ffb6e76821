import asyncio

import pytest

from site_tree.crawler.registry import VisitedRegistry


@pytest.mark.asyncio()
async def test_register_then_get_returns_same_page():
    registry = VisitedRegistry()
    page, present = await registry.register_or_get("example.com/a")
    again, present_again = await registry.register_or_get("example.com/a")

    assert present is False
    assert present_again is True
    assert again is page
    assert page.url == "example.com/a"
    assert page.links == [] and page.static_assets == [] and not page.fail


@pytest.mark.asyncio()
async def test_concurrent_register_creates_exactly_once():
    registry = VisitedRegistry()
    (p1, seen1), (p2, seen2) = await asyncio.gather(
        registry.register_or_get("example.com/x"),
        registry.register_or_get("example.com/x"),
    )
    assert p1 is p2
    assert sorted([seen1, seen2]) == [False, True]


@pytest.mark.asyncio()
async def test_many_concurrent_registrations():
    registry = VisitedRegistry()
    urls = [f"example.com/{i % 10}" for i in range(200)]
    results = await asyncio.gather(*(registry.register_or_get(u) for u in urls))

    created = [page.url for page, seen in results if not seen]
    assert sorted(created) == sorted({*urls})
    assert len(registry) == 10
    for page, _ in results:
        assert registry.get(page.url) is page


@pytest.mark.asyncio()
async def test_pages_keep_discovery_order():
    registry = VisitedRegistry()
    for url in ("b", "a", "c", "a"):
        await registry.register_or_get(url)
    assert [p.url for p in registry.pages()] == ["b", "a", "c"]
    assert "a" in registry
    assert "z" not in registry
    assert registry.get("z") is None
