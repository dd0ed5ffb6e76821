"""Тесты для рендеринга графа страниц: текст, JSON, HTML."""
import json

from site_tree.crawler.models import Link, Page
from site_tree.report import crawl_summary, iter_tree, page_to_dict, render_html, render_json, render_text


def example_tree() -> Page:
    child = Page("example.com/test")
    return Page(
        "example.com",
        links=[Link(child)],
        static_assets=["example.css", "example.png", "example.js"],
    )


def test_render_example_tree():
    assert render_text(example_tree()) == (
        "Page: example.com\n"
        "  StaticAsset:  example.css\n"
        "  StaticAsset:  example.png\n"
        "  StaticAsset:  example.js\n"
        "  Link:\n"
        "    Page: example.com/test\n"
    )


def test_render_failed_empty_and_cyclic_links():
    root = Page("http://s")
    broken = Page("http://s/broken", fail=True)
    root.links = [Link(broken), Link(), Link(root, cyclic=True)]

    assert render_text(root) == (
        "Page: http://s\n"
        "  Link:\n"
        "    Page: http://s/broken (Failed to get this URL)\n"
        "  Link: <empty anchor>\n"
        "  Link: http://s (already visited)\n"
    )


def test_render_is_deterministic():
    root = example_tree()
    assert render_text(root) == render_text(root)


def test_self_reference_terminates():
    root = Page("http://s")
    root.links.append(Link(root, cyclic=True))
    lines = list(iter_tree(root))
    assert [line.kind for line in lines] == ["page", "cyclic_link"]


def test_deep_chain_renders_without_recursion():
    root = page = Page("http://s/0")
    for i in range(1, 5000):
        nxt = Page(f"http://s/{i}")
        page.links.append(Link(nxt))
        page = nxt

    text = render_text(root)
    assert text.count("Page: ") == 5000
    assert text.splitlines()[-1] == "  " * 9998 + "Page: http://s/4999"
    assert page_to_dict(root)["links"][0]["url"] == "http://s/1"


def test_crawl_summary():
    root = Page("http://s", static_assets=["a.css", "a.css"])
    bad = Page("http://s/bad", fail=True)
    root.links = [Link(bad), Link(), Link(bad, cyclic=True)]
    assert crawl_summary(root) == {
        "pages": 2,
        "failed": 1,
        "links": 3,
        "cyclic_links": 1,
        "static_assets": 2,
    }


def test_page_to_dict_reduces_cycles():
    root = Page("http://s", static_assets=["x.png"])
    child = Page("http://s/a")
    child.links = [Link(root, cyclic=True), Link()]
    root.links = [Link(child)]

    assert page_to_dict(root) == {
        "url": "http://s",
        "fail": False,
        "static_assets": ["x.png"],
        "links": [
            {
                "url": "http://s/a",
                "fail": False,
                "static_assets": [],
                "links": [{"url": "http://s", "cyclic": True}, {"url": None}],
            }
        ],
    }


def test_render_json_file(tmp_path):
    out = render_json([example_tree(), Page("other.org", fail=True)], tmp_path / "out" / "report.json")
    data = json.loads(out.read_text(encoding="utf-8"))
    assert [d["url"] for d in data] == ["example.com", "other.org"]
    assert data[1]["fail"] is True
    assert data[0]["links"][0]["url"] == "example.com/test"


def test_render_html_file_escapes_content(tmp_path):
    root = example_tree()
    root.static_assets.append('"><script>alert(1)</script>')
    out = render_html([root], tmp_path / "report.html")
    html = out.read_text(encoding="utf-8")
    assert "example.com/test" in html
    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html
