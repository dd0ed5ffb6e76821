from site_tree.parser.html_parser import HtmlParser, attribute_values, iter_elements


def test_iter_elements_document_order():
    soup = HtmlParser().parse("<html><head><title>t</title></head><body><p><a>x</a></p><img></body></html>")
    assert [tag.name for tag in iter_elements(soup)] == ["html", "head", "title", "body", "p", "a", "img"]


def test_attribute_values_are_verbatim():
    soup = HtmlParser().parse('<link rel="stylesheet alternate" href=" a.css ">')
    link = next(iter_elements(soup))
    assert link["rel"] == "stylesheet alternate"
    assert link["href"] == " a.css "


def test_repeated_attribute_keeps_every_value():
    soup = HtmlParser().parse('<a href="/one" href="/two" href="/three">x</a><img src="a.png">')
    anchor, img = iter_elements(soup)
    assert attribute_values(anchor, "href") == ["/one", "/two", "/three"]
    assert attribute_values(img, "src") == ["a.png"]
    assert attribute_values(img, "alt") == []


def test_bytes_content():
    soup = HtmlParser().parse(b'<img src="a.png">')
    assert [tag["src"] for tag in iter_elements(soup)] == ["a.png"]


def test_deep_nesting_walks_without_recursion():
    depth = 1500
    soup = HtmlParser().parse("<div>" * depth + '<img src="deep.png">' + "</div>" * depth)
    tags = list(iter_elements(soup))
    assert len(tags) == depth + 1
    assert tags[-1]["src"] == "deep.png"
