# site_tree/report/text_report.py

"""
Текстовое дерево страниц: формат вывода по умолчанию для CLI.
"""
from site_tree.crawler.models import Page
from site_tree.report.tree import ASSET, CYCLIC_LINK, EMPTY_LINK, LINK, PAGE, TreeLine, iter_tree

INDENT = "  "


def format_line(line: TreeLine) -> str:
    if line.kind == PAGE:
        text = f"Page: {line.text}"
        if line.failed:
            text += " (Failed to get this URL)"
    elif line.kind == ASSET:
        text = f"StaticAsset:  {line.text}"
    elif line.kind == LINK:
        text = "Link:"
    elif line.kind == EMPTY_LINK:
        text = "Link: <empty anchor>"
    elif line.kind == CYCLIC_LINK:
        text = f"Link: {line.text} (already visited)"
    else:
        raise ValueError(f"unknown tree line kind: {line.kind!r}")
    return INDENT * line.depth + text


def render_text(page: Page) -> str:
    """
    Рендерит граф страниц в текст.

    Пример:
    ```
    Page: example.com
      StaticAsset:  example.css
      Link:
        Page: example.com/test
      Link: example.com (already visited)
    ```
    """
    return "".join(format_line(line) + "\n" for line in iter_tree(page))
