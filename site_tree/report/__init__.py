# File: site_tree/report/__init__.py
"""site_tree.report: Рендеринг графа страниц (текст, JSON, HTML), используемый CLI и тестами."""

from site_tree.report.html_report import render_html
from site_tree.report.json_report import page_to_dict, render_json
from site_tree.report.text_report import render_text
from site_tree.report.tree import TreeLine, crawl_summary, iter_tree

__all__ = [
    "render_text",
    "render_json",
    "render_html",
    "page_to_dict",
    "iter_tree",
    "crawl_summary",
    "TreeLine",
]
