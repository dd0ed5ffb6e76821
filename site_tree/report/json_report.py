# site_tree/report/json_report.py

"""
Генерация JSON-отчёта для проекта SiteTree.

Сериализация графа страниц (по одному дереву на seed) в файл.
"""
import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple

from site_tree.crawler.models import Page


def page_to_dict(root: Page) -> Dict[str, Any]:
    """
    Превращает граф страниц в вложенный dict без циклов.

    Циклическая ссылка -> {"url": ..., "cyclic": true},
    ссылка без href -> {"url": null}.
    """
    def node(page: Page) -> Dict[str, Any]:
        return {"url": page.url, "fail": page.fail, "static_assets": list(page.static_assets), "links": []}

    result = node(root)
    stack: List[Tuple[Page, Dict[str, Any]]] = [(root, result)]
    while stack:
        page, out = stack.pop()
        for link in page.links:
            if link.page is None:
                out["links"].append({"url": None})
            elif link.cyclic:
                out["links"].append({"url": link.page.url, "cyclic": True})
            else:
                child = node(link.page)
                out["links"].append(child)
                stack.append((link.page, child))
    return result


def render_json(pages: Iterable[Page], output_path: Path | str) -> Path:
    """
    Сохраняет деревья страниц в формате JSON по указанному пути.

    :param pages: корневые страницы, по одной на seed
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    data = [page_to_dict(p) for p in pages]

    with output.open('w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    return output
