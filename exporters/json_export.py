"""Eksport spisu treści do JSON."""

from __future__ import annotations

import json
from collections.abc import Iterable
from datetime import datetime
from typing import Any

from data_model.toc import TocNode
from exporters.base import ExportOptions, Exporter


class JsonExporter(Exporter):
    format_name = "JSON"
    file_extension = "json"

    def export(self, nodes: Iterable[TocNode], options: ExportOptions | None = None) -> str:
        options = options or ExportOptions()
        data = {
            "title":        options.resolved_title,
            "generated_at": datetime.now().isoformat(timespec="seconds"),
            "items":        [_to_dict(n, options) for n in nodes if options.within_depth(n)],
        }
        return json.dumps(data, ensure_ascii=False, indent=2)


def _to_dict(node: TocNode, options: ExportOptions) -> dict[str, Any]:
    item: dict[str, Any] = {"title": node.title, "level": node.level}

    if options.format_page(node) is not None:
        item["page"] = node.page
        if node.page_number > 0:
            item["page_number"] = node.page_number

    children = [_to_dict(c, options) for c in node.children if options.within_depth(c)]
    if children:
        item["children"] = children

    item["full_path"] = node.full_path()
    return item
