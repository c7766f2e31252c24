"""Eksport spisu treści do zwykłego tekstu."""

from __future__ import annotations

from collections.abc import Iterable

from data_model.toc import TocNode
from exporters.base import ExportOptions, Exporter, walk


class TextExporter(Exporter):
    format_name = "Text"
    file_extension = "txt"

    def export(self, nodes: Iterable[TocNode], options: ExportOptions | None = None) -> str:
        options = options or ExportOptions()
        title = options.resolved_title
        lines = [title, "=" * len(title), ""]

        for node in walk(nodes, options):
            line = f"{options.indent * node.level}- {node.title}"
            page = options.format_page(node)
            if page:
                line += f" ({page})"
            lines.append(line)

        return "\n".join(lines) + "\n"
