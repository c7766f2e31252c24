"""Eksport spisu treści do Markdown (lista zagnieżdżona)."""

from __future__ import annotations

from collections.abc import Iterable

from data_model.toc import TocNode
from exporters.base import ExportOptions, Exporter, walk


class MarkdownExporter(Exporter):
    format_name = "Markdown"
    file_extension = "md"

    def export(self, nodes: Iterable[TocNode], options: ExportOptions | None = None) -> str:
        options = options or ExportOptions()
        lines = [f"# {options.resolved_title}", ""]

        for node in walk(nodes, options):
            title = _escape(node.title)
            if options.include_links and node.page_number > 0:
                title = f"[{title}](#page-{node.page_number})"
            line = f"{options.indent * node.level}- {title}"
            page = options.format_page(node)
            if page:
                line += f" ({page})"
            lines.append(line)

        return "\n".join(lines) + "\n"


def _escape(text: str) -> str:
    for ch in ("\\", "[", "]", "*", "_", "`"):
        text = text.replace(ch, "\\" + ch)
    return text
