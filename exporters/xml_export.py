"""Eksport spisu treści do XML."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterable
from datetime import datetime

from data_model.toc import TocNode
from exporters.base import ExportOptions, Exporter


class XmlExporter(Exporter):
    format_name = "XML"
    file_extension = "xml"

    def export(self, nodes: Iterable[TocNode], options: ExportOptions | None = None) -> str:
        options = options or ExportOptions()
        root = ET.Element("TableOfContents", {
            "title":        options.resolved_title,
            "generated_at": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        })
        for node in nodes:
            if options.within_depth(node):
                _write_item(root, node, options)

        ET.indent(root, space=options.indent or "  ")
        body = ET.tostring(root, encoding="unicode")
        return f'<?xml version="1.0" encoding="{options.encoding}"?>\n{body}\n'


def _write_item(parent: ET.Element, node: TocNode, options: ExportOptions) -> None:
    item = ET.SubElement(parent, "Item", {"level": str(node.level)})
    if options.format_page(node) is not None:
        item.set("page", node.page)
        if node.page_number > 0:
            item.set("page_number", str(node.page_number))

    ET.SubElement(item, "Title").text = node.title
    ET.SubElement(item, "FullPath").text = node.full_path()

    children = [c for c in node.children if options.within_depth(c)]
    if children:
        container = ET.SubElement(item, "Children")
        for child in children:
            _write_item(container, child, options)
