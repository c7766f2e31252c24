"""
exporters/base.py — wspólne opcje i klasa bazowa eksporterów spisu treści.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from data_model.toc import NO_PAGE, TocNode

DEFAULT_TITLE = "Spis treści"


@dataclass(frozen=True, slots=True)
class ExportOptions:
    """
    - indent:               wcięcie na poziom
    - include_page_numbers: dopisuj etykietę strony
    - include_links:        linki do stron (tylko markdown)
    - max_depth:            0 = bez limitu; inaczej tylko węzły o level < max_depth
    - page_format:          format etykiety strony, np. "s. {}"
    - title:                tytuł dokumentu wyjściowego
    """
    indent:               str = "  "
    include_page_numbers: bool = True
    include_links:        bool = False
    max_depth:            int = 0
    page_format:          str = "s. {}"
    title:                str | None = None
    encoding:             str = "utf-8"

    @property
    def resolved_title(self) -> str:
        return self.title or DEFAULT_TITLE

    def within_depth(self, node: TocNode) -> bool:
        return self.max_depth <= 0 or node.level < self.max_depth

    def format_page(self, node: TocNode) -> str | None:
        if not self.include_page_numbers or not node.page or node.page == NO_PAGE:
            return None
        return self.page_format.format(node.page)


class Exporter(ABC):
    format_name:    str = ""
    file_extension: str = ""

    @abstractmethod
    def export(self, nodes: Iterable[TocNode], options: ExportOptions | None = None) -> str:
        ...

    def export_to_file(
        self,
        nodes: Iterable[TocNode],
        path: str | Path,
        options: ExportOptions | None = None,
    ) -> Path:
        options = options or ExportOptions()
        out = Path(path)
        out.write_text(self.export(nodes, options), encoding=options.encoding)
        return out


def walk(nodes: Iterable[TocNode], options: ExportOptions) -> Iterator[TocNode]:
    """Pre-order po węzłach mieszczących się w max_depth."""
    for node in nodes:
        if not options.within_depth(node):
            continue
        yield node
        yield from walk(node.children, options)
