"""
pdf/toc_extractor.py — punkty wejścia ekstrakcji spisu treści z pliku PDF.

  extract_toc_semantic(path, options) -> list[TocNode]
  extract_toc_smart(path, options)    -> SmartResult  (zakładki, potem analiza semantyczna)
  analyze_document(path, options)     -> (fragmenty, nagłówki)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from data_model.fragments import TextFragment
from data_model.options import AnalysisOptions
from data_model.toc import TocNode, count_nodes
from pdf.bookmarks import extract_bookmarks
from pdf.errors import NoBookmarksError
from pdf.text_extractor import extract_text_fragments
from semantic.analyzer import analyze_headings
from semantic.hierarchy import build_toc_tree

logger = logging.getLogger(__name__)

TocSource = Literal["bookmarks", "semantic"]


@dataclass(slots=True)
class SmartResult:
    nodes:  list[TocNode]
    source: TocSource


def analyze_document(
    path: str | Path,
    options: AnalysisOptions | None = None,
) -> tuple[list[TextFragment], list[TextFragment]]:
    """Zwraca (wszystkie fragmenty, zaakceptowane nagłówki) — do diagnostyki."""
    options = options or AnalysisOptions.default()
    fragments = extract_text_fragments(path, options)
    return fragments, analyze_headings(fragments, options)


def extract_toc_semantic(
    path: str | Path,
    options: AnalysisOptions | None = None,
) -> list[TocNode]:
    options = options or AnalysisOptions.default()
    if options.debug_mode:
        logger.debug("Analiza semantyczna: %s (%s)", Path(path).name, options.describe())

    fragments, headings = analyze_document(path, options)
    if not fragments:
        logger.debug("Nie wyodrębniono żadnych fragmentów tekstu")
        return []

    nodes = build_toc_tree(headings)
    if options.debug_mode:
        logger.debug("Wynik: %d korzeni, %d pozycji", len(nodes), count_nodes(nodes))
    return nodes


def extract_toc_smart(
    path: str | Path,
    options: AnalysisOptions | None = None,
) -> SmartResult:
    try:
        return SmartResult(nodes=extract_bookmarks(path), source="bookmarks")
    except NoBookmarksError:
        logger.info("Brak zakładek w %s — przełączam na analizę semantyczną", Path(path).name)
    return SmartResult(nodes=extract_toc_semantic(path, options), source="semantic")
