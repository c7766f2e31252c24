"""
pdf/bookmarks.py — spis treści z osadzonych zakładek (outline) PDF.

Poziomy zakładek z PyMuPDF są już 1-based, więc las budujemy tym samym
algorytmem stosu poziomów co w ścieżce semantycznej.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

import fitz  # PyMuPDF

from data_model.toc import NO_PAGE, TocNode
from pdf.errors import NoBookmarksError
from pdf.text_extractor import open_document
from semantic.hierarchy import TocEntry, build_tree

UNTITLED = "(bez tytułu)"


def extract_bookmarks(path: str | Path) -> list[TocNode]:
    """Zwraca las zakładek; brak zakładek → NoBookmarksError."""
    doc = open_document(path)
    try:
        return bookmarks_from_document(doc)
    finally:
        doc.close()


def bookmarks_from_document(doc: fitz.Document) -> list[TocNode]:
    outline = doc.get_toc(simple=True)
    if not outline:
        raise NoBookmarksError("Ten PDF nie ma spisu treści (zakładek)")
    return bookmarks_to_tree(outline)


def bookmarks_to_tree(outline: Iterable[Sequence]) -> list[TocNode]:
    """outline: wpisy [poziom, tytuł, strona] w formacie doc.get_toc(simple=True)."""
    return build_tree(
        TocEntry(
            title=(title or "").strip() or UNTITLED,
            page=str(page) if isinstance(page, int) and page > 0 else NO_PAGE,
            level=level,
        )
        for level, title, page, *_ in outline
    )


def count_bookmarks(doc: fitz.Document) -> int:
    return len(doc.get_toc(simple=True))
