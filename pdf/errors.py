"""pdf/errors.py — wyjątki warstwy czytania PDF."""

from __future__ import annotations


class TocExtractionError(Exception):
    """Bazowy wyjątek ekstrakcji spisu treści."""


class PdfReadError(TocExtractionError):
    """Dokumentu nie da się otworzyć ani odczytać."""


class NoBookmarksError(TocExtractionError):
    """Dokument nie ma osadzonego spisu treści (zakładek)."""
