"""
pdf/text_extractor.py — ekstrakcja tekstu z pozycją i fontem z dokumentów PDF.

Architektura:
  pdf_path → open_document() → strony (bez skip_pages)
  → spany PyMuPDF (dict) → RawTextUnit (bez pasów nagłówka/stopki)
  → merge_fragments() → list[TextFragment]

Kluczowe funkcje publiczne:
  open_document(path)                  -> fitz.Document
  extract_raw_units(doc, options)      -> list[RawTextUnit]
  extract_text_fragments(path, options) -> list[TextFragment]
"""

from __future__ import annotations

import logging
from pathlib import Path

import fitz  # PyMuPDF

from data_model.fragments import RawTextUnit, TextFragment
from data_model.options import AnalysisOptions
from pdf.errors import PdfReadError
from semantic.merger import merge_fragments

logger = logging.getLogger(__name__)

# Flagi spanów PyMuPDF
_FLAG_ITALIC = 1 << 1
_FLAG_BOLD = 1 << 4


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def open_document(path: str | Path) -> fitz.Document:
    """
    Otwiera PDF. Dokument zaszyfrowany próbujemy odblokować pustym hasłem
    (typowe dla PDF z samym hasłem właściciela).
    """
    pdf_path = Path(path)
    if not pdf_path.exists():
        raise PdfReadError(f"Plik PDF nie istnieje: {pdf_path}")

    try:
        doc = fitz.open(str(pdf_path))
    except Exception as e:
        raise PdfReadError(f"Nie można otworzyć PDF {pdf_path}: {e}") from e

    if doc.needs_pass and not doc.authenticate(""):
        doc.close()
        raise PdfReadError(f"PDF jest zaszyfrowany i wymaga hasła: {pdf_path}")
    return doc


def extract_text_fragments(
    path: str | Path,
    options: AnalysisOptions | None = None,
) -> list[TextFragment]:
    options = options or AnalysisOptions.default()
    doc = open_document(path)
    try:
        if options.debug_mode:
            logger.debug(
                "Ekstrakcja tekstu: %s, stron: %d, pomijane: %s",
                Path(path).name, doc.page_count, sorted(options.skip_pages),
            )
        units = extract_raw_units(doc, options)
    finally:
        doc.close()

    fragments = merge_fragments(units, options.skip_pages)
    if options.debug_mode:
        logger.debug("Scalanie: %d → %d fragmentów", len(units), len(fragments))
    return fragments


def extract_raw_units(doc: fitz.Document, options: AnalysisOptions) -> list[RawTextUnit]:
    """Błąd pojedynczej strony jest logowany (tryb debug) i strona jest pomijana."""
    units: list[RawTextUnit] = []
    for page in doc:
        page_number = page.number + 1  # 1-based
        if page_number in options.skip_pages:
            if options.debug_mode:
                logger.debug("Pomijam stronę %d", page_number)
            continue
        try:
            page_units = _extract_page(page, page_number, options)
        except Exception as e:
            if options.debug_mode:
                logger.debug("Błąd strony %d: %s", page_number, e)
            continue
        if options.debug_mode:
            logger.debug("Strona %d: %d jednostek tekstu", page_number, len(page_units))
        units.extend(page_units)
    return units


# ---------------------------------------------------------------------------
# Wewnętrzna implementacja
# ---------------------------------------------------------------------------

def _extract_page(page: fitz.Page, page_number: int, options: AnalysisOptions) -> list[RawTextUnit]:
    page_height = page.rect.height
    page_dict = page.get_text("dict", flags=fitz.TEXT_PRESERVE_WHITESPACE)

    units: list[RawTextUnit] = []
    for block in page_dict.get("blocks", []):
        if block.get("type") != 0:
            continue
        for line in block.get("lines", []):
            for span in line.get("spans", []):
                text = span.get("text", "")
                if not text.strip():
                    continue
                x0, y0, x1, y1 = span.get("bbox", (0.0, 0.0, 0.0, 0.0))
                if options.ignore_header_footer and _in_margin_band(y0, y1, page_height, options):
                    continue
                flags = span.get("flags", 0)
                units.append(RawTextUnit(
                    text=text,
                    page_number=page_number,
                    font_size=span.get("size", 0.0),
                    font_name=span.get("font", ""),
                    is_bold=bool(flags & _FLAG_BOLD) or "bold" in span.get("font", "").lower(),
                    is_italic=bool(flags & _FLAG_ITALIC),
                    x=x0,
                    y=y0,
                    width=x1 - x0,
                    height=y1 - y0,
                ))
    return units


def _in_margin_band(y0: float, y1: float, page_height: float, options: AnalysisOptions) -> bool:
    if y1 <= options.header_height:
        return True
    return y0 >= page_height - options.footer_height
