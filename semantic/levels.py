"""
semantic/levels.py — wyznaczanie poziomu (1-based) zaakceptowanych nagłówków.

Priorytet:
  1. Jawna numeracja: "2.1.3" → 3, "1." → 1, 第X章 / Chapter N / Rozdział N → 1, 第X节 → 2.
  2. Ranga rozmiaru fontu wśród wszystkich zaakceptowanych nagłówków
     (rozmiary unikalne, malejąco), obcięta do options.max_heading_levels.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from data_model.fragments import TextFragment
from data_model.options import AnalysisOptions

_CN_DIGITS = "一二三四五六七八九十百零〇"

# Co najmniej dwa segmenty: "1.2", "1.2.3.", "1.1、"
_OUTLINE_RE = re.compile(r"^(\d+(?:\.\d+)+)\.?(?![\d.])")
# Jeden segment wymaga kropki lub 、 : "1. Wstęp", "1、概述"
_SINGLE_RE = re.compile(r"^(\d+)[.、]")

_CHAPTER_PATTERNS: tuple[tuple[re.Pattern[str], int], ...] = (
    (re.compile(rf"^第\s*[{_CN_DIGITS}\d]+\s*章"), 1),
    (re.compile(rf"^第\s*[{_CN_DIGITS}\d]+\s*节"), 2),
    (re.compile(r"^(Chapter|Rozdzia[łl])\s+[\dIVXLC]+\b", re.IGNORECASE), 1),
)


def level_from_numbering(text: str) -> int:
    """Poziom z numeracji; 0 gdy tekst nie zaczyna się od rozpoznanej numeracji."""
    text = text.strip()

    m = _OUTLINE_RE.match(text)
    if m:
        return len(m.group(1).split("."))
    if _SINGLE_RE.match(text):
        return 1

    for regex, level in _CHAPTER_PATTERNS:
        if regex.match(text):
            return level
    return 0


def estimate_levels(headings: Sequence[TextFragment], options: AnalysisOptions) -> None:
    """Ustawia result.level (in place) dla każdego nagłówka z wynikiem klasyfikacji."""
    if not headings:
        return

    sizes = sorted({h.font_size for h in headings}, reverse=True)
    rank = {size: i + 1 for i, size in enumerate(sizes)}

    for heading in headings:
        if heading.result is None:
            continue
        level = level_from_numbering(heading.text)
        if level == 0:
            level = min(rank[heading.font_size], options.max_heading_levels)
        heading.result.level = level
