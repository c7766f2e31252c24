"""
semantic/analyzer.py — potok analizy semantycznej nagłówków.

Architektura:
  RawTextUnit[] → merge_fragments() → TextFragment[]
  → collect_statistics() → classify_fragment() dla każdego fragmentu
  → nagłówki posortowane (strona, y) → estimate_levels()
  → build_toc_tree() → list[TocNode]

Kluczowe funkcje publiczne:
  analyze_headings(fragments, options)      -> list[TextFragment]
  build_toc_from_fragments(fragments, opts) -> list[TocNode]
  build_semantic_toc(units, options)        -> list[TocNode]
  summarize_analysis(fragments, headings)   -> AnalysisSummary

Brak nagłówków to poprawny wynik (pusta lista), nie błąd.
"""

from __future__ import annotations

import logging
import statistics
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from data_model.fragments import RawTextUnit, TextFragment
from data_model.options import AnalysisOptions
from data_model.toc import TocNode
from semantic.classifier import classify_fragment
from semantic.hierarchy import build_toc_tree
from semantic.levels import estimate_levels
from semantic.merger import merge_fragments
from semantic.stats import collect_statistics

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AnalysisSummary:
    total_fragments:    int = 0
    heading_count:      int = 0
    average_confidence: float = 0.0
    headings_by_level:  dict[int, int] = field(default_factory=dict)
    average_font_size:  float = 0.0
    bold_count:         int = 0


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def analyze_headings(
    fragments: Sequence[TextFragment],
    options: AnalysisOptions | None = None,
) -> list[TextFragment]:
    """
    Klasyfikuje każdy fragment (wynik w fragment.result) i zwraca
    zaakceptowane nagłówki w kolejności (strona, y) z ustawionym poziomem.
    """
    options = options or AnalysisOptions.default()
    if not fragments:
        return []

    stats = collect_statistics(fragments)
    for fragment in fragments:
        fragment.result = classify_fragment(fragment, stats, options)

    headings = sorted(
        (f for f in fragments if f.result is not None and f.result.is_heading),
        key=lambda f: (f.page_number, f.y),
    )
    estimate_levels(headings, options)

    if options.debug_mode:
        _log_diagnostics(fragments, headings, stats.average_font_size)

    return headings


def build_toc_from_fragments(
    fragments: Sequence[TextFragment],
    options: AnalysisOptions | None = None,
) -> list[TocNode]:
    return build_toc_tree(analyze_headings(fragments, options))


def build_semantic_toc(
    units: Iterable[RawTextUnit],
    options: AnalysisOptions | None = None,
) -> list[TocNode]:
    """Pełny potok od surowych jednostek tekstu do lasu TocNode."""
    options = options or AnalysisOptions.default()
    fragments = merge_fragments(units, options.skip_pages)
    if not fragments:
        if options.debug_mode:
            logger.debug("Brak fragmentów tekstu po scaleniu")
        return []
    return build_toc_from_fragments(fragments, options)


def summarize_analysis(
    fragments: Sequence[TextFragment],
    headings: Sequence[TextFragment],
) -> AnalysisSummary:
    confidences = [h.result.confidence for h in headings if h.result is not None]
    levels = Counter(h.result.level for h in headings if h.result is not None)
    return AnalysisSummary(
        total_fragments=len(fragments),
        heading_count=len(headings),
        average_confidence=statistics.fmean(confidences) if confidences else 0.0,
        headings_by_level=dict(sorted(levels.items())),
        average_font_size=statistics.fmean(f.font_size for f in fragments) if fragments else 0.0,
        bold_count=sum(1 for f in fragments if f.is_bold),
    )


# ---------------------------------------------------------------------------
# Diagnostyka
# ---------------------------------------------------------------------------

def _log_diagnostics(
    fragments: Sequence[TextFragment],
    headings: Sequence[TextFragment],
    average_font_size: float,
) -> None:
    logger.debug("Średni rozmiar fontu korpusu: %.2f", average_font_size)
    for fragment in fragments:
        result = fragment.result
        if result is None:
            continue
        logger.debug(
            "[s.%d] %-60.60s conf=%.2f lvl=%d sygnały=%s wykluczenia=%s",
            fragment.page_number,
            fragment.text.strip(),
            result.confidence,
            result.level,
            ",".join(result.reasons) or "-",
            ",".join(result.exclusions) or "-",
        )
    logger.debug(
        "Analiza semantyczna: %d nagłówków z %d fragmentów", len(headings), len(fragments)
    )
