"""
semantic — heurystyczne wykrywanie nagłówków i odtwarzanie hierarchii spisu treści.

Publiczne API:
  merge_fragments(units, skip_pages)            -> list[TextFragment]
  collect_statistics(fragments)                 -> TextStatistics
  classify_fragment(fragment, stats, options)   -> ClassificationResult
  estimate_levels(headings, options)            -> None (in place)
  build_toc_tree(headings)                      -> list[TocNode]
  analyze_headings(fragments, options)          -> list[TextFragment]
  build_semantic_toc(units, options)            -> list[TocNode]

Typowe użycie:
    from semantic import build_semantic_toc
    from data_model import AnalysisOptions

    forest = build_semantic_toc(units, AnalysisOptions.relaxed())
"""

from .merger import merge_fragments, analyze_spacing
from .stats import collect_statistics
from .classifier import (
    BASE_SCORE,
    OTHER_WEIGHT,
    SIGNAL_WEIGHTS,
    HEADING_RULES,
    HeadingRule,
    classify_fragment,
    score_signals,
)
from .levels import estimate_levels, level_from_numbering
from .hierarchy import TocEntry, build_tree, build_toc_tree, clean_heading_text
from .analyzer import (
    AnalysisSummary,
    analyze_headings,
    build_toc_from_fragments,
    build_semantic_toc,
    summarize_analysis,
)

__all__ = [
    "merge_fragments",
    "analyze_spacing",
    "collect_statistics",
    "BASE_SCORE",
    "OTHER_WEIGHT",
    "SIGNAL_WEIGHTS",
    "HEADING_RULES",
    "HeadingRule",
    "classify_fragment",
    "score_signals",
    "estimate_levels",
    "level_from_numbering",
    "TocEntry",
    "build_tree",
    "build_toc_tree",
    "clean_heading_text",
    "AnalysisSummary",
    "analyze_headings",
    "build_toc_from_fragments",
    "build_semantic_toc",
    "summarize_analysis",
]
