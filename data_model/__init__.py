"""
data_model — struktury danych ekstraktora spisu treści.

Użycie:
  from data_model import TextFragment, AnalysisOptions, TocNode, ...

Moduły:
  fragments — RawTextUnit, TextFragment, ClassificationResult, TextStatistics,
              Signal, Exclusion
  options   — AnalysisOptions (+ presety), parse_skip_pages
  toc       — TocNode, NO_PAGE, count_nodes, iter_nodes
"""

from .fragments import (
    Signal,
    Exclusion,
    RawTextUnit,
    ClassificationResult,
    TextFragment,
    TextStatistics,
)
from .options import (
    PRESET_NAMES,
    AnalysisOptions,
    parse_skip_pages,
    format_skip_pages,
)
from .toc import (
    NO_PAGE,
    TocNode,
    count_nodes,
    iter_nodes,
)

__all__ = [
    # fragments
    "Signal",
    "Exclusion",
    "RawTextUnit",
    "ClassificationResult",
    "TextFragment",
    "TextStatistics",
    # options
    "PRESET_NAMES",
    "AnalysisOptions",
    "parse_skip_pages",
    "format_skip_pages",
    # toc
    "NO_PAGE",
    "TocNode",
    "count_nodes",
    "iter_nodes",
]
