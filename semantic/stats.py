"""Statystyki korpusu fragmentów — punkt odniesienia dla klasyfikatora."""

from __future__ import annotations

import statistics
from collections.abc import Sequence

from data_model.fragments import TextFragment, TextStatistics


def collect_statistics(fragments: Sequence[TextFragment]) -> TextStatistics:
    """Pusty (lub czysto biały) korpus daje rekord z samymi zerami, nigdy wyjątek."""
    valid = [f for f in fragments if f.text and f.text.strip()]
    if not valid:
        return TextStatistics()

    sizes = [f.font_size or 0.0 for f in valid]
    return TextStatistics(
        total_fragments=len(valid),
        average_font_size=statistics.fmean(sizes),
        max_font_size=max(sizes),
        min_font_size=min(sizes),
        bold_count=sum(1 for f in valid if f.is_bold),
        average_text_length=statistics.fmean(len(f.text) for f in valid),
    )
