"""
data_model/options.py — konfiguracja analizy semantycznej.

AnalysisOptions jest niezmienne w trakcie przebiegu. Cztery presety
(default, strict, relaxed, debug) są punktem wyjścia; pojedyncze pola
nadpisuje się przez with_overrides().
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

PRESET_NAMES = ("default", "strict", "relaxed", "debug")


@dataclass(frozen=True, slots=True)
class AnalysisOptions:
    """
    - min_heading_length / max_heading_length: dopuszczalna długość tekstu nagłówka
    - font_size_multiplier:   próg "dużego fontu" względem średniej korpusu
    - consider_bold_as_heading: czy pogrubienie jest sygnałem nagłówka
    - min_vertical_spacing:   odstęp pionowy (pt) uznawany za wyraźny
    - min_confidence_threshold: minimalna pewność akceptacji
    - max_heading_levels:     górny limit poziomu z rangi rozmiaru fontu
    - skip_pages:             strony (1-based) pomijane przed scaleniem, zwykle spis treści
    - ignore_header_footer, header_height, footer_height: pasy nagłówka/stopki strony
    - debug_mode:             diagnostyka per fragment w logu
    """
    min_heading_length:       int = 3
    max_heading_length:       int = 100
    font_size_multiplier:     float = 1.1
    consider_bold_as_heading: bool = True
    min_vertical_spacing:     float = 5.0
    min_confidence_threshold: float = 0.3
    max_heading_levels:       int = 6
    skip_pages:               frozenset[int] = field(default_factory=lambda: frozenset({1, 2, 3}))
    ignore_header_footer:     bool = True
    header_height:            float = 50.0
    footer_height:            float = 50.0
    debug_mode:               bool = False

    # -----------------------------------------------------------------------
    # Presety
    # -----------------------------------------------------------------------

    @classmethod
    def default(cls) -> AnalysisOptions:
        return cls()

    @classmethod
    def strict(cls) -> AnalysisOptions:
        return cls(
            min_heading_length=5,
            max_heading_length=80,
            font_size_multiplier=1.3,
            min_confidence_threshold=0.5,
            min_vertical_spacing=8.0,
        )

    @classmethod
    def relaxed(cls) -> AnalysisOptions:
        return cls(
            min_heading_length=2,
            max_heading_length=150,
            font_size_multiplier=1.05,
            min_confidence_threshold=0.2,
            min_vertical_spacing=2.0,
        )

    @classmethod
    def debug(cls) -> AnalysisOptions:
        return cls(debug_mode=True, min_confidence_threshold=0.1)

    @classmethod
    def preset(cls, name: str) -> AnalysisOptions:
        """Zwraca preset po nazwie; nieznana nazwa → ValueError."""
        key = name.strip().lower()
        if key not in PRESET_NAMES:
            raise ValueError(
                f"Nieznany preset: {name!r}. Dostępne: {', '.join(PRESET_NAMES)}"
            )
        return getattr(cls, key)()

    def with_overrides(self, **overrides: Any) -> AnalysisOptions:
        """Kopia z nadpisanymi polami; wartości None są ignorowane."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if "skip_pages" in changes:
            changes["skip_pages"] = frozenset(changes["skip_pages"])
        return dataclasses.replace(self, **changes)

    def describe(self) -> str:
        pages = format_skip_pages(self.skip_pages) or "-"
        return (
            f"próg pewności: {self.min_confidence_threshold:.2f}, "
            f"mnożnik fontu: {self.font_size_multiplier:.2f}, "
            f"pomijane strony: [{pages}]"
        )


def parse_skip_pages(value: str | None) -> frozenset[int]:
    """
    Parsuje listę stron: "1,2,3", "1-3", "1-3, 7". Niepoprawne elementy są pomijane.
    """
    if not value or not value.strip():
        return frozenset()

    pages: set[int] = set()
    for part in value.split(","):
        part = part.strip()
        if not part:
            continue
        if "-" in part:
            bounds = part.split("-")
            if len(bounds) != 2:
                continue
            try:
                start, end = int(bounds[0]), int(bounds[1])
            except ValueError:
                continue
            pages.update(range(start, end + 1))
        else:
            try:
                pages.add(int(part))
            except ValueError:
                continue
    return frozenset(pages)


def format_skip_pages(pages: Iterable[int]) -> str:
    return ",".join(str(p) for p in sorted(pages))
