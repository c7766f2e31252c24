"""
Fragmenty tekstu z pozycją i metadanymi fontu.

RawTextUnit  — surowa jednostka tekstu od ekstraktora (span PyMuPDF lub dane testowe).
TextFragment — fragment po scaleniu linii; nosi wynik klasyfikacji.
ClassificationResult — decyzja klasyfikatora nagłówków dla jednego fragmentu.
TextStatistics — statystyki korpusu używane jako punkt odniesienia klasyfikatora.

Współrzędne są w układzie strony (y rośnie w dół, jak w PyMuPDF).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


# ---------------------------------------------------------------------------
# Sygnały i wykluczenia
# ---------------------------------------------------------------------------

class Signal(StrEnum):
    """Pozytywne sygnały nagłówka (klucze tabeli wag klasyfikatora)."""

    LENGTH_OK       = "length_ok"
    NO_ACTION_VERB  = "no_action_verb"
    HEADING_KEYWORD = "heading_keyword"
    NUMBERING       = "numbering"
    LARGE_FONT      = "large_font"
    BOLD            = "bold"
    STANDALONE      = "standalone"
    SPACING         = "spacing"


class Exclusion(StrEnum):
    """Powody bezwzględnego odrzucenia fragmentu."""

    EMPTY               = "empty"
    TOO_SHORT           = "too_short"
    TOO_LONG            = "too_long"
    ACTION_VERB         = "action_verb"
    OBVIOUS_NON_HEADING = "obvious_non_heading"


# ---------------------------------------------------------------------------
# Surowa jednostka tekstu
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class RawTextUnit:
    """
    Jednostka tekstu dostarczona przez ekstraktor, przed scaleniem.

    Brakujące wartości liczbowe traktujemy jak 0.
    """
    text:        str
    page_number: int
    font_size:   float = 0.0
    font_name:   str = ""
    is_bold:     bool = False
    is_italic:   bool = False
    x:           float = 0.0
    y:           float = 0.0
    width:       float = 0.0
    height:      float = 0.0


# ---------------------------------------------------------------------------
# Wynik klasyfikacji
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class ClassificationResult:
    """
    - is_heading:  decyzja (True tylko przy braku wykluczeń i confidence >= progu)
    - confidence:  0.0 – 1.0; 0.0 gdy zadziałało jakiekolwiek wykluczenie
    - level:       1-based poziom nagłówka (0 = jeszcze nie wyznaczony)
    - reasons:     sygnały pozytywne w kolejności ewaluacji reguł
    - exclusions:  powody odrzucenia (niepuste tylko gdy odrzucony)
    """
    is_heading: bool = False
    confidence: float = 0.0
    level:      int = 0
    reasons:    list[Signal] = field(default_factory=list)
    exclusions: list[Exclusion] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Fragment po scaleniu
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class TextFragment:
    text:          str
    page_number:   int
    font_size:     float = 0.0
    font_name:     str = ""
    is_bold:       bool = False
    is_italic:     bool = False
    x:             float = 0.0
    y:             float = 0.0
    width:         float = 0.0
    height:        float = 0.0
    is_standalone: bool = False
    space_before:  float = 0.0
    space_after:   float = 0.0
    # Wypełniane przez klasyfikator i estymator poziomów; nie wchodzi do porównań.
    result: ClassificationResult | None = field(default=None, compare=False, repr=False)

    @property
    def right(self) -> float:
        return self.x + self.width

    def __str__(self) -> str:
        return (
            f"[str. {self.page_number}] {self.text!r} "
            f"(font: {self.font_name or '?'}, {self.font_size:.1f}, bold={self.is_bold})"
        )


# ---------------------------------------------------------------------------
# Statystyki korpusu
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TextStatistics:
    """Statystyki wszystkich fragmentów dokumentu; pusty korpus → same zera."""
    total_fragments:     int = 0
    average_font_size:   float = 0.0
    max_font_size:       float = 0.0
    min_font_size:       float = 0.0
    bold_count:          int = 0
    average_text_length: float = 0.0
