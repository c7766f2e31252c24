"""
semantic/classifier.py — klasyfikacja fragmentów: nagłówek / nie-nagłówek.

Każda reguła z HEADING_RULES to para (predykat, wynik przy trafieniu,
wynik przy pudle), gdzie wynik jest sygnałem pozytywnym (Signal),
wykluczeniem (Exclusion) albo niczym. Wszystkie reguły są ewaluowane
w kolejności tabeli; wykluczenia są bezwzględne.

Pewność:
  wykluczenie → 0.0
  inaczej     → BASE_SCORE + Σ SIGNAL_WEIGHTS[sygnał] (OTHER_WEIGHT dla
                sygnałów spoza tabeli), obcięte do 1.0
Akceptacja: brak wykluczeń i pewność >= options.min_confidence_threshold.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import TypeAlias
from types import MappingProxyType

from data_model.fragments import (
    ClassificationResult,
    Exclusion,
    Signal,
    TextFragment,
    TextStatistics,
)
from data_model.options import AnalysisOptions
from semantic.lexicon import (
    contains_action_word,
    contains_heading_keyword,
    has_chapter_numbering,
    is_obviously_not_heading,
)

BASE_SCORE   = 0.1
OTHER_WEIGHT = 0.02
MAX_SCORE    = 1.0

SIGNAL_WEIGHTS: Mapping[Signal, float] = MappingProxyType({
    Signal.NUMBERING:       0.4,
    Signal.HEADING_KEYWORD: 0.3,
    Signal.LARGE_FONT:      0.2,
    Signal.BOLD:            0.15,
    Signal.STANDALONE:      0.1,
    Signal.SPACING:         0.1,
    Signal.NO_ACTION_VERB:  0.05,
})

_Outcome: TypeAlias = Signal | Exclusion | None


# ---------------------------------------------------------------------------
# Kontekst i reguły
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RuleContext:
    fragment: TextFragment
    text:     str  # tekst po strip()
    stats:    TextStatistics
    options:  AnalysisOptions


@dataclass(frozen=True, slots=True)
class HeadingRule:
    name:      str
    predicate: Callable[[RuleContext], bool]
    on_match:  _Outcome
    on_miss:   _Outcome = None

    def evaluate(self, ctx: RuleContext) -> _Outcome:
        return self.on_match if self.predicate(ctx) else self.on_miss


def _too_short(c: RuleContext) -> bool:
    return len(c.text) < c.options.min_heading_length


def _too_long(c: RuleContext) -> bool:
    return len(c.text) > c.options.max_heading_length


def _length_ok(c: RuleContext) -> bool:
    return not _too_short(c) and not _too_long(c)


def _large_font(c: RuleContext) -> bool:
    if c.stats.average_font_size <= 0:
        return False
    return c.fragment.font_size > c.stats.average_font_size * c.options.font_size_multiplier


def _bold(c: RuleContext) -> bool:
    return c.fragment.is_bold and c.options.consider_bold_as_heading


def _spaced(c: RuleContext) -> bool:
    limit = c.options.min_vertical_spacing
    return c.fragment.space_before > limit or c.fragment.space_after > limit


HEADING_RULES: tuple[HeadingRule, ...] = (
    HeadingRule("too_short",       _too_short, Exclusion.TOO_SHORT),
    HeadingRule("too_long",        _too_long,  Exclusion.TOO_LONG),
    HeadingRule("length_ok",       _length_ok, Signal.LENGTH_OK),
    HeadingRule("action_verb",     lambda c: contains_action_word(c.text),
                Exclusion.ACTION_VERB, Signal.NO_ACTION_VERB),
    HeadingRule("heading_keyword", lambda c: contains_heading_keyword(c.text), Signal.HEADING_KEYWORD),
    HeadingRule("numbering",       lambda c: has_chapter_numbering(c.text), Signal.NUMBERING),
    HeadingRule("large_font",      _large_font, Signal.LARGE_FONT),
    HeadingRule("bold",            _bold, Signal.BOLD),
    HeadingRule("standalone",      lambda c: c.fragment.is_standalone, Signal.STANDALONE),
    HeadingRule("spacing",         _spaced, Signal.SPACING),
    HeadingRule("obvious_non_heading", lambda c: is_obviously_not_heading(c.text),
                Exclusion.OBVIOUS_NON_HEADING),
)


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def score_signals(
    reasons: Iterable[Signal],
    exclusions: Iterable[Exclusion] = (),
) -> float:
    if any(True for _ in exclusions):
        return 0.0
    total = BASE_SCORE + sum(SIGNAL_WEIGHTS.get(s, OTHER_WEIGHT) for s in reasons)
    return min(MAX_SCORE, total)


def classify_fragment(
    fragment: TextFragment,
    stats: TextStatistics,
    options: AnalysisOptions,
    rules: tuple[HeadingRule, ...] = HEADING_RULES,
) -> ClassificationResult:
    text = (fragment.text or "").strip()
    if not text:
        return ClassificationResult(exclusions=[Exclusion.EMPTY])

    ctx = RuleContext(fragment=fragment, text=text, stats=stats, options=options)
    reasons: list[Signal] = []
    exclusions: list[Exclusion] = []
    for rule in rules:
        outcome = rule.evaluate(ctx)
        if isinstance(outcome, Exclusion):
            exclusions.append(outcome)
        elif isinstance(outcome, Signal):
            reasons.append(outcome)

    confidence = score_signals(reasons, exclusions)
    return ClassificationResult(
        is_heading=not exclusions and confidence >= options.min_confidence_threshold,
        confidence=confidence,
        reasons=reasons,
        exclusions=exclusions,
    )
