"""
semantic/merger.py — scalanie surowych jednostek tekstu w fragmenty liniowe.

Architektura:
  RawTextUnit[] → grupowanie po stronie (bez stron z skip_pages)
  → sortowanie (y, x) → scalanie sąsiadów z tej samej linii
  → analyze_spacing() → TextFragment[] w kolejności (strona, y, x)

Sąsiad jest doklejany do akumulatora, gdy jednocześnie:
  |Δy| <= SAME_LINE_TOLERANCE, |odstęp poziomy| <= ADJACENCY_TOLERANCE,
  |Δrozmiar fontu| <= FONT_SIZE_TOLERANCE.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from typing import TypeAlias

from data_model.fragments import RawTextUnit, TextFragment

SAME_LINE_TOLERANCE = 3.0
ADJACENCY_TOLERANCE = 15.0
FONT_SIZE_TOLERANCE = 0.5
STANDALONE_TOLERANCE = 5.0
MIN_FRAGMENT_LENGTH = 2

_Unit: TypeAlias = RawTextUnit | TextFragment


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def merge_fragments(
    units: Iterable[_Unit],
    skip_pages: Iterable[int] = (),
) -> list[TextFragment]:
    """
    Scala jednostki leżące obok siebie w tej samej linii.

    Akceptuje także gotowe TextFragment — ponowne scalenie wyniku, w którym
    żadna para nie spełnia warunków sąsiedztwa, zwraca ten sam wynik.
    """
    skip = frozenset(skip_pages)
    by_page: dict[int, list[_Unit]] = defaultdict(list)
    for unit in units:
        if unit.page_number in skip:
            continue
        by_page[unit.page_number].append(unit)

    merged: list[TextFragment] = []
    for page_number in sorted(by_page):
        merged.extend(_merge_page(by_page[page_number]))

    analyze_spacing(merged)
    return merged


def analyze_spacing(fragments: list[TextFragment]) -> None:
    """
    Ustawia is_standalone i odstępy pionowe (in place), osobno dla każdej strony.

    Fragment jest samodzielny, gdy żaden inny fragment strony nie leży bliżej
    niż STANDALONE_TOLERANCE w pionie. Pierwszy/ostatni fragment strony ma
    odpowiednio space_before/space_after = 0.
    """
    by_page: dict[int, list[TextFragment]] = defaultdict(list)
    for fragment in fragments:
        by_page[fragment.page_number].append(fragment)

    for page_fragments in by_page.values():
        ordered = sorted(page_fragments, key=lambda f: f.y)
        for i, current in enumerate(ordered):
            current.is_standalone = not any(
                other is not current and abs(other.y - current.y) < STANDALONE_TOLERANCE
                for other in ordered
            )
            current.space_before = abs(current.y - ordered[i - 1].y) if i > 0 else 0.0
            current.space_after = (
                abs(ordered[i + 1].y - current.y) if i < len(ordered) - 1 else 0.0
            )


# ---------------------------------------------------------------------------
# Wewnętrzna implementacja
# ---------------------------------------------------------------------------

def _merge_page(units: list[_Unit]) -> list[TextFragment]:
    ordered = sorted(units, key=lambda u: (u.y or 0.0, u.x or 0.0))
    result: list[TextFragment] = []

    i = 0
    while i < len(ordered):
        last = ordered[i]
        acc = _start_fragment(last)
        j = i + 1
        while j < len(ordered) and _continues_line(last, ordered[j], acc):
            nxt = ordered[j]
            acc.text += nxt.text
            acc.width = max(acc.right, (nxt.x or 0.0) + (nxt.width or 0.0)) - acc.x
            last = nxt
            j += 1

        if len(acc.text.strip()) >= MIN_FRAGMENT_LENGTH:
            result.append(acc)
        i = j

    return result


def _continues_line(last: _Unit, nxt: _Unit, acc: TextFragment) -> bool:
    if abs((nxt.y or 0.0) - (last.y or 0.0)) > SAME_LINE_TOLERANCE:
        return False
    if abs((nxt.x or 0.0) - acc.right) > ADJACENCY_TOLERANCE:
        return False
    if abs((nxt.font_size or 0.0) - (last.font_size or 0.0)) > FONT_SIZE_TOLERANCE:
        return False
    return True


def _start_fragment(unit: _Unit) -> TextFragment:
    return TextFragment(
        text=unit.text or "",
        page_number=unit.page_number,
        font_size=unit.font_size or 0.0,
        font_name=unit.font_name or "",
        is_bold=bool(unit.is_bold),
        is_italic=bool(unit.is_italic),
        x=unit.x or 0.0,
        y=unit.y or 0.0,
        width=unit.width or 0.0,
        height=unit.height or 0.0,
    )
