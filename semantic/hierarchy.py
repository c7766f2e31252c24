"""
semantic/hierarchy.py — budowanie lasu TocNode ze spłaszczonej listy (tytuł, strona, poziom).

Algorytm stosu poziomów: stos trzyma otwartych przodków. Dla każdego wpisu
(głębokość = poziom - 1) zdejmujemy ze stosu wpisy o żądanej głębokości >= bieżącej;
pusty stos → nowy korzeń, inaczej wpis staje się ostatnim dzieckiem wierzchołka.
Głębokość węzła jest zawsze głębokością rodzica + 1, więc skok poziomów
(1 → 3) podpina głębszy wpis pod najbliższego otwartego przodka.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from typing import NamedTuple

from data_model.fragments import TextFragment
from data_model.toc import TocNode

_WHITESPACE_RE = re.compile(r"\s+")


class TocEntry(NamedTuple):
    title: str
    page:  str
    level: int  # 1-based


def clean_heading_text(text: str | None) -> str:
    """Przycina i zwija ciągi białych znaków do jednej spacji."""
    if not text or not text.strip():
        return ""
    return _WHITESPACE_RE.sub(" ", text.strip())


def build_tree(entries: Iterable[TocEntry]) -> list[TocNode]:
    roots: list[TocNode] = []
    # (żądana głębokość, węzeł); rzeczywista głębokość węzła może być mniejsza po skoku
    stack: list[tuple[int, TocNode]] = []

    for entry in entries:
        depth = max(entry.level, 1) - 1
        while stack and stack[-1][0] >= depth:
            stack.pop()

        node = TocNode(title=clean_heading_text(entry.title), page=entry.page)
        if stack:
            parent = stack[-1][1]
            node.level = parent.level + 1
            parent.add_child(node)
        else:
            roots.append(node)

        stack.append((depth, node))

    return roots


def build_toc_tree(headings: Sequence[TextFragment]) -> list[TocNode]:
    """Las TocNode z nagłówków uporządkowanych wg (strona, y); poziom z result.level."""
    return build_tree(
        TocEntry(
            title=h.text,
            page=str(h.page_number),
            level=h.result.level if h.result is not None and h.result.level > 0 else 1,
        )
        for h in headings
    )
