"""
data_model/toc.py — węzeł spisu treści.

TocNode jest wspólnym kształtem wyniku dla ścieżki zakładek (outline PDF)
i ścieżki semantycznej, więc eksportery nie muszą wiedzieć, skąd pochodzi drzewo.

Niezmienniki:
  - level == 0 dla korzeni, level == parent.level + 1 dla pozostałych
  - kolejność children = kolejność w dokumencie
  - parent to odwołanie zwrotne tylko do rekonstrukcji ścieżki; własność
    i przechodzenie drzewa idą wyłącznie przez children
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

# Etykieta strony, gdy nie da się jej ustalić.
NO_PAGE = "N/A"

_LEADING_INT_RE = re.compile(r"^\s*(\d+)")


@dataclass(slots=True, eq=False)
class TocNode:
    title:    str
    page:     str = NO_PAGE
    level:    int = 0
    children: list[TocNode] = field(default_factory=list)
    parent:   TocNode | None = field(default=None, repr=False)

    @property
    def page_number(self) -> int:
        """Liczbowa część etykiety strony ("5 XYZ 100" → 5); 0 gdy brak."""
        if not self.page or self.page == NO_PAGE:
            return 0
        m = _LEADING_INT_RE.match(self.page)
        return int(m.group(1)) if m else 0

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    def add_child(self, child: TocNode) -> None:
        child.parent = self
        self.children.append(child)

    def descendants(self) -> Iterator[TocNode]:
        """Wszyscy potomkowie w kolejności pre-order."""
        for child in self.children:
            yield child
            yield from child.descendants()

    def full_path(self, separator: str = " > ") -> str:
        titles: list[str] = []
        node: TocNode | None = self
        while node is not None:
            titles.append(node.title)
            node = node.parent
        return separator.join(reversed(titles))

    def __str__(self) -> str:
        return f"{'  ' * self.level}- {self.title} (s. {self.page})"


def count_nodes(forest: Iterable[TocNode]) -> int:
    """Liczba wszystkich węzłów w lesie (korzenie + potomkowie)."""
    return sum(1 + sum(1 for _ in root.descendants()) for root in forest)


def iter_nodes(forest: Iterable[TocNode]) -> Iterator[TocNode]:
    """Spłaszcza las do kolejności dokumentu (pre-order)."""
    for root in forest:
        yield root
        yield from root.descendants()
