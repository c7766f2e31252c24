"""
Fragment merger tests.

Covers:
- Same-line neighbours merged into one fragment
- Vertical / horizontal / font-size tolerances
- Skip pages filtered before merging
- Short fragments dropped
- Standalone flag and vertical spacing
"""

import pytest

from helpers import make_fragment, make_unit
from semantic.merger import (
    ADJACENCY_TOLERANCE,
    SAME_LINE_TOLERANCE,
    analyze_spacing,
    merge_fragments,
)


def test_same_line_units_are_merged():
    units = [
        make_unit("Hello ", x=72, y=100, width=30),
        make_unit("world", x=102, y=101, width=28),
    ]

    fragments = merge_fragments(units)

    assert len(fragments) == 1
    assert fragments[0].text == "Hello world"
    assert fragments[0].x == 72
    assert fragments[0].width == pytest.approx(58)


def test_units_sorted_by_position_before_merge():
    units = [
        make_unit("world", x=102, y=100, width=28),
        make_unit("Hello ", x=72, y=100, width=30),
    ]

    fragments = merge_fragments(units)

    assert [f.text for f in fragments] == ["Hello world"]


def test_vertical_gap_breaks_line():
    units = [
        make_unit("First line", y=100),
        make_unit("Second line", x=72, y=100 + SAME_LINE_TOLERANCE + 10),
    ]

    fragments = merge_fragments(units)

    assert [f.text for f in fragments] == ["First line", "Second line"]


def test_horizontal_gap_breaks_line():
    units = [
        make_unit("Left", x=72, y=100, width=24),
        make_unit("Right", x=72 + 24 + ADJACENCY_TOLERANCE + 50, y=100, width=30),
    ]

    fragments = merge_fragments(units)

    assert [f.text for f in fragments] == ["Left", "Right"]


def test_font_size_change_breaks_line():
    units = [
        make_unit("Title", x=72, y=100, width=30, size=18),
        make_unit("body", x=102, y=100, width=24, size=10),
    ]

    fragments = merge_fragments(units)

    assert [f.text for f in fragments] == ["Title", "body"]


def test_skip_pages_filtered_before_merge():
    units = [
        make_unit("Contents overview", page=2),
        make_unit("Real chapter", page=4),
    ]

    fragments = merge_fragments(units, skip_pages={1, 2, 3})

    assert [f.page_number for f in fragments] == [4]
    assert fragments[0].text == "Real chapter"


def test_pages_emitted_in_order():
    units = [
        make_unit("Later page", page=5),
        make_unit("Earlier page", page=2),
    ]

    fragments = merge_fragments(units)

    assert [f.page_number for f in fragments] == [2, 5]


def test_short_fragments_dropped():
    units = [
        make_unit("x", y=100),
        make_unit("  ", y=200),
        make_unit("ok", y=300),
    ]

    fragments = merge_fragments(units)

    assert [f.text for f in fragments] == ["ok"]


def test_merge_is_idempotent_on_merged_output():
    units = [
        make_unit("Heading one", y=100),
        make_unit("Paragraph text", y=140),
        make_unit("Heading two", y=200),
    ]

    first = merge_fragments(units)
    second = merge_fragments(first)

    assert [(f.text, f.y) for f in second] == [(f.text, f.y) for f in first]


def test_empty_input():
    assert merge_fragments([]) == []


def test_standalone_and_spacing():
    fragments = [
        make_fragment("Heading", y=100),
        make_fragment("Left column", y=160, x=72),
        make_fragment("Right column", y=162, x=300),
    ]

    analyze_spacing(fragments)
    heading, left, right = fragments

    assert heading.is_standalone is True
    assert left.is_standalone is False
    assert right.is_standalone is False
    assert heading.space_before == 0.0
    assert heading.space_after == pytest.approx(60)
    assert left.space_before == pytest.approx(60)
    assert right.space_after == 0.0


def test_spacing_computed_per_page():
    fragments = [
        make_fragment("End of page one", page=1, y=700),
        make_fragment("Top of page two", page=2, y=80),
    ]

    analyze_spacing(fragments)

    assert fragments[0].space_after == 0.0
    assert fragments[1].space_before == 0.0
