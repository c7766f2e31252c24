"""Corpus statistics tests."""

import pytest

from data_model.fragments import TextStatistics
from helpers import make_fragment
from semantic.stats import collect_statistics


def test_empty_input_gives_zero_baseline():
    stats = collect_statistics([])

    assert stats == TextStatistics()
    assert stats.total_fragments == 0
    assert stats.average_font_size == 0
    assert stats.max_font_size == 0
    assert stats.min_font_size == 0
    assert stats.bold_count == 0
    assert stats.average_text_length == 0


def test_whitespace_only_fragments_ignored():
    stats = collect_statistics([make_fragment("   "), make_fragment("")])

    assert stats.total_fragments == 0


def test_statistics_values():
    fragments = [
        make_fragment("Heading", size=16, bold=True),
        make_fragment("Body text", size=10),
        make_fragment("More text", size=13),
    ]

    stats = collect_statistics(fragments)

    assert stats.total_fragments == 3
    assert stats.average_font_size == pytest.approx(13.0)
    assert stats.max_font_size == 16
    assert stats.min_font_size == 10
    assert stats.bold_count == 1
    assert stats.average_text_length == pytest.approx((7 + 9 + 9) / 3)
