"""Analysis options, presets and environment configuration tests."""

import dataclasses

import pytest

from data_model.options import AnalysisOptions, format_skip_pages, parse_skip_pages
from ptoc._config import env_options


def test_default_preset_values():
    options = AnalysisOptions.default()

    assert options.min_heading_length == 3
    assert options.max_heading_length == 100
    assert options.font_size_multiplier == 1.1
    assert options.consider_bold_as_heading is True
    assert options.min_vertical_spacing == 5.0
    assert options.min_confidence_threshold == 0.3
    assert options.max_heading_levels == 6
    assert options.skip_pages == frozenset({1, 2, 3})
    assert options.ignore_header_footer is True
    assert options.header_height == 50
    assert options.footer_height == 50
    assert options.debug_mode is False


def test_strict_and_relaxed_presets():
    strict = AnalysisOptions.strict()
    relaxed = AnalysisOptions.relaxed()

    assert strict.min_confidence_threshold > AnalysisOptions.default().min_confidence_threshold
    assert relaxed.min_confidence_threshold < AnalysisOptions.default().min_confidence_threshold
    assert (strict.min_heading_length, strict.max_heading_length) == (5, 80)
    assert (relaxed.min_heading_length, relaxed.max_heading_length) == (2, 150)
    assert strict.font_size_multiplier == 1.3
    assert relaxed.font_size_multiplier == 1.05


def test_debug_preset():
    options = AnalysisOptions.debug()

    assert options.debug_mode is True
    assert options.min_confidence_threshold == 0.1


def test_preset_by_name():
    assert AnalysisOptions.preset("Relaxed") == AnalysisOptions.relaxed()
    with pytest.raises(ValueError, match="Nieznany preset"):
        AnalysisOptions.preset("turbo")


def test_options_immutable():
    options = AnalysisOptions.default()
    with pytest.raises(dataclasses.FrozenInstanceError):
        options.min_heading_length = 1


def test_with_overrides_ignores_none():
    options = AnalysisOptions.default().with_overrides(
        min_confidence_threshold=0.6,
        font_size_multiplier=None,
        skip_pages=[5, 6],
    )

    assert options.min_confidence_threshold == 0.6
    assert options.font_size_multiplier == 1.1
    assert options.skip_pages == frozenset({5, 6})


@pytest.mark.parametrize("value,pages", [
    ("1,2,3", {1, 2, 3}),
    ("1-3", {1, 2, 3}),
    ("1-3, 7", {1, 2, 3, 7}),
    ("", set()),
    (None, set()),
    ("x, 4, 2-a", {4}),
])
def test_parse_skip_pages(value, pages):
    assert parse_skip_pages(value) == frozenset(pages)


def test_format_skip_pages():
    assert format_skip_pages({3, 1, 2}) == "1,2,3"
    assert format_skip_pages(()) == ""


def test_describe_mentions_skip_pages():
    assert "[1,2,3]" in AnalysisOptions.default().describe()
    assert "[-]" in AnalysisOptions.default().with_overrides(skip_pages=()).describe()


# ============================================================================
# Environment
# ============================================================================

@pytest.fixture
def clean_env(monkeypatch):
    for name in ("PTOC_MODE", "PTOC_SKIP_PAGES", "PTOC_CONFIDENCE"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_env_options_default(clean_env):
    assert env_options() == AnalysisOptions.default()


def test_env_options_mode_and_overrides(clean_env):
    clean_env.setenv("PTOC_MODE", "strict")
    clean_env.setenv("PTOC_SKIP_PAGES", "")
    clean_env.setenv("PTOC_CONFIDENCE", "0.45")

    options = env_options()

    assert options.min_heading_length == 5
    assert options.skip_pages == frozenset()
    assert options.min_confidence_threshold == 0.45


def test_explicit_mode_beats_env(clean_env):
    clean_env.setenv("PTOC_MODE", "strict")

    assert env_options("relaxed") == AnalysisOptions.relaxed()


def test_env_bad_confidence(clean_env):
    clean_env.setenv("PTOC_CONFIDENCE", "high")

    with pytest.raises(ValueError, match="PTOC_CONFIDENCE"):
        env_options()
