"""
Hierarchy builder tests.

Level-stack construction from a flat (title, page, level) sequence.
"""

from data_model.fragments import ClassificationResult
from data_model.toc import count_nodes, iter_nodes
from helpers import make_fragment
from semantic.hierarchy import TocEntry, build_toc_tree, build_tree, clean_heading_text


def entries(*levels):
    return [TocEntry(f"H{i}", str(i + 1), level) for i, level in enumerate(levels)]


def depths(forest):
    return [node.level for node in iter_nodes(forest)]


def test_level_jump_nests_under_open_ancestor():
    forest = build_tree(entries(1, 3))

    assert len(forest) == 1
    assert depths(forest) == [0, 1]
    assert forest[0].children[0].title == "H1"


def test_equal_levels_become_siblings():
    forest = build_tree(entries(1, 3, 3))

    root = forest[0]
    assert [c.title for c in root.children] == ["H1", "H2"]
    assert depths(forest) == [0, 1, 1]


def test_shallower_heading_closes_back():
    forest = build_tree(entries(1, 2, 3, 2, 1))

    assert [r.title for r in forest] == ["H0", "H4"]
    assert [c.title for c in forest[0].children] == ["H1", "H3"]
    assert forest[0].children[0].children[0].title == "H2"
    assert depths(forest) == [0, 1, 2, 1, 0]


def test_first_entry_deep_becomes_root():
    forest = build_tree(entries(3, 3))

    assert [r.title for r in forest] == ["H0", "H1"]
    assert depths(forest) == [0, 0]


def test_parent_invariants():
    forest = build_tree(entries(1, 2, 3, 2, 1, 2))

    for node in iter_nodes(forest):
        if node.parent is None:
            assert node.level == 0
            assert node in forest
        else:
            assert node.level == node.parent.level + 1
            assert node in node.parent.children


def test_children_in_input_order():
    forest = build_tree(entries(1, 2, 2, 2))

    assert [c.title for c in forest[0].children] == ["H1", "H2", "H3"]


def test_titles_cleaned():
    forest = build_tree([TocEntry("  Overview \n  of\tthe system ", "3", 1)])

    assert forest[0].title == "Overview of the system"
    assert forest[0].page == "3"


def test_clean_heading_text():
    assert clean_heading_text(None) == ""
    assert clean_heading_text("   ") == ""
    assert clean_heading_text(" a  b ") == "a b"


def test_empty_input():
    assert build_tree([]) == []


def test_build_toc_tree_from_headings():
    first = make_fragment("1. Introduction", page=4)
    first.result = ClassificationResult(is_heading=True, confidence=0.9, level=1)
    second = make_fragment("1.1 Scope", page=5)
    second.result = ClassificationResult(is_heading=True, confidence=0.7, level=2)

    forest = build_toc_tree([first, second])

    assert count_nodes(forest) == 2
    assert forest[0].page == "4"
    assert forest[0].children[0].title == "1.1 Scope"
    assert forest[0].children[0].full_path() == "1. Introduction > 1.1 Scope"


def test_build_toc_tree_defaults_missing_level_to_one():
    fragment = make_fragment("Loose heading", page=2)

    forest = build_toc_tree([fragment])

    assert forest[0].level == 0
