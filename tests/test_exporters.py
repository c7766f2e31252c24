"""
Exporter tests.

Each format is checked against a small fixed forest:

  Overview (1)
    Scope (2)
      Details [x] (3)
  Appendix (N/A)
"""

import json
import xml.etree.ElementTree as ET

import pytest

from data_model.toc import NO_PAGE, TocNode, count_nodes, iter_nodes
from exporters import (
    ExportOptions,
    Exporter,
    JsonExporter,
    MarkdownExporter,
    TextExporter,
    UnsupportedFormatError,
    XmlExporter,
    format_for_path,
    get_exporter,
    supported_formats,
)
from semantic.hierarchy import TocEntry, build_tree


@pytest.fixture
def forest():
    return build_tree([
        TocEntry("Overview", "1", 1),
        TocEntry("Scope", "2", 2),
        TocEntry("Details [x]", "3", 3),
        TocEntry("Appendix", NO_PAGE, 1),
    ])


# ============================================================================
# TocNode
# ============================================================================

def test_node_helpers(forest):
    overview, appendix = forest
    details = overview.children[0].children[0]

    assert count_nodes(forest) == 4
    assert [n.title for n in iter_nodes(forest)] == ["Overview", "Scope", "Details [x]", "Appendix"]
    assert details.full_path() == "Overview > Scope > Details [x]"
    assert details.full_path("/") == "Overview/Scope/Details [x]"
    assert overview.has_children
    assert not appendix.has_children
    assert str(details) == "    - Details [x] (s. 3)"


@pytest.mark.parametrize("page,number", [("5", 5), ("5 XYZ 100", 5), (NO_PAGE, 0), ("", 0), ("iv", 0)])
def test_page_number(page, number):
    assert TocNode("T", page=page).page_number == number


# ============================================================================
# Formats
# ============================================================================

def test_text_export(forest):
    out = TextExporter().export(forest)

    assert out.splitlines() == [
        "Spis treści",
        "===========",
        "",
        "- Overview (s. 1)",
        "  - Scope (s. 2)",
        "    - Details [x] (s. 3)",
        "- Appendix",
    ]


def test_text_export_options(forest):
    options = ExportOptions(include_page_numbers=False, max_depth=2, title="TOC", indent="\t")

    out = TextExporter().export(forest, options)

    assert out.splitlines() == ["TOC", "===", "", "- Overview", "\t- Scope", "- Appendix"]


def test_markdown_export_with_links(forest):
    out = MarkdownExporter().export(forest, ExportOptions(include_links=True))
    lines = out.splitlines()

    assert lines[0] == "# Spis treści"
    assert "- [Overview](#page-1) (s. 1)" in lines
    assert "    - [Details \\[x\\]](#page-3) (s. 3)" in lines
    assert "- Appendix" in lines


def test_json_export(forest):
    data = json.loads(JsonExporter().export(forest, ExportOptions(title="Doc")))

    assert data["title"] == "Doc"
    assert "generated_at" in data
    overview, appendix = data["items"]
    assert overview["page"] == "1"
    assert overview["page_number"] == 1
    assert overview["children"][0]["children"][0]["full_path"] == "Overview > Scope > Details [x]"
    assert "page" not in appendix
    assert "children" not in appendix


def test_json_export_max_depth(forest):
    data = json.loads(JsonExporter().export(forest, ExportOptions(max_depth=1)))

    assert [i["title"] for i in data["items"]] == ["Overview", "Appendix"]
    assert "children" not in data["items"][0]


def test_xml_export(forest):
    out = XmlExporter().export(forest)

    assert out.startswith('<?xml version="1.0" encoding="utf-8"?>')
    root = ET.fromstring(out.split("\n", 1)[1])
    assert root.tag == "TableOfContents"
    items = root.findall("Item")
    assert [i.findtext("Title") for i in items] == ["Overview", "Appendix"]
    scope = items[0].find("Children/Item")
    assert scope.get("level") == "1"
    assert scope.get("page") == "2"
    assert scope.findtext("FullPath") == "Overview > Scope"
    assert items[1].get("page") is None


def test_export_to_file(forest, tmp_path):
    path = tmp_path / "toc.md"

    out = get_exporter("md").export_to_file(forest, path)

    assert out == path
    assert path.read_text(encoding="utf-8").startswith("# Spis treści")


def test_empty_forest():
    assert TextExporter().export([]).splitlines() == ["Spis treści", "===========", ""]
    assert json.loads(JsonExporter().export([]))["items"] == []


# ============================================================================
# Registry
# ============================================================================

def test_registry():
    assert isinstance(get_exporter("Markdown"), MarkdownExporter)
    assert isinstance(get_exporter("txt"), TextExporter)
    assert set(supported_formats()) == {"text", "txt", "markdown", "md", "json", "xml"}


@pytest.mark.parametrize("fmt", ["", "pdf", "yaml"])
def test_unsupported_format(fmt):
    with pytest.raises(UnsupportedFormatError):
        get_exporter(fmt)


def test_format_for_path():
    assert format_for_path("out/toc.JSON") == "json"
    assert format_for_path("toc.md") == "md"
    assert format_for_path("toc.html") is None


def test_exporter_base_is_abstract():
    with pytest.raises(TypeError):
        Exporter()

    class Partial(Exporter):
        format_name = "partial"

    with pytest.raises(TypeError):
        Partial()
