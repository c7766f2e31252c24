"""
Shared fixtures for ptoc tests.

Fragments are built in memory; PDF fixtures are generated with PyMuPDF
into tmp_path, so no binary test data is committed.
"""

import pytest
import fitz

from data_model.options import AnalysisOptions


@pytest.fixture
def no_skip_options():
    """Default options that analyze every page."""
    return AnalysisOptions.default().with_overrides(skip_pages=())


@pytest.fixture
def sample_pdf(tmp_path):
    """Five-page PDF without bookmarks.

    Page 4: "1. Introduction" (18pt) + instruction lines (10pt)
    Page 5: "1.1 Background" (14pt) + instruction lines (10pt)
    Pages 1-3 hold cover / TOC text that default options skip.
    """
    path = tmp_path / "sample.pdf"
    doc = fitz.open()
    for n in range(1, 4):
        page = doc.new_page()
        page.insert_text((72, 150), f"Front matter page {n}", fontsize=10)

    page = doc.new_page()
    page.insert_text((72, 150), "1. Introduction", fontsize=18)
    page.insert_text((72, 200), "Click the Save button to store the document before you continue.", fontsize=10)
    page.insert_text((72, 215), "Select the target folder in the dialog that opens next.", fontsize=10)

    page = doc.new_page()
    page.insert_text((72, 150), "1.1 Background", fontsize=14)
    page.insert_text((72, 200), "Press Enter to confirm the settings shown on the screen.", fontsize=10)
    page.insert_text((72, 215), "Choose the default profile when the wizard asks for it.", fontsize=10)

    doc.save(str(path))
    doc.close()
    return path


@pytest.fixture
def bookmarked_pdf(tmp_path):
    """Three-page PDF with a two-level outline."""
    path = tmp_path / "bookmarked.pdf"
    doc = fitz.open()
    for n in range(1, 4):
        page = doc.new_page()
        page.insert_text((72, 150), f"Page {n} content", fontsize=12)
    doc.set_toc([
        [1, "Chapter One", 1],
        [2, "Section 1.1", 2],
        [1, "Chapter Two", 3],
    ])
    doc.save(str(path))
    doc.close()
    return path
