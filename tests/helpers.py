"""Builders for in-memory text fragments and units."""

from data_model.fragments import RawTextUnit, TextFragment


def make_fragment(text, size=12.0, page=1, y=100.0, x=72.0, bold=False,
                  standalone=True, space_before=0.0, space_after=0.0, width=None):
    """Build a post-merge fragment with sensible layout defaults."""
    return TextFragment(
        text=text,
        page_number=page,
        font_size=size,
        font_name="Helvetica-Bold" if bold else "Helvetica",
        is_bold=bold,
        x=x,
        y=y,
        width=len(text) * size * 0.5 if width is None else width,
        height=size,
        is_standalone=standalone,
        space_before=space_before,
        space_after=space_after,
    )


def make_unit(text, page=1, x=72.0, y=100.0, width=None, size=12.0, bold=False):
    """Build a raw pre-merge unit."""
    return RawTextUnit(
        text=text,
        page_number=page,
        font_size=size,
        font_name="Helvetica",
        is_bold=bold,
        x=x,
        y=y,
        width=len(text) * 6.0 if width is None else width,
        height=size,
    )


