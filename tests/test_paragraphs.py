"""Tests for the paragraph renderer."""

import pytest
from reportlab.platypus import Paragraph

from pdftemplate.layout import StyleResolver
from pdftemplate.layout.paragraphs import (
    is_blank,
    line_markup,
    paragraph_markup,
    render_cell_text,
    render_paragraph,
)
from pdftemplate.models import ParagraphDefinition, StyleSettingsDefinition


@pytest.fixture
def style():
    """Default resolved style."""
    return StyleResolver().resolve(StyleSettingsDefinition(), "p")


class TestLineMarkup:
    """Tests for whitespace-preserving markup."""

    def test_single_spaces(self):
        """Single spaces stay breakable."""
        assert line_markup("Hello world") == "Hello world"

    def test_double_space(self):
        """The second space of a run is non-breaking."""
        assert line_markup("Hello  world") == "Hello &nbsp;world"

    def test_leading_whitespace(self):
        """Leading whitespace survives as non-breaking spaces."""
        assert line_markup("  indented") == "&nbsp;&nbsp;indented"

    def test_tab_is_a_separator(self):
        """Tabs separate words like spaces."""
        assert line_markup("a\tb") == "a b"

    def test_escaping(self):
        """Markup characters are escaped."""
        assert line_markup("a < b & c") == "a &lt; b &amp; c"


class TestParagraphMarkup:
    """Tests for multi-line markup."""

    @pytest.mark.parametrize("text", ["one\ntwo", "one\r\ntwo", "one\rtwo"])
    def test_line_breaks(self, text):
        """Every line break style becomes a <br/>."""
        assert paragraph_markup(text) == "one<br/>two"

    def test_empty_lines_kept(self):
        """Consecutive breaks keep the empty line."""
        assert paragraph_markup("a\n\nb") == "a<br/><br/>b"

    def test_underline(self):
        """Underlined text is wrapped in <u>."""
        assert paragraph_markup("x", underline=True) == "<u>x</u>"


class TestRenderParagraph:
    """Tests for render_paragraph."""

    @pytest.mark.parametrize("text", [None, "", "   ", "\n\t"])
    def test_blank_renders_nothing(self, style, text):
        """Blank text adds nothing to the page."""
        assert is_blank(text)
        assert render_paragraph(ParagraphDefinition(text=text), style) == []

    def test_renders_one_paragraph(self, style):
        """Text renders as one Paragraph in the resolved style."""
        flowables = render_paragraph(ParagraphDefinition(text="Hello"), style)
        assert len(flowables) == 1
        assert isinstance(flowables[0], Paragraph)
        assert flowables[0].style is style.paragraph_style

    def test_cell_text_allows_empty(self, style):
        """Empty cells still get a Paragraph."""
        assert isinstance(render_cell_text("", style), Paragraph)
