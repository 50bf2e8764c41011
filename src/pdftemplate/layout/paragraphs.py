"""Paragraph renderer.

reportlab collapses runs of whitespace inside paragraph markup, so text is
re-emitted token by token: a separator after a word is a breakable space,
a separator after an empty token (i.e. the second and later character of a
whitespace run, or leading whitespace) is a non-breaking space.
"""

import re
from typing import Optional
from xml.sax.saxutils import escape

from reportlab.platypus import Flowable, Paragraph

from pdftemplate.layout.styles import ResolvedStyle
from pdftemplate.models import ParagraphDefinition

LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
WORD_SEPARATOR_RE = re.compile(r"[ \t]")

BREAKABLE_SPACE = " "
NON_BREAKING_SPACE = "&nbsp;"


def is_blank(text: Optional[str]) -> bool:
    """True for None, empty and whitespace-only text."""
    return not text or not text.strip()


def line_markup(line: str) -> str:
    """Markup for one source line with its whitespace preserved."""
    tokens = WORD_SEPARATOR_RE.split(line)
    parts = []
    for index, token in enumerate(tokens):
        parts.append(escape(token))
        if index < len(tokens) - 1:
            parts.append(BREAKABLE_SPACE if token else NON_BREAKING_SPACE)
    return "".join(parts)


def paragraph_markup(text: str, underline: bool = False) -> str:
    """Convert plain text into reportlab paragraph markup.

    Every source line break becomes a ``<br/>``; whitespace runs survive.
    """
    markup = "<br/>".join(line_markup(line) for line in LINE_BREAK_RE.split(text))
    if underline:
        markup = f"<u>{markup}</u>"
    return markup


def render_paragraph(element: ParagraphDefinition, style: ResolvedStyle) -> list[Flowable]:
    """Render a paragraph element. Blank text renders nothing."""
    if is_blank(element.text):
        return []
    return [Paragraph(paragraph_markup(element.text, style.underline), style.paragraph_style)]


def render_cell_text(text: str, style: ResolvedStyle) -> Paragraph:
    """Render the text of one table cell."""
    return Paragraph(paragraph_markup(text or "", style.underline), style.paragraph_style)
