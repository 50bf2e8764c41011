"""Deferred page-number field.

The current page number is read from the canvas when the field is drawn.
The total page count is only known after the whole document is laid out,
so the first layout pass draws a placeholder and the renderer runs a second
pass with the real total (see ``pipeline.stage_render``).
"""

from typing import Optional

from reportlab.lib.enums import TA_CENTER, TA_RIGHT
from reportlab.platypus import Flowable

from pdftemplate.layout.styles import ResolvedStyle

TOTAL_PAGES_PLACEHOLDER = "?"


def page_number_text(page: int, total_pages: Optional[int]) -> str:
    """Text of the field: "<page> (<total>)"."""
    total = TOTAL_PAGES_PLACEHOLDER if total_pages is None else str(total_pages)
    return f"{page} ({total})"


class PageNumberField(Flowable):
    """Draws "current page (total pages)" in a resolved text style."""

    def __init__(self, style: ResolvedStyle, total_pages: Optional[int] = None):
        super().__init__()
        self.font_name = style.font_name
        self.font_size = style.font_size
        self.leading = style.paragraph_style.leading
        self.alignment = style.paragraph_style.alignment
        self.total_pages = total_pages

    def wrap(self, availWidth, availHeight):
        self.width = availWidth
        self.height = self.leading
        return self.width, self.height

    def draw(self):
        canvas = self.canv
        text = page_number_text(canvas.getPageNumber(), self.total_pages)
        baseline = self.height - self.font_size

        canvas.saveState()
        canvas.setFont(self.font_name, self.font_size)
        if self.alignment == TA_RIGHT:
            canvas.drawRightString(self.width, baseline, text)
        elif self.alignment == TA_CENTER:
            canvas.drawCentredString(self.width / 2, baseline, text)
        else:
            canvas.drawString(0, baseline, text)
        canvas.restoreState()
