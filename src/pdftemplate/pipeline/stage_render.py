"""Render Stage - lay out a document definition and produce PDF bytes.

Uses reportlab platypus for layout and PyMuPDF (fitz) to read back the
produced PDF. Nothing is written to disk here; the whole PDF is kept in
memory so a failed render never leaves a partial file behind.
"""

import io
import logging
from dataclasses import dataclass
from typing import Optional

import fitz  # PyMuPDF
from reportlab.platypus import BaseDocTemplate, Frame, PageTemplate, Spacer
from reportlab.platypus.doctemplate import LayoutError as ReportLabLayoutError

from pdftemplate.errors import LayoutError
from pdftemplate.layout import AssemblyState, DocumentAssembler
from pdftemplate.models import DocumentDefinition
from pdftemplate.resources import ImageReader

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderSummary:
    """What a produced PDF looks like from the outside."""

    page_count: int
    title: Optional[str]
    author: Optional[str]
    pdf_version: Optional[str]
    size_bytes: int


def inspect_pdf(data: bytes) -> RenderSummary:
    """Read page count and metadata from PDF bytes."""
    pdf_doc = fitz.open(stream=data, filetype="pdf")
    try:
        metadata = pdf_doc.metadata or {}
        return RenderSummary(
            page_count=len(pdf_doc),
            title=metadata.get("title") or None,
            author=metadata.get("author") or None,
            pdf_version=metadata.get("format") or None,
            size_bytes=len(data),
        )
    finally:
        pdf_doc.close()


def _metadata_text(value: Optional[str]) -> str:
    return value.strip() if value and value.strip() else ""


class PDFRenderer:
    """Renders a document definition to PDF bytes.

    Documents containing page-number fields are rendered twice: the first
    pass counts the pages, the second draws the fields with the real total.
    """

    def __init__(
        self,
        image_reader: Optional[ImageReader] = None,
        page_stamp: Optional[bool] = None,
    ):
        """Initialize renderer.

        Args:
            image_reader: Image metadata reader (default: Pillow)
            page_stamp: Draw page-number stamps under footers (default from settings)
        """
        self.assembler = DocumentAssembler(image_reader=image_reader, page_stamp=page_stamp)

    def render(self, definition: DocumentDefinition) -> bytes:
        """Render a document.

        Args:
            definition: Parsed document description

        Returns:
            Complete PDF file contents

        Raises:
            LayoutError: Content does not fit the page
            ResourceNotFoundError: A referenced image does not exist
        """
        state = self.assembler.assemble(definition)
        data = self._build(definition, state)

        if state.uses_page_count:
            total_pages = inspect_pdf(data).page_count
            logger.debug("Second pass for page-number fields, %d pages", total_pages)
            state = self.assembler.assemble(definition, total_pages=total_pages)
            data = self._build(definition, state)

        logger.info(
            "Rendered %d elements in %d sections (%d bytes)",
            state.element_count, state.section_count, len(data),
        )
        return data

    def _build(self, definition: DocumentDefinition, state: AssemblyState) -> bytes:
        """Run reportlab over an assembled story."""
        geometry = state.geometry
        buffer = io.BytesIO()

        doc = BaseDocTemplate(
            buffer,
            pagesize=geometry.pagesize,
            leftMargin=geometry.margin_left,
            rightMargin=geometry.margin_right,
            topMargin=geometry.margin_top,
            bottomMargin=geometry.margin_bottom,
            title=_metadata_text(definition.title),
            author=_metadata_text(definition.author),
        )
        frame = Frame(
            geometry.margin_left,
            geometry.margin_bottom,
            geometry.printable_width,
            geometry.printable_height,
            leftPadding=0,
            rightPadding=0,
            topPadding=0,
            bottomPadding=0,
            id="body",
        )
        doc.addPageTemplates(
            [
                PageTemplate(
                    id="page",
                    frames=[frame],
                    onPage=state.repeating.begin_page,
                    onPageEnd=state.repeating,
                )
            ]
        )

        # An empty document still yields one blank page
        story = list(state.story) or [Spacer(0, 0)]

        try:
            doc.build(story)
        except ReportLabLayoutError as exc:
            raise LayoutError(str(exc)) from exc

        return buffer.getvalue()
