"""Document Assembler - turn a document definition into a reportlab story.

Elements are processed strictly in source order. Each step takes the
current AssemblyState and returns it with the element's content appended;
nothing placed earlier is revisited.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from reportlab.platypus import Flowable, PageBreak, Spacer

from pdftemplate.errors import DocumentInputError, LayoutError
from pdftemplate.layout.geometry import PageGeometry
from pdftemplate.layout.images import render_image
from pdftemplate.layout.paragraphs import render_paragraph
from pdftemplate.layout.repeating import RepeatingBlocks
from pdftemplate.layout.styles import StyleResolver
from pdftemplate.layout.tables import TableLayout
from pdftemplate.models import (
    DocumentDefinition,
    ImageDefinition,
    PageBreakDefinition,
    ParagraphDefinition,
    TableDefinition,
)
from pdftemplate.resources import ImageReader, PillowImageReader

logger = logging.getLogger(__name__)


@dataclass
class AssemblyState:
    """In-progress page tree of one render call."""

    geometry: PageGeometry
    repeating: RepeatingBlocks
    story: list[Flowable] = field(default_factory=list)
    section_count: int = 1
    element_count: int = 0
    uses_page_count: bool = False

    @property
    def is_empty(self) -> bool:
        """True while nothing has been appended to the story."""
        return not self.story


class DocumentAssembler:
    """Dispatches document elements to their renderers."""

    def __init__(
        self,
        image_reader: Optional[ImageReader] = None,
        style_resolver: Optional[StyleResolver] = None,
        page_stamp: Optional[bool] = None,
    ):
        """Initialize assembler.

        Args:
            image_reader: Image metadata reader (default: Pillow)
            style_resolver: Style resolver (default: a fresh one per assembler)
            page_stamp: Draw page-number stamps under footers (default from settings)
        """
        self.image_reader = image_reader or PillowImageReader()
        self.style_resolver = style_resolver or StyleResolver()
        self.page_stamp = page_stamp

    def start(self, definition: DocumentDefinition) -> AssemblyState:
        """Create the initial state with the document's page geometry."""
        geometry = PageGeometry.from_definition(definition)
        if geometry.printable_width <= 0 or geometry.printable_height <= 0:
            raise LayoutError(
                "Margins leave no printable area on a "
                f"{definition.page_size.value} {definition.page_orientation.value.lower()} page."
            )
        return AssemblyState(
            geometry=geometry,
            repeating=RepeatingBlocks(
                geometry,
                page_stamp=self.page_stamp,
                font_resolver=self.style_resolver.font_resolver,
            ),
        )

    def assemble(
        self,
        definition: DocumentDefinition,
        total_pages: Optional[int] = None,
    ) -> AssemblyState:
        """Lay out every element of the document.

        Args:
            definition: Parsed document description
            total_pages: Known total page count for page-number fields, if any

        Returns:
            Final AssemblyState
        """
        state = self.start(definition)
        for element in definition.document_elements:
            state = self.process_element(state, element, definition, total_pages)

        logger.debug(
            "Assembled %d elements into %d sections", state.element_count, state.section_count
        )
        return state

    def process_element(
        self,
        state: AssemblyState,
        element,
        definition: DocumentDefinition,
        total_pages: Optional[int] = None,
    ) -> AssemblyState:
        """Append one element to the page tree."""
        style_name = f"style_{state.element_count}"

        if isinstance(element, ParagraphDefinition):
            style = self.style_resolver.resolve(element.style_settings, style_name)
            state.story.extend(render_paragraph(element, style))

        elif isinstance(element, ImageDefinition):
            state.story.append(render_image(element, state.geometry, self.image_reader))

        elif isinstance(element, TableDefinition):
            style = self.style_resolver.resolve(element.style_settings, style_name, in_table=True)
            layout = TableLayout(
                element, state.geometry, style, self.image_reader, total_pages=total_pages
            )
            table = layout.build()
            state.uses_page_count = state.uses_page_count or layout.uses_page_count
            if table is not None:
                if element.is_repeating:
                    state.repeating.register(element.table_type, table)
                else:
                    state.story.append(table)

        elif isinstance(element, PageBreakDefinition):
            # Every section gets the page setup of the document definition
            state.geometry = PageGeometry.from_definition(definition)
            state.story.append(state.repeating.start_section())
            state.story.append(PageBreak())
            state.story.append(Spacer(0, 0))
            state.section_count += 1

        else:
            raise DocumentInputError(
                f"Unknown document element {type(element).__name__} at index {state.element_count}"
            )

        logger.debug("Element %d: %s", state.element_count, type(element).__name__)
        state.element_count += 1
        return state
