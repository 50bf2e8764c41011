"""Repeating page header and footer tables.

Header and footer tables are not part of the document flow. They belong to
the section they are declared in and are drawn at a fixed position on every
page of that section. A section that declares no header (or no footer) of
its own inherits the previous section's.

Placement:
- headers stack downwards so that the last one ends on the top margin line,
  or lower when the stack is taller than the top margin
- footers stack so that the first one starts on the bottom margin line,
  but never lower than just above the automatic page-number stamp
- the body frame of every page shrinks to stay clear of both stacks
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from reportlab.platypus import Table
from reportlab.platypus.doctemplate import ActionFlowable

from pdftemplate.config import settings
from pdftemplate.errors import LayoutError
from pdftemplate.layout.geometry import PageGeometry
from pdftemplate.layout.styles import FontResolver
from pdftemplate.models import TableType

logger = logging.getLogger(__name__)

STAMP_GAP = 2.0


@dataclass
class SectionBlocks:
    """Header and footer tables in effect for one section."""

    headers: list[Table] = field(default_factory=list)
    footers: list[Table] = field(default_factory=list)
    inherits_headers: bool = False
    inherits_footers: bool = False

    def add(self, role: TableType, table: Table) -> None:
        """Add a table; the first one of a role replaces the inherited ones."""
        if role == TableType.HEADER:
            if self.inherits_headers:
                self.headers, self.inherits_headers = [], False
            self.headers.append(table)
        elif role == TableType.FOOTER:
            if self.inherits_footers:
                self.footers, self.inherits_footers = [], False
            self.footers.append(table)
        else:
            raise ValueError(f"Table role {role.value!r} does not repeat")

    def successor(self) -> "SectionBlocks":
        """Blocks of the next section before it declares any of its own."""
        return SectionBlocks(
            headers=list(self.headers),
            footers=list(self.footers),
            inherits_headers=True,
            inherits_footers=True,
        )


class RepeatingBlocks:
    """Registry of header/footer tables for one render call.

    Tables are registered while the document is assembled. While it is
    built, ``begin_page`` and ``__call__`` run as the page template's
    page-start and page-end callbacks.
    """

    def __init__(
        self,
        geometry: PageGeometry,
        page_stamp: Optional[bool] = None,
        stamp_font_size: Optional[float] = None,
        stamp_family: Optional[str] = None,
        font_resolver: Optional[FontResolver] = None,
    ):
        """Initialize registry.

        Args:
            geometry: Page geometry shared by all pages
            page_stamp: Draw a page-number stamp under footers (default from settings)
            stamp_font_size: Stamp font size in points (default from settings)
            stamp_family: Stamp font family (default: the fallback family from settings)
            font_resolver: Resolver for the stamp family (default: a fresh one)
        """
        self.geometry = geometry
        self.page_stamp = settings.footer_page_stamp if page_stamp is None else page_stamp
        self.stamp_font_size = stamp_font_size or settings.page_stamp_font_size_pt
        resolver = font_resolver or FontResolver()
        self.stamp_font = resolver.resolve(stamp_family or settings.fallback_font_family).regular

        self.sections: list[SectionBlocks] = [SectionBlocks()]
        self.current = 0
        self._pending: Optional[int] = None

    @property
    def headers(self) -> list[Table]:
        """Header tables of the section being drawn."""
        return self.sections[self.current].headers

    @property
    def footers(self) -> list[Table]:
        """Footer tables of the section being drawn."""
        return self.sections[self.current].footers

    def register(self, role: TableType, table: Table) -> None:
        """Add a table to the header or footer stack of the last section."""
        self.sections[-1].add(role, table)
        logger.debug(
            "Registered repeating %s table in section %d", role.value.lower(), len(self.sections)
        )

    def start_section(self) -> "StartSection":
        """Open a new section; the returned marker goes before its page break."""
        self.sections.append(self.sections[-1].successor())
        return StartSection(self, len(self.sections) - 1)

    def enter(self, index: int) -> None:
        """Switch to section ``index`` when the next page begins."""
        self._pending = index

    def begin_page(self, canvas, doc) -> None:
        """Page-start callback fitting the body frame between the stacks.

        Raises:
            LayoutError: Headers and footers leave no room for the body
        """
        if self._pending is not None:
            self.current, self._pending = self._pending, None

        top = self.geometry.height - self.geometry.margin_top
        bottom = self.geometry.margin_bottom
        if self.headers:
            heights, header_top = self._header_placement(canvas)
            top = min(top, header_top - sum(heights))
        if self.footers:
            _, footer_top = self._footer_placement(canvas)
            bottom = max(bottom, footer_top)

        if top <= bottom:
            raise LayoutError(
                f"Header and footer tables leave no room for content on page {doc.page}."
            )

        frame = doc.pageTemplate.frames[0]
        frame.y1 = bottom
        frame.height = top - bottom

    def __call__(self, canvas, doc) -> None:
        """Page-end callback drawing the current section's tables."""
        if self.headers:
            self._draw_headers(canvas)
        if self.footers:
            self._draw_footers(canvas)

    def _wrap_all(self, canvas, tables: list[Table]) -> list[float]:
        heights = []
        for table in tables:
            _, height = table.wrapOn(canvas, self.geometry.printable_width, self.geometry.height)
            heights.append(height)
        return heights

    @property
    def _stamp_y(self) -> float:
        return max((self.geometry.margin_bottom - self.stamp_font_size) / 2, 0.0)

    def _header_placement(self, canvas) -> tuple[list[float], float]:
        """Heights of the header stack and the y of its top edge."""
        heights = self._wrap_all(canvas, self.headers)
        margin_line = self.geometry.height - self.geometry.margin_top
        return heights, min(self.geometry.height, margin_line + sum(heights))

    def _footer_placement(self, canvas) -> tuple[list[float], float]:
        """Heights of the footer stack and the y of its top edge."""
        heights = self._wrap_all(canvas, self.footers)
        floor = self._stamp_y + self.stamp_font_size + STAMP_GAP if self.page_stamp else 0.0
        return heights, max(self.geometry.margin_bottom, floor + sum(heights))

    def _draw_headers(self, canvas) -> None:
        heights, top = self._header_placement(canvas)

        canvas.saveState()
        for table, height in zip(self.headers, heights):
            top -= height
            table.drawOn(canvas, self.geometry.margin_left, top)
        canvas.restoreState()

    def _draw_footers(self, canvas) -> None:
        heights, top = self._footer_placement(canvas)

        canvas.saveState()
        if self.page_stamp:
            canvas.setFont(self.stamp_font, self.stamp_font_size)
            canvas.drawCentredString(
                self.geometry.width / 2, self._stamp_y, str(canvas.getPageNumber())
            )
        for table, height in zip(self.footers, heights):
            top -= height
            table.drawOn(canvas, self.geometry.margin_left, top)
        canvas.restoreState()


class StartSection(ActionFlowable):
    """Zero-size flow item switching the registry to the next section."""

    def __init__(self, registry: RepeatingBlocks, index: int):
        ActionFlowable.__init__(self, ("startSection", index))
        self.registry = registry
        self.index = index

    def apply(self, doc):
        self.registry.enter(self.index)
