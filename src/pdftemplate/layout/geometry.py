"""Physical page geometry derived from a document definition."""

from dataclasses import dataclass

from reportlab.lib import pagesizes

from pdftemplate.layout.units import cm_to_pt, pt_to_cm
from pdftemplate.models import DocumentDefinition, PageOrientation, PageSize


PAGE_SIZES = {
    PageSize.A0: pagesizes.A0,
    PageSize.A1: pagesizes.A1,
    PageSize.A2: pagesizes.A2,
    PageSize.A3: pagesizes.A3,
    PageSize.A4: pagesizes.A4,
    PageSize.A5: pagesizes.A5,
    PageSize.A6: pagesizes.A6,
    PageSize.B5: pagesizes.B5,
    PageSize.LEDGER: pagesizes.LEDGER,
    PageSize.LEGAL: pagesizes.LEGAL,
    PageSize.LETTER: pagesizes.LETTER,
}


@dataclass(frozen=True)
class PageGeometry:
    """Page size and margins in points."""

    width: float
    height: float
    margin_left: float
    margin_top: float
    margin_right: float
    margin_bottom: float

    @classmethod
    def from_definition(cls, definition: DocumentDefinition) -> "PageGeometry":
        """Build geometry from page size, orientation and margins (cm)."""
        width, height = PAGE_SIZES[definition.page_size]
        if definition.page_orientation == PageOrientation.LANDSCAPE:
            width, height = height, width

        return cls(
            width=width,
            height=height,
            margin_left=cm_to_pt(definition.margin_left_in_cm),
            margin_top=cm_to_pt(definition.margin_top_in_cm),
            margin_right=cm_to_pt(definition.margin_right_in_cm),
            margin_bottom=cm_to_pt(definition.margin_bottom_in_cm),
        )

    @property
    def pagesize(self) -> tuple[float, float]:
        """(width, height) tuple as reportlab expects it."""
        return (self.width, self.height)

    @property
    def printable_width(self) -> float:
        """Page width minus left and right margins."""
        return self.width - self.margin_left - self.margin_right

    @property
    def printable_height(self) -> float:
        """Page height minus top and bottom margins."""
        return self.height - self.margin_top - self.margin_bottom

    @property
    def printable_width_cm(self) -> float:
        """Printable width in centimeters."""
        return pt_to_cm(self.printable_width)
