"""Table Layout - validate column widths and build table rows.

Flow:
1. Validate column widths against the printable width (before any row)
2. Build the optional header row from the column names
3. Build data rows, cell N always belonging to column N
4. Apply the border, unless the table repeats as a page header/footer
"""

import logging
import math
from typing import Optional

from reportlab.platypus import Flowable, Table, TableStyle

from pdftemplate.errors import LayoutError, TableWidthExceededError
from pdftemplate.layout.fields import PageNumberField
from pdftemplate.layout.geometry import PageGeometry
from pdftemplate.layout.images import render_cell_image
from pdftemplate.layout.paragraphs import render_cell_text
from pdftemplate.layout.styles import ResolvedStyle
from pdftemplate.layout.units import cm_to_pt
from pdftemplate.models import ColumnDefinition, ColumnType, TableDefinition
from pdftemplate.resources import ImageReader

logger = logging.getLogger(__name__)

WIDTH_TOLERANCE_CM = 1e-9

# Horizontal cell padding, 1.2 mm
CELL_PADDING_X = cm_to_pt(0.12)
CELL_PADDING_Y = 1.0


def validate_column_widths(
    columns: list[ColumnDefinition],
    geometry: PageGeometry,
) -> list[float]:
    """Check that the columns fit the printable width.

    The running sum is checked after every column, so the error names the
    width at the first column that no longer fits.

    Returns:
        Column widths in points

    Raises:
        LayoutError: A column has no positive width
        TableWidthExceededError: The columns are wider than the printable width
    """
    allowed_cm = geometry.printable_width_cm
    widths_cm: list[float] = []

    for column in columns:
        if column.width_in_cm <= 0:
            raise LayoutError(
                f"Column {column.name!r} must have a positive width, got {column.width_in_cm:g} cm."
            )
        widths_cm.append(column.width_in_cm)
        table_width_cm = math.fsum(widths_cm)
        if table_width_cm > allowed_cm + WIDTH_TOLERANCE_CM:
            raise TableWidthExceededError(
                allowed_cm=round(allowed_cm, 4),
                requested_cm=round(table_width_cm, 4),
            )

    return [cm_to_pt(width) for width in widths_cm]


class TableLayout:
    """Builds a reportlab Table from a table definition."""

    def __init__(
        self,
        definition: TableDefinition,
        geometry: PageGeometry,
        style: ResolvedStyle,
        image_reader: ImageReader,
        total_pages: Optional[int] = None,
    ):
        """Initialize table layout.

        Args:
            definition: Table element
            geometry: Page geometry used for width validation
            style: Resolved text style shared by all cells
            image_reader: Reader for Image column cells
            total_pages: Total page count for PageNum cells, None if unknown yet
        """
        self.definition = definition
        self.geometry = geometry
        self.style = style
        self.image_reader = image_reader
        self.total_pages = total_pages

        self.uses_page_count = False
        self._cell_commands: list[tuple] = []

    def build(self) -> Optional[Table]:
        """Lay out the table.

        Returns:
            The table, or None when it has no rows at all
        """
        widths = validate_column_widths(self.definition.columns, self.geometry)

        rows: list[list[Flowable]] = []
        if self.definition.has_header_row:
            rows.append(self._header_row())
        for row_data in self.definition.row_data:
            rows.append(self._data_row(len(rows), self.definition.row_values(row_data)))

        if not rows or not widths:
            logger.debug("Table without rows or columns, nothing to draw")
            return None

        table = Table(rows, colWidths=widths, hAlign="LEFT")
        table.setStyle(TableStyle(self._table_commands(len(rows))))
        return table

    def _header_row(self) -> list[Flowable]:
        """Column names as plain text, whatever the column types are."""
        return [render_cell_text(column.name, self.style) for column in self.definition.columns]

    def _data_row(self, row_index: int, values: list[str]) -> list[Flowable]:
        cells = []
        for col_index, (column, value) in enumerate(zip(self.definition.columns, values)):
            if column.type == ColumnType.IMAGE:
                cells.append(render_cell_image(value, column.width_in_cm, self.image_reader))
                cell = (col_index, row_index)
                self._cell_commands.extend([
                    ("LEFTPADDING", cell, cell, 0),
                    ("RIGHTPADDING", cell, cell, 0),
                    ("TOPPADDING", cell, cell, 0),
                    ("VALIGN", cell, cell, "TOP"),
                ])
            elif column.type == ColumnType.PAGE_NUM:
                cells.append(PageNumberField(self.style, self.total_pages))
                self.uses_page_count = True
            else:
                cells.append(render_cell_text(value, self.style))
        return cells

    def _table_commands(self, row_count: int) -> list[tuple]:
        commands = [
            ("VALIGN", (0, 0), (-1, -1), self.style.vertical_alignment),
            ("LEFTPADDING", (0, 0), (-1, -1), CELL_PADDING_X),
            ("RIGHTPADDING", (0, 0), (-1, -1), CELL_PADDING_X),
            ("TOPPADDING", (0, 0), (-1, -1), CELL_PADDING_Y),
            ("BOTTOMPADDING", (0, 0), (-1, -1), CELL_PADDING_Y),
        ]
        commands.extend(self._cell_commands)

        # Repeating header/footer tables are always borderless
        if not self.definition.is_repeating:
            commands.extend(self.style.border.table_commands(row_count))
        return commands
