"""Document element models.

A document is a flat, ordered list of elements. The JSON producers do not
send a type tag; the kind of an element is decided by which marker field it
carries:

- ``TableType`` -> table
- ``Text`` -> paragraph
- ``ImagePath`` -> image
- ``InsertPageBreak`` -> page break

Markers are checked in that order.
"""

from typing import Annotated, Any, ClassVar, Optional, Union

from pydantic import Discriminator, Field, Tag

from .base import (
    BaseDefinitionModel,
    ColumnType,
    ElementType,
    HorizontalAlignment,
    TableType,
)
from .style import StyleSettingsDefinition


ELEMENT_MARKERS = (
    (("TableType", "table_type"), ElementType.TABLE),
    (("Text", "text"), ElementType.PARAGRAPH),
    (("ImagePath", "image_path"), ElementType.IMAGE),
    (("InsertPageBreak", "insert_page_break"), ElementType.PAGE_BREAK),
)


class ColumnDefinition(BaseDefinitionModel):
    """One table column."""

    name: str = Field(default="", description="Column name, also the row data key")
    width_in_cm: float = Field(default=0.0, description="Column width in centimeters")
    type: ColumnType = Field(default=ColumnType.TEXT)


class ParagraphDefinition(BaseDefinitionModel):
    """Text paragraph. Line breaks and runs of whitespace are significant."""

    element_type: ClassVar[ElementType] = ElementType.PARAGRAPH

    text: Optional[str] = None
    style_settings: StyleSettingsDefinition = Field(default_factory=StyleSettingsDefinition)


class ImageDefinition(BaseDefinitionModel):
    """Page-level image."""

    element_type: ClassVar[ElementType] = ElementType.IMAGE

    image_path: Optional[str] = None
    alignment: HorizontalAlignment = Field(default=HorizontalAlignment.LEFT)
    lock_aspect_ratio: bool = False
    image_width_in_cm: float = Field(default=0.0, description="0 means natural width")
    image_height_in_cm: float = Field(default=0.0, description="0 means automatic height")


class TableDefinition(BaseDefinitionModel):
    """Table, used inline or as a repeating page header/footer."""

    element_type: ClassVar[ElementType] = ElementType.TABLE

    table_type: TableType = Field(default=TableType.TABLE)
    has_header_row: bool = False
    style_settings: StyleSettingsDefinition = Field(default_factory=StyleSettingsDefinition)
    columns: list[ColumnDefinition] = Field(default_factory=list)
    row_data: list[dict[str, Any]] = Field(default_factory=list)

    @property
    def is_repeating(self) -> bool:
        """Header and footer tables are redrawn on every page."""
        return self.table_type in (TableType.HEADER, TableType.FOOTER)

    def row_values(self, row: dict[str, Any]) -> list[str]:
        """Cell texts of one row, ordered like the column list.

        Cells are looked up by column name. Rows whose keys do not name the
        columns fall back to positional order.
        """
        positional = list(row.values())
        values = []
        for index, column in enumerate(self.columns):
            if column.name in row:
                value = row[column.name]
            elif index < len(positional):
                value = positional[index]
            else:
                value = ""
            values.append("" if value is None else str(value))
        return values


class PageBreakDefinition(BaseDefinitionModel):
    """Starts a new page with the document's page setup."""

    element_type: ClassVar[ElementType] = ElementType.PAGE_BREAK

    insert_page_break: bool = True


def element_kind(value: Any) -> Optional[str]:
    """Discriminator callable: map raw JSON or a model to its element tag."""
    if isinstance(value, dict):
        for markers, kind in ELEMENT_MARKERS:
            if any(marker in value for marker in markers):
                return kind.value
        return None
    kind = getattr(value, "element_type", None)
    return kind.value if kind is not None else None


DocumentElement = Annotated[
    Union[
        Annotated[TableDefinition, Tag(ElementType.TABLE.value)],
        Annotated[ParagraphDefinition, Tag(ElementType.PARAGRAPH.value)],
        Annotated[ImageDefinition, Tag(ElementType.IMAGE.value)],
        Annotated[PageBreakDefinition, Tag(ElementType.PAGE_BREAK.value)],
    ],
    Discriminator(
        element_kind,
        custom_error_type="unknown_element",
        custom_error_message=(
            "Unknown document element: expected one of TableType, Text, "
            "ImagePath or InsertPageBreak"
        ),
    ),
]
