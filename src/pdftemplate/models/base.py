"""Base models and common types for document descriptions."""

from enum import Enum

from pydantic import BaseModel, ValidationInfo, field_validator
from pydantic.alias_generators import to_pascal


class DefinitionEnum(str, Enum):
    """String enum parsed the way the JSON producers write it.

    Matching is case-insensitive, and integer ordinals are accepted in
    declaration order.
    """

    @classmethod
    def _missing_(cls, value):
        members = list(cls)
        if isinstance(value, int) and not isinstance(value, bool):
            if 0 <= value < len(members):
                return members[value]
            return None
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in members:
                if member.value.lower() == wanted:
                    return member
        return None


class PageSize(DefinitionEnum):
    """Standard paper sizes."""

    A0 = "A0"
    A1 = "A1"
    A2 = "A2"
    A3 = "A3"
    A4 = "A4"
    A5 = "A5"
    A6 = "A6"
    B5 = "B5"
    LEDGER = "Ledger"
    LEGAL = "Legal"
    LETTER = "Letter"


class PageOrientation(DefinitionEnum):
    """Page orientation."""

    PORTRAIT = "Portrait"
    LANDSCAPE = "Landscape"


class FontStyle(DefinitionEnum):
    """Font style. Underline cannot be combined with bold or italic."""

    REGULAR = "Regular"
    BOLD = "Bold"
    ITALIC = "Italic"
    BOLD_ITALIC = "BoldItalic"
    UNDERLINE = "Underline"


class HorizontalAlignment(DefinitionEnum):
    """Horizontal alignment of text and images."""

    LEFT = "Left"
    CENTER = "Center"
    JUSTIFY = "Justify"
    RIGHT = "Right"


class VerticalAlignment(DefinitionEnum):
    """Vertical alignment of table cell content."""

    TOP = "Top"
    CENTER = "Center"
    BOTTOM = "Bottom"


class TableType(DefinitionEnum):
    """Role of a table: inline body table or repeating page header/footer."""

    TABLE = "Table"
    HEADER = "Header"
    FOOTER = "Footer"


class ColumnType(DefinitionEnum):
    """Content type of a table column."""

    TEXT = "Text"
    IMAGE = "Image"
    PAGE_NUM = "PageNum"


class BorderStyle(DefinitionEnum):
    """Edges a border is drawn on."""

    NONE = "None"
    TOP = "Top"
    BOTTOM = "Bottom"
    ALL = "All"


class ElementType(DefinitionEnum):
    """Kinds of document elements."""

    PARAGRAPH = "Paragraph"
    IMAGE = "Image"
    TABLE = "Table"
    PAGE_BREAK = "PageBreak"


class FileExistsAction(DefinitionEnum):
    """What to do when the output file already exists."""

    ERROR = "Error"
    OVERWRITE = "Overwrite"
    RENAME = "Rename"


class BaseDefinitionModel(BaseModel):
    """Base class for all models read from the JSON document description.

    Field names are snake_case in Python and PascalCase on the wire.
    """

    class Config:
        alias_generator = to_pascal
        populate_by_name = True
        frozen = True

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_enums(cls, value, info: ValidationInfo):
        """Route enum fields through DefinitionEnum lookup rules."""
        field = cls.model_fields.get(info.field_name)
        annotation = field.annotation if field else None
        if (
            isinstance(annotation, type)
            and issubclass(annotation, DefinitionEnum)
            and value is not None
            and not isinstance(value, annotation)
        ):
            return annotation(value)
        return value
