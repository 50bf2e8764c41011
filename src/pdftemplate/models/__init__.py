"""Models for PDF template rendering.

This module defines the Pydantic models for the JSON document description
consumed by the layout engine, and for the inputs and outputs of the PDF
creation task.

Key Design Principles:
1. Wire compatibility: JSON field names match the existing producers
2. Value semantics: models are frozen once parsed
3. Units at the edge: centimeters and points stay as given, converted on use

Model Hierarchy:
- DocumentDefinition → DocumentElements (Table | Paragraph | Image | PageBreak)
- TableDefinition → ColumnDefinitions, RowData
- Paragraph/Table → StyleSettingsDefinition
"""

from .base import (
    BaseDefinitionModel,
    BorderStyle,
    ColumnType,
    DefinitionEnum,
    ElementType,
    FileExistsAction,
    FontStyle,
    HorizontalAlignment,
    PageOrientation,
    PageSize,
    TableType,
    VerticalAlignment,
)
from .document import DocumentDefinition
from .elements import (
    ColumnDefinition,
    DocumentElement,
    ImageDefinition,
    PageBreakDefinition,
    ParagraphDefinition,
    TableDefinition,
    element_kind,
)
from .style import StyleSettingsDefinition
from .task import (
    Credentials,
    DocumentContent,
    FileProperties,
    Options,
    Output,
)

__all__ = [
    # Base types
    "BaseDefinitionModel",
    "BorderStyle",
    "ColumnType",
    "DefinitionEnum",
    "ElementType",
    "FileExistsAction",
    "FontStyle",
    "HorizontalAlignment",
    "PageOrientation",
    "PageSize",
    "TableType",
    "VerticalAlignment",
    # Document
    "DocumentDefinition",
    # Elements
    "ColumnDefinition",
    "DocumentElement",
    "ImageDefinition",
    "PageBreakDefinition",
    "ParagraphDefinition",
    "TableDefinition",
    "element_kind",
    # Style
    "StyleSettingsDefinition",
    # Task
    "Credentials",
    "DocumentContent",
    "FileProperties",
    "Options",
    "Output",
]
