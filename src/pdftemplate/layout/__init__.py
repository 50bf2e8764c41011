"""Layout engine: document definition to a paginated reportlab story.

Components, leaf first:
1. units - centimeter/point conversion
2. geometry - page size, orientation and margins
3. styles - style settings to reportlab styles, font fallback
4. paragraphs, images, fields - element renderers
5. tables - column width validation and row building
6. repeating - page header/footer tables drawn on every page
7. assembler - element dispatch and assembly state
"""

from .assembler import AssemblyState, DocumentAssembler
from .geometry import PageGeometry
from .repeating import RepeatingBlocks
from .styles import BorderSpec, FontResolver, ResolvedStyle, StyleResolver
from .tables import TableLayout, validate_column_widths
from .units import POINTS_PER_CM, cm_to_pt, pt_to_cm

__all__ = [
    # Assembly
    "AssemblyState",
    "DocumentAssembler",
    # Geometry
    "PageGeometry",
    "POINTS_PER_CM",
    "cm_to_pt",
    "pt_to_cm",
    # Styles
    "BorderSpec",
    "FontResolver",
    "ResolvedStyle",
    "StyleResolver",
    # Tables
    "RepeatingBlocks",
    "TableLayout",
    "validate_column_widths",
]
