"""Pipeline stages around the layout engine.

Stages, in call order:
1. stage_parse - JSON text to a validated DocumentDefinition
2. stage_render - DocumentDefinition to PDF bytes (reportlab), read back with PyMuPDF
3. stage_write - file-exists policy and persisting the bytes

Each stage is independent and can be run separately or
orchestrated through ``pdftemplate.task.create_pdf``.
"""

from .stage_parse import parse_document
from .stage_render import PDFRenderer, RenderSummary, inspect_pdf
from .stage_write import FileWriter, parse_credentials, resolve_output_path, write_file

__all__ = [
    # Parse
    "parse_document",
    # Render
    "PDFRenderer",
    "RenderSummary",
    "inspect_pdf",
    # Write
    "FileWriter",
    "parse_credentials",
    "resolve_output_path",
    "write_file",
]
