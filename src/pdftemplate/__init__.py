"""Render PDF documents from JSON document descriptions."""

from pdftemplate.task import create_pdf

__version__ = "0.1.0"

__all__ = ["create_pdf", "__version__"]
