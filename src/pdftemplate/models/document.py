"""Document-level definition model."""

from typing import Optional

from pydantic import Field

from .base import BaseDefinitionModel, PageOrientation, PageSize
from .elements import DocumentElement


class DocumentDefinition(BaseDefinitionModel):
    """
    Top-level document description.

    Parsed once per render call from the producer's JSON and consumed
    read-only by the assembler. Margins are in centimeters and are only
    converted to points where they are used.
    """

    page_size: PageSize = Field(default=PageSize.A4)
    page_orientation: PageOrientation = Field(default=PageOrientation.PORTRAIT)
    title: Optional[str] = None
    author: Optional[str] = None

    margin_left_in_cm: float = Field(default=2.5, ge=0.0)
    margin_top_in_cm: float = Field(default=2.5, ge=0.0)
    margin_right_in_cm: float = Field(default=2.5, ge=0.0)
    margin_bottom_in_cm: float = Field(default=2.5, ge=0.0)

    document_elements: list[DocumentElement] = Field(default_factory=list)

    @property
    def element_count(self) -> int:
        """Number of elements in the document."""
        return len(self.document_elements)
