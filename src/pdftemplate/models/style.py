"""Style settings shared by paragraphs and tables."""

from pydantic import AliasChoices, Field

from .base import (
    BaseDefinitionModel,
    BorderStyle,
    FontStyle,
    HorizontalAlignment,
    VerticalAlignment,
)


class StyleSettingsDefinition(BaseDefinitionModel):
    """Font, alignment, spacing and border settings of one element."""

    font_family: str = Field(default="Arial", description="Font family name")
    font_size_in_pt: float = Field(default=10.0, description="Font size; <= 0 means default")
    font_style: FontStyle = Field(default=FontStyle.REGULAR)
    line_spacing_in_pt: float = Field(default=0.0, description="Line spacing; <= 0 means automatic")

    # Older producers send "Alignment" instead of "HorizontalAlignment"
    horizontal_alignment: HorizontalAlignment = Field(
        default=HorizontalAlignment.LEFT,
        validation_alias=AliasChoices(
            "HorizontalAlignment", "Alignment", "horizontal_alignment"
        ),
    )
    vertical_alignment: VerticalAlignment = Field(default=VerticalAlignment.BOTTOM)

    spacing_before_in_pt: float = Field(default=0.0, ge=0.0)
    spacing_after_in_pt: float = Field(default=0.0, ge=0.0)
    border_width_in_pt: float = Field(default=0.0)
    border_style: BorderStyle = Field(default=BorderStyle.NONE)

    @property
    def is_bold(self) -> bool:
        """Bold and BoldItalic select the bold face."""
        return self.font_style in (FontStyle.BOLD, FontStyle.BOLD_ITALIC)

    @property
    def is_italic(self) -> bool:
        """Italic and BoldItalic select the italic face."""
        return self.font_style in (FontStyle.ITALIC, FontStyle.BOLD_ITALIC)

    @property
    def is_underlined(self) -> bool:
        """Underline is its own style value."""
        return self.font_style == FontStyle.UNDERLINE

    @property
    def has_border(self) -> bool:
        """A border needs both a positive width and an edge set."""
        return self.border_width_in_pt > 0 and self.border_style != BorderStyle.NONE
