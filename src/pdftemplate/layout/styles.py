"""Style Resolver - map style settings onto reportlab styles.

Font families are resolved in this order:
1. Built-in PDF base fonts and their common aliases (Arial -> Helvetica, ...)
2. TrueType files found in the configured font directories
3. The configured fallback family

A family that cannot be resolved never fails the render.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY, TA_LEFT, TA_RIGHT
from reportlab.lib.styles import ParagraphStyle
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont

from pdftemplate.config import settings
from pdftemplate.models import (
    BorderStyle,
    HorizontalAlignment,
    StyleSettingsDefinition,
    VerticalAlignment,
)

logger = logging.getLogger(__name__)

AUTO_LEADING_FACTOR = 1.2

_HELVETICA = ("Helvetica", "Helvetica-Bold", "Helvetica-Oblique", "Helvetica-BoldOblique")
_TIMES = ("Times-Roman", "Times-Bold", "Times-Italic", "Times-BoldItalic")
_COURIER = ("Courier", "Courier-Bold", "Courier-Oblique", "Courier-BoldOblique")

BUILTIN_FAMILIES = {
    "helvetica": _HELVETICA,
    "arial": _HELVETICA,
    "sans-serif": _HELVETICA,
    "times": _TIMES,
    "times-roman": _TIMES,
    "times new roman": _TIMES,
    "serif": _TIMES,
    "courier": _COURIER,
    "courier new": _COURIER,
    "monospace": _COURIER,
}

# File name suffixes tried for each face of a TrueType family
TTF_FACE_SUFFIXES = {
    "regular": ("", "-Regular", " Regular"),
    "bold": ("-Bold", " Bold", "bd"),
    "italic": ("-Italic", " Italic", "-Oblique", "i"),
    "bold_italic": ("-BoldItalic", " Bold Italic", "-BoldOblique", "bi", "z"),
}

ALIGNMENTS = {
    HorizontalAlignment.LEFT: TA_LEFT,
    HorizontalAlignment.CENTER: TA_CENTER,
    HorizontalAlignment.RIGHT: TA_RIGHT,
    HorizontalAlignment.JUSTIFY: TA_JUSTIFY,
}

VERTICAL_ALIGNMENTS = {
    VerticalAlignment.TOP: "TOP",
    VerticalAlignment.CENTER: "MIDDLE",
    VerticalAlignment.BOTTOM: "BOTTOM",
}


@dataclass(frozen=True)
class FontFamily:
    """Registered font names for the four faces of a family."""

    regular: str
    bold: str
    italic: str
    bold_italic: str

    def face(self, bold: bool, italic: bool) -> str:
        """Pick the face for the given style bits."""
        if bold and italic:
            return self.bold_italic
        if bold:
            return self.bold
        if italic:
            return self.italic
        return self.regular


class FontResolver:
    """Resolves family names to registered reportlab fonts.

    Resolved families are cached per resolver instance; a resolver is meant
    to live for a single render call.
    """

    def __init__(
        self,
        font_dirs: Optional[list[str]] = None,
        fallback_family: Optional[str] = None,
    ):
        """Initialize resolver.

        Args:
            font_dirs: Directories searched for TrueType files (default from settings)
            fallback_family: Family used when resolution fails (default from settings)
        """
        self.font_dirs = [Path(d) for d in (font_dirs if font_dirs is not None else settings.font_dirs)]
        self.fallback_family = fallback_family or settings.fallback_font_family
        self._cache: dict[str, FontFamily] = {}

    def resolve(self, family: Optional[str]) -> FontFamily:
        """Resolve a family name, falling back instead of failing."""
        key = (family or "").strip().lower()
        if key in self._cache:
            return self._cache[key]

        resolved = self._lookup(key)
        if resolved is None:
            logger.warning(
                "Font family %r is not available, using %r", family, self.fallback_family
            )
            resolved = self._lookup(self.fallback_family.strip().lower())
        if resolved is None:
            resolved = FontFamily(*_HELVETICA)

        self._cache[key] = resolved
        return resolved

    def _lookup(self, key: str) -> Optional[FontFamily]:
        if not key:
            return None
        if key in BUILTIN_FAMILIES:
            return FontFamily(*BUILTIN_FAMILIES[key])
        return self._register_truetype(key)

    def _find_face_file(self, key: str, suffixes: tuple[str, ...]) -> Optional[Path]:
        wanted = {f"{key}{suffix}".lower() for suffix in suffixes}
        wanted |= {name.replace(" ", "") for name in wanted}
        for font_dir in self.font_dirs:
            if not font_dir.is_dir():
                continue
            for candidate in font_dir.glob("*.ttf"):
                if candidate.stem.lower() in wanted:
                    return candidate
        return None

    def _register_truetype(self, key: str) -> Optional[FontFamily]:
        regular_path = self._find_face_file(key, TTF_FACE_SUFFIXES["regular"])
        if regular_path is None:
            return None

        names = {}
        for face, suffixes in TTF_FACE_SUFFIXES.items():
            path = regular_path if face == "regular" else self._find_face_file(key, suffixes)
            if path is None:
                names[face] = names["regular"]
                continue
            font_name = f"{key}-{face}"
            if font_name not in pdfmetrics.getRegisteredFontNames():
                try:
                    pdfmetrics.registerFont(TTFont(font_name, str(path)))
                except TTFError as exc:
                    if face == "regular":
                        logger.warning("Could not load font file %s: %s", path, exc)
                        return None
                    logger.warning("Could not load %s face from %s: %s", face, path, exc)
                    names[face] = names["regular"]
                    continue
            names[face] = font_name

        logger.debug("Registered TrueType family %r from %s", key, regular_path.parent)
        return FontFamily(**names)


@dataclass(frozen=True)
class BorderSpec:
    """Solid border on a set of cell edges."""

    width: float = 0.0
    style: BorderStyle = BorderStyle.NONE

    @property
    def is_active(self) -> bool:
        """Width <= 0 or style None means no border at all."""
        return self.width > 0 and self.style != BorderStyle.NONE

    def table_commands(self, row_count: int) -> list[tuple]:
        """TableStyle commands covering every row and column."""
        if not self.is_active or row_count <= 0:
            return []
        if self.style == BorderStyle.TOP:
            return [("LINEABOVE", (0, 0), (-1, -1), self.width, colors.black)]
        if self.style == BorderStyle.BOTTOM:
            return [("LINEBELOW", (0, 0), (-1, -1), self.width, colors.black)]
        return [("GRID", (0, 0), (-1, -1), self.width, colors.black)]


@dataclass(frozen=True)
class ResolvedStyle:
    """Concrete style for one element."""

    paragraph_style: ParagraphStyle
    underline: bool = False
    vertical_alignment: str = "BOTTOM"
    border: BorderSpec = field(default_factory=BorderSpec)

    @property
    def font_name(self) -> str:
        return self.paragraph_style.fontName

    @property
    def font_size(self) -> float:
        return self.paragraph_style.fontSize


class StyleResolver:
    """Turns StyleSettingsDefinition records into ResolvedStyle objects."""

    def __init__(
        self,
        font_resolver: Optional[FontResolver] = None,
        default_font_size: Optional[float] = None,
    ):
        self.font_resolver = font_resolver or FontResolver()
        self.default_font_size = default_font_size or settings.default_font_size_pt

    def resolve(
        self,
        style: StyleSettingsDefinition,
        name: str,
        in_table: bool = False,
    ) -> ResolvedStyle:
        """Resolve a style.

        Args:
            style: Style settings from the document description
            name: Unique style name
            in_table: Table cells treat line spacing as a minimum, paragraphs
                as an exact value

        Returns:
            ResolvedStyle
        """
        family = self.font_resolver.resolve(style.font_family)
        font_size = style.font_size_in_pt if style.font_size_in_pt > 0 else self.default_font_size

        auto_leading = font_size * AUTO_LEADING_FACTOR
        if style.line_spacing_in_pt <= 0:
            leading = auto_leading
        elif in_table:
            leading = max(style.line_spacing_in_pt, auto_leading)
        else:
            leading = style.line_spacing_in_pt

        paragraph_style = ParagraphStyle(
            name,
            fontName=family.face(style.is_bold, style.is_italic),
            fontSize=font_size,
            leading=leading,
            alignment=ALIGNMENTS[style.horizontal_alignment],
            spaceBefore=style.spacing_before_in_pt,
            spaceAfter=style.spacing_after_in_pt,
            textColor=colors.black,
        )

        return ResolvedStyle(
            paragraph_style=paragraph_style,
            underline=style.is_underlined,
            vertical_alignment=VERTICAL_ALIGNMENTS[style.vertical_alignment],
            border=BorderSpec(width=style.border_width_in_pt, style=style.border_style),
        )
