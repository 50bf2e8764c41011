"""Image resource reader.

The layout engine only needs two things from an image file: that it exists,
and its natural pixel size and resolution. Both come from here so tests can
substitute a fake reader.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

from PIL import Image, UnidentifiedImageError

from pdftemplate.config import settings
from pdftemplate.errors import ResourceNotFoundError


@dataclass(frozen=True)
class ImageInfo:
    """Natural size of an image file."""

    path: str
    width_pixels: int
    height_pixels: int
    dpi_x: float
    dpi_y: float

    @property
    def aspect_ratio(self) -> float:
        """Height divided by width, in physical units."""
        return (self.height_pixels / self.dpi_y) / (self.width_pixels / self.dpi_x)


class ImageReader(Protocol):
    """Anything that can describe an image file."""

    def read_image_info(self, path: str) -> ImageInfo:
        ...


class PillowImageReader:
    """Reads image dimensions and resolution with Pillow."""

    def __init__(self, default_dpi: Optional[float] = None):
        """Initialize reader.

        Args:
            default_dpi: Resolution assumed when the file has none (default from settings)
        """
        self.default_dpi = default_dpi or settings.default_image_dpi

    def read_image_info(self, path: str) -> ImageInfo:
        """Read natural size of an image.

        Raises:
            ResourceNotFoundError: Path is empty or the file does not exist
        """
        if not path or not path.strip():
            raise ResourceNotFoundError(path, "Image path is empty.")
        image_path = Path(path)
        if not image_path.is_file():
            raise ResourceNotFoundError(path)

        try:
            with Image.open(image_path) as image:
                width, height = image.size
                dpi = image.info.get("dpi")
        except UnidentifiedImageError as exc:
            raise ResourceNotFoundError(path, f"Not a readable image file: {path}") from exc

        dpi_x, dpi_y = self._normalize_dpi(dpi)
        return ImageInfo(
            path=str(image_path),
            width_pixels=width,
            height_pixels=height,
            dpi_x=dpi_x,
            dpi_y=dpi_y,
        )

    def _normalize_dpi(self, dpi) -> tuple[float, float]:
        if not dpi:
            return float(self.default_dpi), float(self.default_dpi)
        dpi_x, dpi_y = (dpi, dpi) if isinstance(dpi, (int, float)) else dpi[:2]
        dpi_x = float(dpi_x) if dpi_x and float(dpi_x) > 1 else float(self.default_dpi)
        dpi_y = float(dpi_y) if dpi_y and float(dpi_y) > 1 else float(self.default_dpi)
        return dpi_x, dpi_y
