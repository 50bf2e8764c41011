"""Image renderers for page-level images and table-cell images."""

import logging

from reportlab.platypus import Image

from pdftemplate.errors import ResourceNotFoundError
from pdftemplate.layout.geometry import PageGeometry
from pdftemplate.layout.units import cm_to_pt, pixels_to_pt
from pdftemplate.models import HorizontalAlignment, ImageDefinition
from pdftemplate.resources import ImageInfo, ImageReader

logger = logging.getLogger(__name__)

# Width comparisons are made in centimeters; this absorbs float noise only
WIDTH_TOLERANCE_CM = 1e-9

IMAGE_ALIGNMENTS = {
    HorizontalAlignment.LEFT: "LEFT",
    HorizontalAlignment.RIGHT: "RIGHT",
    HorizontalAlignment.CENTER: "CENTER",
    HorizontalAlignment.JUSTIFY: "CENTER",
}


def natural_size(info: ImageInfo) -> tuple[float, float]:
    """Natural (width, height) of an image in points."""
    return (
        pixels_to_pt(info.width_pixels, info.dpi_x),
        pixels_to_pt(info.height_pixels, info.dpi_y),
    )


def plan_image_size(
    info: ImageInfo,
    element: ImageDefinition,
    geometry: PageGeometry,
) -> tuple[float, float]:
    """Decide the placed size of a page-level image.

    Width, in priority order:
    1. The requested width, if given and within the printable width
    2. The printable width, if the natural width exceeds it
    3. The natural width

    Height follows the width when the aspect ratio is locked. Otherwise an
    explicit height is applied as given, and without one the natural
    proportions are kept.

    Returns:
        (width, height) in points
    """
    natural_width, _ = natural_size(info)
    requested_cm = element.image_width_in_cm
    if requested_cm > 0 and requested_cm <= geometry.printable_width_cm + WIDTH_TOLERANCE_CM:
        width = cm_to_pt(requested_cm)
    elif natural_width > geometry.printable_width:
        width = geometry.printable_width
    else:
        width = natural_width

    if element.lock_aspect_ratio:
        height = width * info.aspect_ratio
    elif element.image_height_in_cm > 0:
        height = cm_to_pt(element.image_height_in_cm)
    else:
        height = width * info.aspect_ratio

    return width, height


def render_image(
    element: ImageDefinition,
    geometry: PageGeometry,
    reader: ImageReader,
) -> Image:
    """Render a page-level image element.

    Raises:
        ResourceNotFoundError: The image file does not exist
    """
    info = reader.read_image_info(element.image_path)
    width, height = plan_image_size(info, element, geometry)
    logger.debug(
        "Image %s: natural %.1fx%.1fpt, placed %.1fx%.1fpt",
        info.path, *natural_size(info), width, height,
    )

    image = Image(info.path, width=width, height=height)
    image.hAlign = IMAGE_ALIGNMENTS[element.alignment]
    return image


def render_cell_image(path: str, width_cm: float, reader: ImageReader) -> Image:
    """Render an image inside a table cell.

    The image always fills the column width with its aspect ratio kept and
    is anchored to the top-left corner of the cell.

    Raises:
        ResourceNotFoundError: The path is empty or the file does not exist
    """
    if not path or not path.strip():
        raise ResourceNotFoundError(
            path, "Path to header graphics was empty or the file does not exist."
        )
    info = reader.read_image_info(path)

    width = cm_to_pt(width_cm)
    image = Image(info.path, width=width, height=width * info.aspect_ratio)
    image.hAlign = "LEFT"
    image.vAlign = "TOP"
    return image
