"""Unit conversion between centimeters and PDF points."""

POINTS_PER_INCH = 72.0
CM_PER_INCH = 2.54
POINTS_PER_CM = POINTS_PER_INCH / CM_PER_INCH  # ~28.3465


def cm_to_pt(cm: float) -> float:
    """Convert centimeters to points."""
    return cm * POINTS_PER_INCH / CM_PER_INCH


def pt_to_cm(pt: float) -> float:
    """Convert points to centimeters."""
    return pt * CM_PER_INCH / POINTS_PER_INCH


def pixels_to_pt(pixels: float, dpi: float) -> float:
    """Convert a pixel length at the given resolution to points."""
    return pixels / dpi * POINTS_PER_INCH
