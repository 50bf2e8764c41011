"""Pytest configuration and fixtures."""

import json

import pytest
from PIL import Image

from pdftemplate.layout import PageGeometry
from pdftemplate.models import DocumentDefinition
from pdftemplate.resources import ImageInfo


@pytest.fixture
def output_dir(tmp_path):
    """Create a temporary output directory."""
    out_dir = tmp_path / "output"
    out_dir.mkdir()
    return out_dir


@pytest.fixture
def sample_png(tmp_path):
    """A 200x100 pixel PNG at 96 DPI (about 5.3 x 2.6 cm)."""
    path = tmp_path / "logo.png"
    Image.new("RGB", (200, 100), "navy").save(path, dpi=(96, 96))
    return path


@pytest.fixture
def a4_geometry():
    """A4 portrait with 2.5 cm margins: 16 cm printable width."""
    return PageGeometry.from_definition(DocumentDefinition())


@pytest.fixture
def fake_reader(sample_png):
    """Image reader returning a 200x100 pixel, 96 DPI image for every path."""

    class FakeReader:
        def __init__(self, width_pixels=200, height_pixels=100, dpi=96.0):
            self.width_pixels = width_pixels
            self.height_pixels = height_pixels
            self.dpi = dpi
            self.calls = []

        def read_image_info(self, path):
            self.calls.append(path)
            return ImageInfo(
                path=str(sample_png),
                width_pixels=self.width_pixels,
                height_pixels=self.height_pixels,
                dpi_x=self.dpi,
                dpi_y=self.dpi,
            )

    return FakeReader()


@pytest.fixture
def make_content():
    """Build document JSON text in the producers' PascalCase shape."""

    def _make(*elements, **document):
        payload = {
            "PageSize": "A4",
            "PageOrientation": "Portrait",
            "MarginLeftInCm": 2.5,
            "MarginTopInCm": 2.5,
            "MarginRightInCm": 2.5,
            "MarginBottomInCm": 2.5,
        }
        payload.update(document)
        payload["DocumentElements"] = list(elements)
        return json.dumps(payload)

    return _make
