"""Tests for table layout."""

import pytest
from reportlab.platypus import Image, Paragraph, Table

from pdftemplate.errors import LayoutError, TableWidthExceededError
from pdftemplate.layout import StyleResolver, TableLayout, cm_to_pt, validate_column_widths
from pdftemplate.layout.fields import PageNumberField, page_number_text
from pdftemplate.models import ColumnDefinition, TableDefinition

from builders import table


@pytest.fixture
def make_layout(a4_geometry, fake_reader):
    """Build a TableLayout from a table element dict."""

    def _make(element, total_pages=None):
        definition = TableDefinition.model_validate(element)
        style = StyleResolver().resolve(definition.style_settings, "t", in_table=True)
        return TableLayout(definition, a4_geometry, style, fake_reader, total_pages=total_pages)

    return _make


def cell_text(cell):
    return cell.getPlainText() if isinstance(cell, Paragraph) else None


class TestValidateColumnWidths:
    """Tests for column width validation."""

    def test_widths_in_points(self, a4_geometry):
        """Valid widths are returned in points."""
        columns = [ColumnDefinition(name="a", width_in_cm=4), ColumnDefinition(name="b", width_in_cm=6)]
        widths = validate_column_widths(columns, a4_geometry)
        assert widths == pytest.approx([cm_to_pt(4), cm_to_pt(6)])

    def test_exactly_printable_width(self, a4_geometry):
        """Columns summing to the printable width fit."""
        columns = [ColumnDefinition(name=str(i), width_in_cm=4) for i in range(4)]
        assert len(validate_column_widths(columns, a4_geometry)) == 4

    def test_too_wide(self, a4_geometry):
        """Columns wider than the page raise with both widths."""
        columns = [ColumnDefinition(name="a", width_in_cm=10), ColumnDefinition(name="b", width_in_cm=7)]
        with pytest.raises(TableWidthExceededError) as exc_info:
            validate_column_widths(columns, a4_geometry)
        assert exc_info.value.allowed_cm == pytest.approx(16)
        assert exc_info.value.requested_cm == pytest.approx(17)
        assert "16 cm wide" in str(exc_info.value)
        assert "17 cm" in str(exc_info.value)

    def test_is_layout_error(self, a4_geometry):
        """Width errors are layout errors."""
        with pytest.raises(LayoutError):
            validate_column_widths([ColumnDefinition(name="a", width_in_cm=20)], a4_geometry)

    @pytest.mark.parametrize("width", [0, -1])
    def test_non_positive_width(self, a4_geometry, width):
        """Every column needs a positive width."""
        with pytest.raises(LayoutError, match="positive width"):
            validate_column_widths([ColumnDefinition(name="a", width_in_cm=width)], a4_geometry)


class TestTableLayout:
    """Tests for TableLayout.build."""

    def test_rows_and_widths(self, make_layout):
        """One row per data row, widths from the columns."""
        layout = make_layout(table([("A", 3), ("B", 5)], [{"A": "1", "B": "2"}, {"A": "3", "B": "4"}]))
        built = layout.build()
        assert isinstance(built, Table)
        assert len(built._cellvalues) == 2
        assert built._colWidths == pytest.approx([cm_to_pt(3), cm_to_pt(5)])
        assert built.hAlign == "LEFT"

    def test_header_row(self, make_layout):
        """The header row shows the column names."""
        built = make_layout(
            table([("Name", 4), ("Qty", 2)], [{"Name": "Bolt", "Qty": 5}], has_header_row=True)
        ).build()
        assert [cell_text(c) for c in built._cellvalues[0]] == ["Name", "Qty"]
        assert [cell_text(c) for c in built._cellvalues[1]] == ["Bolt", "5"]

    def test_column_order(self, make_layout):
        """Cell N belongs to column N whatever the key order in the row."""
        built = make_layout(table([("A", 3), ("B", 3)], [{"B": "b", "A": "a"}])).build()
        assert [cell_text(c) for c in built._cellvalues[0]] == ["a", "b"]

    def test_no_rows(self, make_layout):
        """A table without rows draws nothing."""
        assert make_layout(table([("A", 3)], [])).build() is None

    def test_no_rows_still_validated(self, make_layout):
        """Widths are checked even when there is nothing to draw."""
        with pytest.raises(TableWidthExceededError):
            make_layout(table([("A", 30)], [])).build()

    def test_header_only(self, make_layout):
        """A header row alone is still a table."""
        built = make_layout(table([("A", 3)], [], has_header_row=True)).build()
        assert len(built._cellvalues) == 1

    def test_image_column(self, make_layout, fake_reader):
        """Image columns render the cell value as an image path."""
        layout = make_layout(table([("Logo", 4, "Image")], [{"Logo": "logo.png"}]))
        built = layout.build()
        assert isinstance(built._cellvalues[0][0], Image)
        assert fake_reader.calls == ["logo.png"]

    def test_image_column_header_is_text(self, make_layout):
        """Header cells of image columns are plain text."""
        built = make_layout(
            table([("Logo", 4, "Image")], [{"Logo": "logo.png"}], has_header_row=True)
        ).build()
        assert cell_text(built._cellvalues[0][0]) == "Logo"

    def test_page_number_column(self, make_layout):
        """PageNum columns hold a deferred page-number field."""
        layout = make_layout(table([("Page", 3, "PageNum")], [{"Page": ""}]), total_pages=7)
        built = layout.build()
        field = built._cellvalues[0][0]
        assert isinstance(field, PageNumberField)
        assert field.total_pages == 7
        assert layout.uses_page_count

    def test_text_only_table_does_not_need_page_count(self, make_layout):
        """Only PageNum columns request the page count."""
        layout = make_layout(table([("A", 3)], [{"A": "x"}]))
        layout.build()
        assert not layout.uses_page_count

    def test_border_on_plain_table(self, make_layout):
        """Plain tables get their border."""
        layout = make_layout(
            table([("A", 3)], [{"A": "x"}], BorderWidthInPt=1, BorderStyle="All")
        )
        commands = layout._table_commands(1)
        assert any(c[0] == "GRID" for c in commands)

    @pytest.mark.parametrize("table_type", ["Header", "Footer"])
    def test_repeating_tables_are_borderless(self, make_layout, table_type):
        """Header and footer tables never draw borders."""
        layout = make_layout(
            table([("A", 3)], [{"A": "x"}], table_type=table_type, BorderWidthInPt=1, BorderStyle="All")
        )
        commands = layout._table_commands(1)
        assert not any(c[0] in ("GRID", "LINEABOVE", "LINEBELOW") for c in commands)

    def test_vertical_alignment(self, make_layout):
        """Cell content is anchored as the style says."""
        layout = make_layout(table([("A", 3)], [{"A": "x"}], VerticalAlignment="Top"))
        commands = layout._table_commands(1)
        assert ("VALIGN", (0, 0), (-1, -1), "TOP") in commands


class TestPageNumberText:
    """Tests for page-number field text."""

    def test_with_total(self):
        """Known totals are shown in parentheses."""
        assert page_number_text(2, 5) == "2 (5)"

    def test_placeholder(self):
        """Unknown totals show a placeholder."""
        assert page_number_text(1, None) == "1 (?)"
