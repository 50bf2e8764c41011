"""Tests for parsing input and writing output."""

import pytest

from pdftemplate.errors import (
    CredentialFormatError,
    DocumentInputError,
    OutputExistsError,
    UnsupportedIdentityError,
)
from pdftemplate.models import Credentials, FileExistsAction, ParagraphDefinition
from pdftemplate.pipeline import (
    parse_credentials,
    parse_document,
    resolve_output_path,
    write_file,
)

from builders import paragraph


class TestParseDocument:
    """Tests for the parse stage."""

    def test_valid(self, make_content):
        """Valid JSON becomes a DocumentDefinition."""
        definition = parse_document(make_content(paragraph("Hi")))
        assert isinstance(definition.document_elements[0], ParagraphDefinition)

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_empty(self, text):
        """Empty content is rejected."""
        with pytest.raises(DocumentInputError):
            parse_document(text)

    def test_malformed_json(self):
        """Broken JSON is a document input error."""
        with pytest.raises(DocumentInputError, match="not valid JSON"):
            parse_document('{"PageSize": ')

    def test_not_an_object(self):
        """Top-level arrays are rejected."""
        with pytest.raises(DocumentInputError, match="JSON object"):
            parse_document("[]")

    def test_scalar_is_not_an_object(self):
        """The rejected top-level type is named."""
        with pytest.raises(DocumentInputError, match="got int"):
            parse_document("42")

    def test_malformed_json_position(self):
        """The JSON error carries the position of the problem."""
        with pytest.raises(DocumentInputError, match="line 1 column"):
            parse_document('{"PageSize": "A4",}')

    def test_schema_violation_names_field(self):
        """Validation problems are reported with their location."""
        with pytest.raises(DocumentInputError) as exc_info:
            parse_document('{"PageSize": "Postcard"}')
        assert "PageSize" in str(exc_info.value)

    def test_unknown_element(self, make_content):
        """Elements without a marker field are rejected."""
        with pytest.raises(DocumentInputError, match="Unknown document element"):
            parse_document(make_content({"Colour": "red"}))

    def test_is_value_error(self):
        """Input errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_document("nope")


class TestResolveOutputPath:
    """Tests for the file-exists policy."""

    def test_free_name(self, output_dir):
        """A free name is used as is, whatever the policy."""
        for action in FileExistsAction:
            assert resolve_output_path(str(output_dir), "a.pdf", action) == output_dir / "a.pdf"

    def test_error(self, output_dir):
        """Error refuses an existing file."""
        (output_dir / "a.pdf").write_bytes(b"old")
        with pytest.raises(OutputExistsError) as exc_info:
            resolve_output_path(str(output_dir), "a.pdf", FileExistsAction.ERROR)
        assert "already exists" in str(exc_info.value)
        assert isinstance(exc_info.value, FileExistsError)

    def test_overwrite(self, output_dir):
        """Overwrite reuses the existing name."""
        (output_dir / "a.pdf").write_bytes(b"old")
        path = resolve_output_path(str(output_dir), "a.pdf", FileExistsAction.OVERWRITE)
        assert path == output_dir / "a.pdf"

    def test_rename(self, output_dir):
        """Rename counts up until a name is free."""
        (output_dir / "report.pdf").write_bytes(b"0")
        path = resolve_output_path(str(output_dir), "report.pdf", FileExistsAction.RENAME)
        assert path.name == "report_(1).pdf"

        path.write_bytes(b"1")
        path = resolve_output_path(str(output_dir), "report.pdf", FileExistsAction.RENAME)
        assert path.name == "report_(2).pdf"


class TestParseCredentials:
    """Tests for domain\\username parsing."""

    def test_valid(self):
        """Domain and user are split on the backslash."""
        credentials = parse_credentials("CORP\\alice", "secret")
        assert credentials == Credentials(domain="CORP", user_name="alice", password="secret")

    @pytest.mark.parametrize("user_name", [None, "", "alice", "a\\b\\c", "\\alice"])
    def test_invalid(self, user_name):
        """Anything but exactly domain\\username is rejected."""
        with pytest.raises(CredentialFormatError):
            parse_credentials(user_name, "secret")

    def test_password_hidden(self):
        """Passwords do not show up in reprs."""
        assert "secret" not in repr(parse_credentials("CORP\\alice", "secret"))


class TestWriteFile:
    """Tests for the default writer."""

    def test_writes_bytes(self, tmp_path):
        """Bytes are written and missing directories created."""
        path = tmp_path / "nested" / "out.pdf"
        write_file(b"%PDF-data", path)
        assert path.read_bytes() == b"%PDF-data"

    def test_identity_unsupported(self, tmp_path):
        """The default writer cannot switch identity."""
        path = tmp_path / "out.pdf"
        with pytest.raises(UnsupportedIdentityError):
            write_file(b"x", path, Credentials(domain="CORP", user_name="alice"))
        assert not path.exists()
