"""Typed exceptions for document input, layout, resources and output."""


class PdfTemplateError(Exception):
    """Base class for all rendering errors."""


class DocumentInputError(PdfTemplateError, ValueError):
    """Raised when the document description cannot be parsed."""


class LayoutError(PdfTemplateError):
    """Raised when content cannot be laid out on the page."""


class TableWidthExceededError(LayoutError):
    """Raised when a table's columns are wider than the printable width."""

    def __init__(self, allowed_cm: float, requested_cm: float):
        self.allowed_cm = allowed_cm
        self.requested_cm = requested_cm
        super().__init__(
            f"Page allows table to be {allowed_cm:g} cm wide. "
            f"Provided table's width is larger than that, {requested_cm:g} cm."
        )


class ResourceNotFoundError(PdfTemplateError, FileNotFoundError):
    """Raised when an image referenced by the document does not exist."""

    def __init__(self, path, message: str = None):
        self.path = path
        super().__init__(message or f"Image file not found: {path}")


class OutputExistsError(PdfTemplateError, FileExistsError):
    """Raised when the output file exists and overwriting is not allowed."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"File {path} already exists.")


class CredentialFormatError(PdfTemplateError, ValueError):
    """Raised when a user name is not of the form domain\\username."""


class UnsupportedIdentityError(PdfTemplateError):
    """Raised when writing under another identity without a capable writer."""
