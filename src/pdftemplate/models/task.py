"""Input and output models of the PDF creation task."""

from typing import Optional

from pydantic import BaseModel, Field

from .base import FileExistsAction


class FileProperties(BaseModel):
    """Where and how the rendered PDF is saved."""

    save_to_disk: bool = Field(default=True, description="Persist the PDF to directory/file_name")
    directory: str = Field(default=".", description="Destination directory")
    file_name: str = Field(default="example_file.pdf", description="Destination file name")
    file_exists_action: FileExistsAction = Field(default=FileExistsAction.ERROR)


class DocumentContent(BaseModel):
    """JSON definition of the PDF document to produce."""

    content_json: str


class Options(BaseModel):
    """Task behaviour options."""

    use_given_credentials: bool = Field(
        default=False, description="Write the file as the given user"
    )
    user_name: Optional[str] = Field(None, description="domain\\username")
    password: Optional[str] = Field(None, repr=False)
    throw_error_on_failure: bool = Field(
        default=True, description="Raise on failure instead of returning success=False"
    )
    get_result_as_byte_array: bool = Field(
        default=True, description="Return the PDF bytes in the output"
    )


class Credentials(BaseModel):
    """Identity a file is written as."""

    domain: str
    user_name: str
    password: Optional[str] = Field(None, repr=False)


class Output(BaseModel):
    """Result of a PDF creation task."""

    success: bool
    file_name: Optional[str] = None
    result_as_byte_array: Optional[bytes] = Field(None, repr=False)
    error_message: Optional[str] = None
    page_count: int = Field(default=0, ge=0)
