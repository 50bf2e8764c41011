"""PDF creation task - JSON document description in, PDF file and bytes out.

Flow:
1. Parse the JSON content into a DocumentDefinition
2. Render the whole PDF into memory
3. Resolve the output path and write the file, if saving to disk
4. Report file name, page count and optionally the bytes

Failures surface as the original exception, or as an unsuccessful Output
when ``Options.throw_error_on_failure`` is off.
"""

import logging
from typing import Optional

from pdftemplate.models import DocumentContent, FileProperties, Options, Output
from pdftemplate.pipeline import (
    FileWriter,
    PDFRenderer,
    inspect_pdf,
    parse_credentials,
    parse_document,
    resolve_output_path,
    write_file,
)
from pdftemplate.resources import ImageReader

logger = logging.getLogger(__name__)


def create_pdf(
    output_file: FileProperties,
    content: DocumentContent,
    options: Options,
    writer: Optional[FileWriter] = None,
    image_reader: Optional[ImageReader] = None,
) -> Output:
    """Create a PDF document from a JSON document description.

    Args:
        output_file: Destination and file-exists policy
        content: JSON document description
        options: Credentials, failure and result options
        writer: File writer (default: write as the current user)
        image_reader: Image metadata reader (default: Pillow)

    Returns:
        Output describing the produced file
    """
    writer = writer or write_file

    try:
        definition = parse_document(content.content_json)
        data = PDFRenderer(image_reader=image_reader).render(definition)
        summary = inspect_pdf(data)

        file_name = None
        if output_file.save_to_disk:
            path = resolve_output_path(
                output_file.directory, output_file.file_name, output_file.file_exists_action
            )
            identity = None
            if options.use_given_credentials:
                identity = parse_credentials(options.user_name, options.password)
            writer(data, path, identity)
            file_name = str(path)

        logger.info("Created PDF with %d pages", summary.page_count)
        return Output(
            success=True,
            file_name=file_name,
            result_as_byte_array=data if options.get_result_as_byte_array else None,
            page_count=summary.page_count,
        )

    except Exception as exc:
        if options.throw_error_on_failure:
            raise
        logger.warning("PDF creation failed: %s", exc)
        return Output(success=False, error_message=str(exc))
