"""Parse Stage - JSON document description to a DocumentDefinition.

Everything that can be wrong with the input is found here, before any
layout work starts.
"""

import logging

from pydantic import ValidationError

from pdftemplate.errors import DocumentInputError
from pdftemplate.models import DocumentDefinition

logger = logging.getLogger(__name__)


def _describe(error: ValidationError) -> str:
    """One line per validation problem, located by field path."""
    lines = []
    for problem in error.errors():
        location = ".".join(str(part) for part in problem["loc"]) or "<document>"
        lines.append(f"{location}: {problem['msg']}")
    return "; ".join(lines)


def _input_error(error: ValidationError) -> DocumentInputError:
    """Map a validation failure to the message shown to callers."""
    first = error.errors()[0]
    if first["type"] == "json_invalid":
        detail = first.get("ctx", {}).get("error", first["msg"])
        return DocumentInputError(f"Document content is not valid JSON: {detail}")
    if first["type"] == "model_type" and not first["loc"]:
        return DocumentInputError(
            f"Document content must be a JSON object, got {type(first['input']).__name__}."
        )
    return DocumentInputError(f"Invalid document definition: {_describe(error)}")


def parse_document(json_text: str) -> DocumentDefinition:
    """Parse a JSON document description.

    Args:
        json_text: Document description as produced by the template callers

    Returns:
        Validated, immutable DocumentDefinition

    Raises:
        DocumentInputError: Text is not JSON, not an object, or violates the schema
    """
    if json_text is None or not json_text.strip():
        raise DocumentInputError("Document content is empty.")

    try:
        definition = DocumentDefinition.model_validate_json(json_text)
    except ValidationError as exc:
        raise _input_error(exc) from exc

    logger.debug(
        "Parsed %s %s document with %d elements",
        definition.page_size.value,
        definition.page_orientation.value.lower(),
        definition.element_count,
    )
    return definition
