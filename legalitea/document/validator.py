from legalitea.document.models import ALLOWED_MIME_TYPES, Document, DocumentValidationResult

DEFAULT_MAX_FILE_SIZE_BYTES = 10 * 1024 * 1024

FILE_TOO_LARGE_MESSAGE = "File size must be under 10MB"
UNSUPPORTED_TYPE_MESSAGE = "Please upload a PDF or DOCX file"


def validate_document(
    document: Document,
    max_size_bytes: int = DEFAULT_MAX_FILE_SIZE_BYTES,
) -> DocumentValidationResult:
    """Check that a document is small enough and of a supported type.

    Size is checked before type, so an oversized file of the wrong type is
    reported as too large.
    """
    if document.size_bytes > max_size_bytes:
        return DocumentValidationResult(valid=False, error=FILE_TOO_LARGE_MESSAGE)
    if document.mime_type not in ALLOWED_MIME_TYPES:
        return DocumentValidationResult(valid=False, error=UNSUPPORTED_TYPE_MESSAGE)
    return DocumentValidationResult(valid=True)
