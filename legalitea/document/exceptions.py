class DocumentError(Exception):
    """Base exception for all document-handling errors."""


class DocumentValidationError(DocumentError):
    """Raised when a document is rejected before extraction (size or type)."""


class ExtractionError(DocumentError):
    """Raised when text cannot be extracted from a document.

    The message is safe to show to end users.
    """


class PdfExtractionError(ExtractionError):
    """Raised by PDF adapters when the PDF cannot be opened or read."""


class DocxExtractionError(ExtractionError):
    """Raised by the Word adapter when the document body cannot be read."""


class ExtractionTimeoutError(ExtractionError):
    """Raised when extraction runs past its deadline."""


class OcrRequiredError(ExtractionError):
    """Raised when a document only yielded the OCR sentinel text."""
