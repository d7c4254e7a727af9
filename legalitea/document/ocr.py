"""OCR port for image-based PDFs.

No OCR engine ships with the service. The sentinel adapter returns a marked
explanation instead of text so callers can tell "OCR needed" apart from a
genuinely empty document.
"""

from abc import ABC, abstractmethod

OCR_SENTINEL_MARKER = "[OCR Processing Required]"

OCR_SENTINEL_TEXT = f"""{OCR_SENTINEL_MARKER}

This document appears to be image-based and requires Optical Character Recognition (OCR) to extract text.

Please try uploading a text-based PDF or Word document instead.

Processing of image-based documents will be available in a future update."""

OCR_REQUIRED_MESSAGE = (
    "This document appears to be image-based and requires OCR, which is not "
    "available yet. Please upload a text-based PDF or Word document."
)


def is_ocr_sentinel(text: str) -> bool:
    """Return True if text is the placeholder produced when OCR was skipped."""
    return text.lstrip().startswith(OCR_SENTINEL_MARKER)


class BaseOcrEngine(ABC):
    """Contract for engines that recover text from image-based PDFs."""

    @abstractmethod
    def recognize(self, pdf_bytes: bytes) -> str:
        """Return text recognized in the PDF, or the OCR sentinel text."""


class SentinelOcrAdapter(BaseOcrEngine):
    """Placeholder engine: never performs OCR, always returns the sentinel."""

    def recognize(self, pdf_bytes: bytes) -> str:
        _ = pdf_bytes
        return OCR_SENTINEL_TEXT
