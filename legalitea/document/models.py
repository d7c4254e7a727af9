from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
DOC_MIME_TYPE = "application/msword"

ALLOWED_MIME_TYPES = frozenset({PDF_MIME_TYPE, DOCX_MIME_TYPE, DOC_MIME_TYPE})


@dataclass(frozen=True)
class Document:
    """An uploaded document, held only for the duration of one request."""

    content: bytes
    mime_type: str
    size_bytes: int
    filename: str = ""

    @classmethod
    def from_bytes(cls, content: bytes, mime_type: str, filename: str = "") -> "Document":
        return cls(
            content=content,
            mime_type=mime_type,
            size_bytes=len(content),
            filename=filename,
        )


class ExtractionStage(str, Enum):
    VALIDATING = "validating"
    EXTRACTING = "extracting"
    OCR = "ocr"
    COMPLETE = "complete"


@dataclass(frozen=True)
class ProcessingProgress:
    """Single progress event emitted by the text extractor."""

    stage: ExtractionStage
    progress: float
    message: str

    def to_dict(self) -> dict[str, object]:
        return {
            "stage": self.stage.value,
            "progress": self.progress,
            "message": self.message,
        }


ProgressCallback = Callable[[ProcessingProgress], None]


@dataclass(frozen=True)
class DocumentValidationResult:
    valid: bool
    error: str | None = None


@dataclass(frozen=True)
class TextInputResult:
    valid: bool
    text: str | None = None
    error: str | None = None


@dataclass
class PdfPageSource:
    """An open PDF: page count plus an ordered, lazy sequence of page texts.

    Only valid inside the ``with`` block of the adapter that produced it.
    """

    page_count: int
    texts: Iterator[str]
