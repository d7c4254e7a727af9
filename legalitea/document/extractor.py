"""Turns an uploaded document into plain text, reporting progress as it goes.

Stages: validating (0) -> extracting (10-80) -> ocr (80-95, image PDFs only)
-> complete (100).
"""

import time
from collections.abc import Callable

from legalitea.document.base import BasePdfExtractor
from legalitea.document.docx_adapter import DocxAdapter
from legalitea.document.exceptions import (
    DocumentValidationError,
    ExtractionError,
    ExtractionTimeoutError,
)
from legalitea.document.models import (
    DOC_MIME_TYPE,
    DOCX_MIME_TYPE,
    PDF_MIME_TYPE,
    Document,
    ExtractionStage,
    ProcessingProgress,
    ProgressCallback,
)
from legalitea.document.ocr import BaseOcrEngine
from legalitea.document.validator import DEFAULT_MAX_FILE_SIZE_BYTES, validate_document
from legalitea.logging.logger import Log

EXTRACTION_FAILED_MESSAGE = "Failed to extract text from document. Please try another file."
NO_TEXT_FOUND_MESSAGE = "No text found in document"

MIN_DIRECT_TEXT_LENGTH = 50

_PDF_PAGES_START = 30
_PDF_PAGES_SPAN = 50


class TextExtractor:
    """Extracts text from PDF and Word documents.

    PDFs whose text layer is shorter than ``min_text_length`` are treated as
    image-based and handed to the OCR engine.
    """

    def __init__(
        self,
        *,
        pdf_extractor: BasePdfExtractor,
        ocr_engine: BaseOcrEngine,
        docx_extractor: DocxAdapter | None = None,
        max_file_size_bytes: int = DEFAULT_MAX_FILE_SIZE_BYTES,
        min_text_length: int = MIN_DIRECT_TEXT_LENGTH,
        timeout_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._pdf_extractor = pdf_extractor
        self._ocr_engine = ocr_engine
        self._docx_extractor = docx_extractor or DocxAdapter()
        self._max_file_size_bytes = max_file_size_bytes
        self._min_text_length = min_text_length
        self._timeout_seconds = timeout_seconds
        self._clock = clock

    def extract(
        self,
        document: Document,
        on_progress: ProgressCallback | None = None,
    ) -> str:
        """Extract trimmed plain text from a document.

        Raises:
            DocumentValidationError: if the document is too large or of an
                unsupported type.
            ExtractionError: if no text could be extracted. The message is
                generic; the cause is logged and chained.
        """
        report = _Reporter(on_progress)
        report(ExtractionStage.VALIDATING, 0, "Validating document...")

        validation = validate_document(document, self._max_file_size_bytes)
        if not validation.valid:
            raise DocumentValidationError(validation.error)

        report(ExtractionStage.EXTRACTING, 10, "Reading document...")
        deadline = self._deadline()
        try:
            if document.mime_type == PDF_MIME_TYPE:
                text = self._extract_pdf(document.content, report, deadline)
            elif document.mime_type in (DOCX_MIME_TYPE, DOC_MIME_TYPE):
                text = self._extract_docx(document.content, report, deadline)
            else:
                raise ExtractionError("Unsupported file type")
        except Exception as exc:
            Log.error(
                f"Text extraction failed for '{document.filename or document.mime_type}': "
                f"{type(exc).__name__}: {exc}"
            )
            raise ExtractionError(EXTRACTION_FAILED_MESSAGE) from exc

        report(ExtractionStage.COMPLETE, 100, "Text extraction complete!")
        Log.info(f"Extracted {len(text)} chars from {document.size_bytes} byte document")
        return text

    def _extract_pdf(
        self,
        pdf_bytes: bytes,
        report: "_Reporter",
        deadline: float | None,
    ) -> str:
        pages: list[str] = []
        with self._pdf_extractor.open(pdf_bytes) as source:
            total = source.page_count
            report(ExtractionStage.EXTRACTING, _PDF_PAGES_START, f"Processing {total} pages...")
            for index, page_text in enumerate(source.texts, start=1):
                pages.append(page_text)
                report(
                    ExtractionStage.EXTRACTING,
                    _PDF_PAGES_START + index / total * _PDF_PAGES_SPAN,
                    f"Processing page {index} of {total}...",
                )
                self._check_deadline(deadline)

        text = "\n".join(pages).strip()
        if len(text) < self._min_text_length:
            report(ExtractionStage.OCR, 80, "Document appears to be image-based, using OCR...")
            return self._extract_with_ocr(pdf_bytes, report, deadline)
        return text

    def _extract_with_ocr(
        self,
        pdf_bytes: bytes,
        report: "_Reporter",
        deadline: float | None,
    ) -> str:
        report(ExtractionStage.OCR, 85, "Performing OCR on document...")
        text = self._ocr_engine.recognize(pdf_bytes).strip()
        self._check_deadline(deadline)
        if not text:
            raise ExtractionError(NO_TEXT_FOUND_MESSAGE)
        report(ExtractionStage.OCR, 95, "OCR finished")
        return text

    def _extract_docx(
        self,
        docx_bytes: bytes,
        report: "_Reporter",
        deadline: float | None,
    ) -> str:
        report(ExtractionStage.EXTRACTING, 50, "Extracting text from Word document...")
        text = self._docx_extractor.extract(docx_bytes).strip()
        self._check_deadline(deadline)
        if not text:
            raise ExtractionError(NO_TEXT_FOUND_MESSAGE)
        return text

    def _deadline(self) -> float | None:
        if self._timeout_seconds is None:
            return None
        return self._clock() + self._timeout_seconds

    def _check_deadline(self, deadline: float | None) -> None:
        if deadline is not None and self._clock() > deadline:
            raise ExtractionTimeoutError(
                f"Extraction exceeded {self._timeout_seconds} seconds"
            )


class _Reporter:
    """Forwards progress events to an optional callback."""

    def __init__(self, callback: ProgressCallback | None) -> None:
        self._callback = callback

    def __call__(self, stage: ExtractionStage, progress: float, message: str) -> None:
        if self._callback is not None:
            self._callback(ProcessingProgress(stage=stage, progress=progress, message=message))
