import io
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import pdfplumber

from legalitea.document.base import BasePdfExtractor
from legalitea.document.exceptions import PdfExtractionError
from legalitea.document.models import PdfPageSource


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts text from PDF using pdfplumber."""

    @contextmanager
    def open(self, pdf_bytes: bytes) -> Iterator[PdfPageSource]:
        try:
            pdf = pdfplumber.open(io.BytesIO(pdf_bytes))
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber could not open PDF: {exc}") from exc
        with pdf:
            yield PdfPageSource(page_count=len(pdf.pages), texts=self._page_texts(pdf))

    @staticmethod
    def _page_texts(pdf: Any) -> Iterator[str]:
        for number, page in enumerate(pdf.pages, start=1):
            try:
                text = page.extract_text() or ""
            except Exception as exc:
                raise PdfExtractionError(
                    f"pdfplumber failed on page {number}: {exc}"
                ) from exc
            yield text
