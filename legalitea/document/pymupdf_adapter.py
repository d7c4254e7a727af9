from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import pymupdf

from legalitea.document.base import BasePdfExtractor
from legalitea.document.exceptions import PdfExtractionError
from legalitea.document.models import PdfPageSource


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts text from PDF using PyMuPDF."""

    @contextmanager
    def open(self, pdf_bytes: bytes) -> Iterator[PdfPageSource]:
        try:
            doc = pymupdf.open(stream=pdf_bytes, filetype="pdf")  # type: ignore[no-untyped-call]
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf could not open PDF: {exc}") from exc
        with doc:
            yield PdfPageSource(page_count=doc.page_count, texts=self._page_texts(doc))

    @staticmethod
    def _page_texts(doc: Any) -> Iterator[str]:
        for number, page in enumerate(doc, start=1):
            try:
                text = page.get_text()
            except Exception as exc:
                raise PdfExtractionError(f"pymupdf failed on page {number}: {exc}") from exc
            yield text
