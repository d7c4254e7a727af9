from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from legalitea.document.models import PdfPageSource


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def open(self, pdf_bytes: bytes) -> AbstractContextManager[PdfPageSource]:
        """Open PDF bytes as a scoped page source.

        The underlying document is closed when the ``with`` block exits,
        whether it exits normally or through an exception.

        Raises:
            PdfExtractionError: if the PDF cannot be opened or a page
                cannot be read.
        """

    def extract(self, pdf_bytes: bytes) -> str:
        """Extract plain text from PDF bytes, pages joined in order."""
        with self.open(pdf_bytes) as source:
            pages = list(source.texts)
        return "\n".join(pages).strip()
