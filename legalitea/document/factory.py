from legalitea.config.settings import Settings
from legalitea.document.base import BasePdfExtractor
from legalitea.document.ocr import BaseOcrEngine, SentinelOcrAdapter
from legalitea.document.pdfplumber_adapter import PdfPlumberAdapter
from legalitea.document.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Creates the correct PDF extractor based on settings."""

    ADAPTERS: dict[str, type[BasePdfExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()


class OcrEngineFactory:
    """Creates the OCR engine used for image-based PDFs."""

    ADAPTERS: dict[str, type[BaseOcrEngine]] = {
        "sentinel": SentinelOcrAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseOcrEngine:
        engine = settings.ocr_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown OCR engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()
