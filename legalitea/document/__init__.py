from legalitea.document.extractor import TextExtractor
from legalitea.document.models import Document, ProcessingProgress
from legalitea.document.text_input import normalize_text
from legalitea.document.validator import validate_document

__all__ = [
    "Document",
    "ProcessingProgress",
    "TextExtractor",
    "normalize_text",
    "validate_document",
]
