from legalitea.analysis.base import BaseAnalyzer
from legalitea.analysis.models import AnalysisRequest
from legalitea.document.exceptions import OcrRequiredError
from legalitea.document.extractor import TextExtractor
from legalitea.document.models import ExtractionStage, ProcessingProgress
from legalitea.document.ocr import OCR_REQUIRED_MESSAGE, is_ocr_sentinel
from legalitea.document.text_input import (
    DEFAULT_MAX_TEXT_LENGTH,
    DEFAULT_MIN_TEXT_LENGTH,
    normalize_text,
)
from legalitea.logging.logger import Log
from legalitea.processor.exceptions import TextInputError
from legalitea.processor.pipeline import PipelineContext, PipelineStep


class ExtractTextStep(PipelineStep):
    def __init__(self, text_extractor: TextExtractor) -> None:
        self._text_extractor = text_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.document is None:
            raise ValueError("PipelineContext.document must be set before extraction")
        text = self._text_extractor.extract(
            context.document,
            on_progress=context.machine.report_extraction,
        )
        if is_ocr_sentinel(text):
            raise OcrRequiredError(OCR_REQUIRED_MESSAGE)
        context.extracted_text = text
        return context


class NormalizeTextStep(PipelineStep):
    def __init__(
        self,
        min_length: int = DEFAULT_MIN_TEXT_LENGTH,
        max_length: int = DEFAULT_MAX_TEXT_LENGTH,
    ) -> None:
        self._min_length = min_length
        self._max_length = max_length

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.raw_text is None:
            raise ValueError("PipelineContext.raw_text must be set before normalization")
        result = normalize_text(context.raw_text, self._min_length, self._max_length)
        if not result.valid or result.text is None:
            raise TextInputError(result.error or "Invalid text")
        context.extracted_text = result.text
        context.machine.report_extraction(
            ProcessingProgress(
                stage=ExtractionStage.COMPLETE,
                progress=100,
                message="Text ready for analysis",
            )
        )
        return context


class AnalyzeStep(PipelineStep):
    def __init__(self, analyzer: BaseAnalyzer) -> None:
        self._analyzer = analyzer

    def run(self, context: PipelineContext) -> PipelineContext:
        if not context.extracted_text:
            raise ValueError("PipelineContext.extracted_text must be set before analysis")
        context.machine.extraction_succeeded()
        analysis = self._analyzer.analyze(
            AnalysisRequest(
                text=context.extracted_text,
                document_type=context.document_type,
                language=context.language,
            )
        )
        context.analysis = analysis
        context.machine.analysis_received(analysis)
        Log.info(f"Analysis ready (confidence {analysis.summary.confidence:.2f})")
        return context
