from legalitea.analysis.base import BaseAnalyzer
from legalitea.analysis.factory import AnalyzerFactory
from legalitea.config.settings import Settings
from legalitea.document.docx_adapter import DocxAdapter
from legalitea.document.extractor import TextExtractor
from legalitea.document.factory import OcrEngineFactory, PdfExtractorFactory
from legalitea.document.models import Document
from legalitea.logging.logger import Log
from legalitea.processor.models import ProcessingResult
from legalitea.processor.pipeline import PipelineContext, PipelineStep
from legalitea.processor.state import ProcessingStateMachine, StatusListener
from legalitea.processor.steps import AnalyzeStep, ExtractTextStep, NormalizeTextStep


class Processor:
    """Runs a document or pasted text through extraction and analysis.

    Document pipeline: extract (validates first) -> analyze.
    Text pipeline: normalize -> analyze.
    Any step failure halts the request's state machine and is re-raised.
    """

    def __init__(
        self,
        *,
        document_steps: list[PipelineStep],
        text_steps: list[PipelineStep],
    ) -> None:
        self._document_steps = document_steps
        self._text_steps = text_steps

    def process_document(
        self,
        document: Document,
        *,
        language: str = "en",
        document_type: str | None = None,
        listener: StatusListener | None = None,
    ) -> ProcessingResult:
        Log.info(f"Processing {document.mime_type} document ({document.size_bytes} bytes)")
        context = PipelineContext(
            machine=ProcessingStateMachine(listener),
            language=language,
            document_type=document_type,
            document=document,
        )
        return self._run(self._document_steps, context)

    def process_text(
        self,
        text: str,
        *,
        language: str = "en",
        document_type: str | None = None,
        listener: StatusListener | None = None,
    ) -> ProcessingResult:
        Log.info(f"Processing pasted text ({len(text)} chars)")
        context = PipelineContext(
            machine=ProcessingStateMachine(listener),
            language=language,
            document_type=document_type,
            raw_text=text,
        )
        return self._run(self._text_steps, context)

    def _run(self, steps: list[PipelineStep], context: PipelineContext) -> ProcessingResult:
        context.machine.submit()
        try:
            for step in steps:
                context = step.run(context)
        except Exception as exc:
            context.error_message = str(exc)
            context.machine.fail(context.error_message)
            Log.error(f"Processing failed in stage '{context.machine.stage.value}': {exc}")
            raise

        if context.analysis is None:
            raise RuntimeError("Pipeline finished without an analysis")
        return ProcessingResult(
            text=context.extracted_text,
            analysis=context.analysis,
            status=context.machine.status,
        )


def build_text_extractor(settings: Settings) -> TextExtractor:
    return TextExtractor(
        pdf_extractor=PdfExtractorFactory.create(settings),
        ocr_engine=OcrEngineFactory.create(settings),
        docx_extractor=DocxAdapter(max_body_bytes=settings.max_docx_body_bytes),
        max_file_size_bytes=settings.max_file_size_bytes,
        timeout_seconds=settings.extraction_timeout_seconds,
    )


def build_processor(
    settings: Settings,
    analyzer: BaseAnalyzer | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    text_extractor = build_text_extractor(settings)
    analyze_step = AnalyzeStep(analyzer or AnalyzerFactory.create(settings))
    return Processor(
        document_steps=[ExtractTextStep(text_extractor), analyze_step],
        text_steps=[
            NormalizeTextStep(settings.min_text_length, settings.max_text_length),
            analyze_step,
        ],
    )
