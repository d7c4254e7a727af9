from typing import Any

from fastapi import APIRouter, FastAPI, File, Form, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from legalitea.analysis.base import BaseAnalyzer
from legalitea.analysis.exceptions import StructureInvalidError
from legalitea.analysis.factory import AnalyzerFactory
from legalitea.analysis.models import AnalysisRequest
from legalitea.analysis.serializer import analysis_to_dict
from legalitea.analysis.validator import build_analysis
from legalitea.api.schemas import AnalyzeRequest, SaveRequest, is_valid_email
from legalitea.config.settings import Settings
from legalitea.document.exceptions import DocumentValidationError, ExtractionError
from legalitea.document.extractor import TextExtractor
from legalitea.document.models import Document, ProcessingProgress
from legalitea.document.ocr import is_ocr_sentinel
from legalitea.logging.logger import Log
from legalitea.processor.processor import Processor, build_processor, build_text_extractor
from legalitea.processor.state import ProcessingStatus
from legalitea.storage.base import BaseAnalysisStore
from legalitea.storage.exceptions import StorageError
from legalitea.storage.memory_store import InMemoryAnalysisStore

INTERNAL_ERROR = {"error": "Internal server error"}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _upload_to_document(file: UploadFile, max_size_bytes: int) -> Document:
    # Read one byte past the cap so oversized uploads fail validation without
    # being buffered in full.
    content = file.file.read(max_size_bytes + 1)
    return Document.from_bytes(
        content,
        mime_type=file.content_type or "",
        filename=file.filename or "",
    )


def create_app(
    settings: Settings | None = None,
    *,
    analyzer: BaseAnalyzer | None = None,
    text_extractor: TextExtractor | None = None,
    processor: Processor | None = None,
    store: BaseAnalysisStore | None = None,
) -> FastAPI:
    """Build the HTTP application around the analysis core."""
    settings = settings or Settings()
    analyzer = analyzer or AnalyzerFactory.create(settings)
    text_extractor = text_extractor or build_text_extractor(settings)
    processor = processor or build_processor(settings, analyzer=analyzer)
    store = store or InMemoryAnalysisStore(ttl_hours=settings.save_ttl_hours)

    app = FastAPI(title="LegaliTea Analysis API")
    router = APIRouter(prefix="/api")

    @app.exception_handler(RequestValidationError)
    async def malformed_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        Log.error(f"Malformed request to {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=500, content=INTERNAL_ERROR)

    @router.get("/health")
    def health_check() -> dict[str, str]:
        return {"status": "ok", "provider": settings.analysis_provider}

    @router.post("/analyze")
    def analyze(request: AnalyzeRequest) -> Any:
        try:
            text = request.text
            if not text or not text.strip():
                return _error(400, "Text is required")
            if len(text) > settings.max_text_length:
                return _error(
                    400,
                    f"Text too long. Maximum {settings.max_text_length:,} characters allowed.",
                )

            language = request.language or "en"
            Log.info(f"Analyzing {len(text)} chars in '{language}'")
            analysis = analyzer.analyze(
                AnalysisRequest(
                    text=text,
                    document_type=request.document_type,
                    language=language,
                )
            )
            return analysis_to_dict(analysis)
        except Exception as exc:
            Log.exception(f"Analysis request failed: {exc}")
            return JSONResponse(status_code=500, content=INTERNAL_ERROR)

    @router.post("/save")
    def save(request: SaveRequest) -> Any:
        try:
            if not request.email or not request.analysis:
                return _error(400, "Email and analysis are required")
            if not is_valid_email(request.email):
                return _error(400, "Invalid email format")
            try:
                analysis = build_analysis(request.analysis)
            except StructureInvalidError as exc:
                Log.warning(f"Rejected save with invalid analysis: {exc}")
                return _error(400, "Invalid analysis format")

            record = store.save(request.email, analysis)
            return {
                "id": record.id,
                "expires_at": record.expires_at.isoformat(),
                "message": "Analysis saved successfully",
            }
        except StorageError as exc:
            Log.error(f"Save failed: {exc}")
            return _error(500, "Failed to save analysis")
        except Exception as exc:
            Log.exception(f"Save request failed: {exc}")
            return _error(500, "Failed to save analysis")

    @router.post("/extract")
    def extract(file: UploadFile = File(...)) -> Any:
        events: list[ProcessingProgress] = []
        try:
            document = _upload_to_document(file, settings.max_file_size_bytes)
            text = text_extractor.extract(document, on_progress=events.append)
        except DocumentValidationError as exc:
            return _error(400, str(exc))
        except ExtractionError as exc:
            return _error(422, str(exc))
        except Exception as exc:
            Log.exception(f"Extraction request failed: {exc}")
            return JSONResponse(status_code=500, content=INTERNAL_ERROR)
        return {
            "text": text,
            "ocrRequired": is_ocr_sentinel(text),
            "progress": [event.to_dict() for event in events],
        }

    @router.post("/process")
    def process(
        file: UploadFile = File(...),
        language: str = Form("en"),
        document_type: str | None = Form(None, alias="documentType"),
    ) -> Any:
        statuses: list[ProcessingStatus] = []
        try:
            document = _upload_to_document(file, settings.max_file_size_bytes)
            result = processor.process_document(
                document,
                language=language,
                document_type=document_type,
                listener=statuses.append,
            )
        except DocumentValidationError as exc:
            return _error(400, str(exc))
        except ExtractionError as exc:
            return _error(422, str(exc))
        except Exception as exc:
            Log.exception(f"Processing request failed: {exc}")
            return JSONResponse(status_code=500, content=INTERNAL_ERROR)
        return {
            "text": result.text,
            "analysis": analysis_to_dict(result.analysis),
            "statuses": [status.to_dict() for status in statuses],
        }

    app.include_router(router)
    return app
