"""Request-scoped state machine: upload -> extract -> analyze -> complete."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from legalitea.analysis.models import Analysis
from legalitea.document.models import ProcessingProgress
from legalitea.processor.exceptions import InvalidTransitionError


class ProcessingStage(str, Enum):
    UPLOAD = "upload"
    EXTRACT = "extract"
    ANALYZE = "analyze"
    COMPLETE = "complete"


@dataclass(frozen=True)
class ProcessingStatus:
    """Snapshot of the machine.

    ``progress`` is None while analyzing: the model call reports no progress.
    """

    stage: ProcessingStage
    progress: float | None
    message: str
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def to_dict(self) -> dict[str, object]:
        return {
            "stage": self.stage.value,
            "progress": self.progress,
            "message": self.message,
            "error": self.error,
        }


StatusListener = Callable[[ProcessingStatus], None]


class ProcessingStateMachine:
    """Tracks one document through the processing stages.

    A failure halts the machine where it is; only ``reset`` moves it on.
    Genuine and fallback analyses both complete it.
    """

    def __init__(self, listener: StatusListener | None = None) -> None:
        self._listener = listener
        self._stage = ProcessingStage.UPLOAD
        self._progress: float | None = 0.0
        self._message = "Waiting for a document"
        self._error: str | None = None
        self._analysis: Analysis | None = None

    @property
    def stage(self) -> ProcessingStage:
        return self._stage

    @property
    def progress(self) -> float | None:
        return self._progress

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def analysis(self) -> Analysis | None:
        return self._analysis

    @property
    def status(self) -> ProcessingStatus:
        return ProcessingStatus(
            stage=self._stage,
            progress=self._progress,
            message=self._message,
            error=self._error,
        )

    def submit(self) -> None:
        self._require(ProcessingStage.UPLOAD, "submit")
        self._move(ProcessingStage.EXTRACT, 0.0, "Reading document...")

    def report_extraction(self, event: ProcessingProgress) -> None:
        """Mirror an extractor progress event; progress never goes backwards."""
        self._require(ProcessingStage.EXTRACT, "report extraction progress")
        current = self._progress or 0.0
        self._progress = max(current, min(100.0, max(0.0, event.progress)))
        self._message = event.message
        self._notify()

    def extraction_succeeded(self) -> None:
        self._require(ProcessingStage.EXTRACT, "finish extraction")
        self._move(ProcessingStage.ANALYZE, None, "Analyzing document...")

    def analysis_received(self, analysis: Analysis) -> None:
        self._require(ProcessingStage.ANALYZE, "complete analysis")
        self._analysis = analysis
        self._move(ProcessingStage.COMPLETE, 100.0, "Analysis complete!")

    def fail(self, message: str) -> None:
        """Halt in the current stage with an error for the caller."""
        if self._stage in (ProcessingStage.UPLOAD, ProcessingStage.COMPLETE):
            raise InvalidTransitionError(f"Cannot fail from stage '{self._stage.value}'")
        self._error = message
        self._message = message
        self._notify()

    def reset(self) -> None:
        self._error = None
        self._analysis = None
        self._move(ProcessingStage.UPLOAD, 0.0, "Waiting for a document")

    def _require(self, expected: ProcessingStage, action: str) -> None:
        if self._error is not None:
            raise InvalidTransitionError(
                f"Cannot {action}: processing failed ({self._error}); reset first"
            )
        if self._stage is not expected:
            raise InvalidTransitionError(
                f"Cannot {action} in stage '{self._stage.value}'"
            )

    def _move(self, stage: ProcessingStage, progress: float | None, message: str) -> None:
        self._stage = stage
        self._progress = progress
        self._message = message
        self._notify()

    def _notify(self) -> None:
        if self._listener is not None:
            self._listener(self.status)
