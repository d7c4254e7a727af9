from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from legalitea.analysis.models import Analysis
from legalitea.document.models import Document
from legalitea.processor.state import ProcessingStateMachine


@dataclass(slots=True)
class PipelineContext:
    machine: ProcessingStateMachine = field(default_factory=ProcessingStateMachine)
    language: str = "en"
    document_type: str | None = None
    document: Document | None = None
    raw_text: str | None = None
    extracted_text: str = ""
    analysis: Analysis | None = None
    error_message: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
