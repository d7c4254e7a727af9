from dataclasses import dataclass

from legalitea.analysis.models import Analysis
from legalitea.processor.state import ProcessingStatus


@dataclass(frozen=True)
class ProcessingResult:
    """Outcome of a successful run through the pipeline."""

    text: str
    analysis: Analysis
    status: ProcessingStatus
