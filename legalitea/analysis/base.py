from abc import ABC, abstractmethod

from legalitea.analysis.models import Analysis, AnalysisRequest


class BaseAnalyzer(ABC):
    """Contract for all document analyzers."""

    @abstractmethod
    def analyze(self, request: AnalysisRequest) -> Analysis:
        """Produce a structurally valid Analysis for the request's text.

        Implementations must not raise for model-side failures; they return
        a fallback analysis instead.
        """
