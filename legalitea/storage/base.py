from abc import ABC, abstractmethod

from legalitea.analysis.models import Analysis
from legalitea.storage.models import SavedAnalysisRecord

DEFAULT_TTL_HOURS = 24


class BaseAnalysisStore(ABC):
    """Contract for places analyses can be saved to."""

    @abstractmethod
    def save(self, email: str, analysis: Analysis) -> SavedAnalysisRecord:
        """Persist an analysis for ``email``; it expires after the store's TTL.

        Raises:
            StorageError: if the analysis could not be saved.
        """

    @abstractmethod
    def get(self, record_id: str) -> SavedAnalysisRecord | None:
        """Return a saved, unexpired record or None."""
