from dataclasses import dataclass
from datetime import datetime

from legalitea.analysis.models import Analysis


@dataclass(frozen=True)
class SavedAnalysisRecord:
    """A saved analysis and when it stops being retrievable."""

    id: str
    email: str
    analysis: Analysis
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at
