import threading
import uuid
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from legalitea.analysis.models import Analysis
from legalitea.logging.logger import Log
from legalitea.storage.base import DEFAULT_TTL_HOURS, BaseAnalysisStore
from legalitea.storage.models import SavedAnalysisRecord


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryAnalysisStore(BaseAnalysisStore):
    """Process-local store. Records are lost on restart."""

    def __init__(
        self,
        ttl_hours: int = DEFAULT_TTL_HOURS,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._ttl = timedelta(hours=ttl_hours)
        self._clock = clock
        self._records: dict[str, SavedAnalysisRecord] = {}
        self._lock = threading.Lock()

    def save(self, email: str, analysis: Analysis) -> SavedAnalysisRecord:
        now = self._clock()
        record = SavedAnalysisRecord(
            id=uuid.uuid4().hex,
            email=email,
            analysis=analysis,
            created_at=now,
            expires_at=now + self._ttl,
        )
        with self._lock:
            self._purge_expired(now)
            self._records[record.id] = record
        Log.info(f"Saved analysis {record.id}, expires at {record.expires_at.isoformat()}")
        return record

    def get(self, record_id: str) -> SavedAnalysisRecord | None:
        now = self._clock()
        with self._lock:
            record = self._records.get(record_id)
            if record is None:
                return None
            if record.is_expired(now):
                del self._records[record_id]
                return None
            return record

    def _purge_expired(self, now: datetime) -> None:
        expired = [key for key, record in self._records.items() if record.is_expired(now)]
        for key in expired:
            del self._records[key]
