from legalitea.storage.base import BaseAnalysisStore
from legalitea.storage.exceptions import StorageError
from legalitea.storage.memory_store import InMemoryAnalysisStore
from legalitea.storage.models import SavedAnalysisRecord

__all__ = ["BaseAnalysisStore", "InMemoryAnalysisStore", "SavedAnalysisRecord", "StorageError"]
