class StorageError(Exception):
    """Raised when an analysis cannot be saved or loaded."""
