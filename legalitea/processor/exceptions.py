class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class InvalidTransitionError(ProcessorError):
    """Raised when the processing state machine is asked for an illegal move."""


class TextInputError(ProcessorError):
    """Raised when pasted text is rejected by the normalizer."""
