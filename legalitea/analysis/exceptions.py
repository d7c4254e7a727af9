class AnalysisError(Exception):
    """Base exception for the model-backed analysis path."""


class ModelInvocationError(AnalysisError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class ResponseParseError(AnalysisError):
    """Raised when the model response is not a JSON object."""


class StructureInvalidError(AnalysisError):
    """Raised when a parsed response does not have the Analysis shape."""
