from pathlib import Path

from legalitea.analysis.exceptions import AnalysisError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the analysis prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled analysis_prompt.txt.

    Returns:
        The raw template string with placeholders.

    Raises:
        AnalysisError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "analysis_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AnalysisError(f"Failed to load prompt template: {exc}") from exc


def load_response_format(path: Path | None = None) -> str:
    """Load the example response object shown to the model in the prompt."""
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "analysis_format.json"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise AnalysisError(f"Failed to load response format: {exc}") from exc


def load_json_schema(path: Path | None = None) -> str:
    """Load the JSON schema sent to providers that support structured output.

    Raises:
        AnalysisError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "analysis_schema.json"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AnalysisError(f"Failed to load JSON schema: {exc}") from exc
