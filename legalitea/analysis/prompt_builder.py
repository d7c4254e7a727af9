from pathlib import Path

from legalitea.analysis.languages import language_name
from legalitea.analysis.prompt_loader import load_prompt_template, load_response_format


class PromptBuilder:
    """Renders the analysis instructions around a document's text."""

    def __init__(
        self,
        *,
        prompt_template_path: Path | None = None,
        response_format_path: Path | None = None,
    ) -> None:
        self._template = load_prompt_template(prompt_template_path)
        self._response_format = load_response_format(response_format_path)

    def build(self, text: str, language: str | None = None) -> str:
        """Return the full prompt; the text is embedded once, unmodified."""
        return self._template.format(
            response_format=self._response_format,
            language_name=language_name(language),
            document_text=text,
        )
