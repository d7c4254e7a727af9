"""AI-powered legal document analyzer with a deterministic fallback."""

import json
import re
from pathlib import Path
from typing import Any

from legalitea.analysis.base import BaseAnalyzer
from legalitea.analysis.client_base import BaseAnalysisClient
from legalitea.analysis.exceptions import AnalysisError, ResponseParseError
from legalitea.analysis.fallback import FallbackAnalyzer
from legalitea.analysis.models import Analysis, AnalysisRequest, StructureInvalid
from legalitea.analysis.prompt_builder import PromptBuilder
from legalitea.analysis.prompt_loader import load_json_schema
from legalitea.analysis.validator import validate_analysis
from legalitea.logging.logger import Log

_OPENING_FENCE = re.compile(r"^```(?:json)?[ \t]*\n?", re.IGNORECASE)
_CLOSING_FENCE = re.compile(r"\n?[ \t]*```$")


def strip_code_fences(raw: str) -> str:
    """Remove a surrounding Markdown code fence, optionally tagged ``json``."""
    cleaned = raw.strip()
    if not cleaned.startswith("```"):
        return cleaned
    cleaned = _OPENING_FENCE.sub("", cleaned, count=1)
    cleaned = _CLOSING_FENCE.sub("", cleaned, count=1)
    return cleaned.strip()


def parse_response(raw: str) -> dict[str, Any]:
    """Parse a raw model response into a JSON object.

    Raises:
        ResponseParseError: if the text is not JSON or not an object.
    """
    try:
        parsed = json.loads(strip_code_fences(raw))
    except json.JSONDecodeError as exc:
        raise ResponseParseError(f"Invalid JSON response: {exc}") from exc
    if not isinstance(parsed, dict):
        raise ResponseParseError("JSON response must be an object")
    return parsed


class Analyzer(BaseAnalyzer):
    """Analyzes documents with a generative model.

    Network, parse and structure failures on the model path are logged and
    answered with the fallback analyzer's output; callers always get a valid
    Analysis.
    """

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        model: str,
        temperature: float = 0.2,
        prompt_builder: PromptBuilder | None = None,
        fallback: FallbackAnalyzer | None = None,
        json_schema_path: Path | None = None,
        system_prompt: str = "",
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._prompt_builder = prompt_builder or PromptBuilder()
        self._fallback = fallback or FallbackAnalyzer()
        self._json_schema = json.loads(load_json_schema(json_schema_path))
        self._system_prompt = system_prompt

    def analyze(self, request: AnalysisRequest) -> Analysis:
        try:
            outcome = self._analyze_with_model(request)
        except AnalysisError as exc:
            Log.warning(f"Model analysis failed, using fallback: {exc}")
            return self._use_fallback(request)
        except Exception as exc:
            Log.exception(f"Unexpected error during model analysis, using fallback: {exc}")
            return self._use_fallback(request)

        if isinstance(outcome, StructureInvalid):
            Log.warning(f"Model response has invalid structure, using fallback: {outcome.reason}")
            return self._use_fallback(request)

        Log.info(
            f"Analysis complete: {len(outcome.risk_assessment.red_flags)} red flags, "
            f"{len(outcome.action_plan)} action items"
        )
        return outcome

    def _analyze_with_model(self, request: AnalysisRequest) -> Analysis | StructureInvalid:
        prompt = self._prompt_builder.build(request.text, request.language)
        Log.debug(f"Analysis prompt:\n{prompt}")

        raw_response = self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
            json_schema=self._json_schema,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        return validate_analysis(parse_response(raw_response))

    def _use_fallback(self, request: AnalysisRequest) -> Analysis:
        return self._fallback.analyze(request.text, request.document_type)
