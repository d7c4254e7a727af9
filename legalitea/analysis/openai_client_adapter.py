import httpx
import openai

from legalitea.analysis.client_base import BaseAnalysisClient
from legalitea.analysis.exceptions import AnalysisError, ModelInvocationError


class OpenAIClientAdapter(BaseAnalysisClient):
    """Analysis client built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        structured_output: bool = True,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )
        self._structured_output = structured_output

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object] | None,
    ) -> str:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": user_prompt})
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format=self._response_format(json_schema),
                messages=messages,
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ModelInvocationError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise ModelInvocationError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise AnalysisError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise AnalysisError("AI returned empty response")
        return content

    def _response_format(self, json_schema: dict[str, object] | None) -> dict[str, object]:
        if not self._structured_output or json_schema is None:
            return {"type": "json_object"}
        return {
            "type": "json_schema",
            "json_schema": {
                "name": "legal_document_analysis",
                "strict": True,
                "schema": json_schema,
            },
        }
