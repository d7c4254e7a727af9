from typing import ClassVar

from legalitea.analysis.analyzer import Analyzer
from legalitea.analysis.base import BaseAnalyzer
from legalitea.analysis.example_client_adapter import ExampleClientAdapter
from legalitea.analysis.openai_client_adapter import OpenAIClientAdapter
from legalitea.config.settings import Settings


class AnalyzerFactory:
    """Creates the configured analyzer and its model client."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
    }

    # Hosts that accept json_object but not strict json_schema responses.
    JSON_OBJECT_ONLY: ClassVar[frozenset[str]] = frozenset({"groq", "deepseek", "ollama"})

    @classmethod
    def create(cls, settings: Settings) -> BaseAnalyzer:
        """Create a configured analyzer from application settings."""
        provider = settings.analysis_provider.lower()
        if provider == "example":
            return Analyzer(client=ExampleClientAdapter(), model="example", temperature=0.0)
        client = OpenAIClientAdapter(
            api_key=cls._resolve_api_key(provider, settings),
            timeout_seconds=cls._resolve_timeout_seconds(provider, settings),
            base_url=cls._resolve_base_url(provider, settings),
            structured_output=provider not in cls.JSON_OBJECT_ONLY,
        )
        return Analyzer(
            client=client,
            model=cls._resolve_model_name(provider, settings),
            temperature=settings.analysis_temperature,
        )

    @classmethod
    def supported_providers(cls) -> list[str]:
        return ["example", "openai", "openai_compatible", *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS)]

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.analysis_openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "analysis_openai_compatible_base_url is required for "
                    "analysis_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        raise ValueError(
            f"Unknown analysis provider '{provider}'. Choose from: {cls.supported_providers()}"
        )

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.analysis_openai_api_key,
            "openai_compatible": settings.analysis_openai_compatible_api_key,
            "openrouter": settings.analysis_openrouter_api_key,
            "groq": settings.analysis_groq_api_key,
            "together": settings.analysis_together_api_key,
            "deepseek": settings.analysis_deepseek_api_key,
            "ollama": settings.analysis_ollama_api_key,
            "gemini": settings.analysis_gemini_api_key,
        }
        return key_map.get(provider, "") or ""

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.analysis_openai_model_name,
            "openai_compatible": settings.analysis_openai_compatible_model_name,
            "openrouter": settings.analysis_openrouter_model_name,
            "groq": settings.analysis_groq_model_name,
            "together": settings.analysis_together_model_name,
            "deepseek": settings.analysis_deepseek_model_name,
            "ollama": settings.analysis_ollama_model_name,
            "gemini": settings.analysis_gemini_model_name,
        }
        return key_map.get(provider, "") or ""

    @classmethod
    def _resolve_timeout_seconds(cls, provider: str, settings: Settings) -> int:
        if provider == "openai_compatible":
            return settings.analysis_openai_compatible_timeout_seconds
        return settings.analysis_openai_timeout_seconds
