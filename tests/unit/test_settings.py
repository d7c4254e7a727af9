import pytest
from pydantic import ValidationError

from legalitea.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        assert Settings().app_env == "dev"

    def test_default_api_port(self) -> None:
        assert Settings().api_port == 3001

    def test_default_file_size_limit_is_ten_megabytes(self) -> None:
        assert Settings().max_file_size_bytes == 10 * 1024 * 1024

    def test_default_text_limits(self) -> None:
        s = Settings()
        assert s.min_text_length == 50
        assert s.max_text_length == 50_000

    def test_default_engines(self) -> None:
        s = Settings()
        assert s.pdf_engine == "pdfplumber"
        assert s.ocr_engine == "sentinel"

    def test_default_analysis_provider(self) -> None:
        s = Settings()
        assert s.analysis_provider == "openai"
        assert s.analysis_temperature == 0.2
        assert s.analysis_openai_timeout_seconds == 30

    def test_default_save_ttl(self) -> None:
        assert Settings().save_ttl_hours == 24


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert Settings().log_level == "DEBUG"

    def test_loads_api_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_PORT", "8080")
        assert Settings().api_port == 8080

    def test_loads_analysis_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANALYSIS_PROVIDER", "groq")
        monkeypatch.setenv("ANALYSIS_GROQ_MODEL_NAME", "llama-3.1-8b-instant")
        s = Settings()
        assert s.analysis_provider == "groq"
        assert s.analysis_groq_model_name == "llama-3.1-8b-instant"

    def test_ignores_unknown_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SOMETHING_UNRELATED", "1")
        Settings()


class TestSettingsValidation:
    def test_invalid_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_temperature_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANALYSIS_TEMPERATURE", "warm")
        with pytest.raises(ValidationError):
            Settings()
