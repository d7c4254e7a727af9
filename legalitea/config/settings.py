from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 3001

    pdf_engine: str = "pdfplumber"
    ocr_engine: str = "sentinel"

    max_file_size_bytes: int = 10 * 1024 * 1024
    max_docx_body_bytes: int = 20 * 1024 * 1024
    min_text_length: int = 50
    max_text_length: int = 50_000
    extraction_timeout_seconds: int = 60

    analysis_provider: str = "openai"
    analysis_temperature: float = 0.2

    analysis_openai_api_key: str = ""
    analysis_openai_model_name: str = "gpt-4o-mini"
    analysis_openai_timeout_seconds: int = 30

    analysis_openai_compatible_base_url: str = ""
    analysis_openai_compatible_api_key: str = ""
    analysis_openai_compatible_model_name: str = ""
    analysis_openai_compatible_timeout_seconds: int = 30

    analysis_openrouter_api_key: str = ""
    analysis_openrouter_model_name: str = ""
    analysis_groq_api_key: str = ""
    analysis_groq_model_name: str = ""
    analysis_together_api_key: str = ""
    analysis_together_model_name: str = ""
    analysis_deepseek_api_key: str = ""
    analysis_deepseek_model_name: str = ""
    analysis_ollama_api_key: str = "ollama"
    analysis_ollama_model_name: str = ""
    analysis_gemini_api_key: str = ""
    analysis_gemini_model_name: str = "gemini-1.5-flash"

    save_ttl_hours: int = 24
