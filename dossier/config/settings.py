from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    extraction_provider: str = "example"
    extraction_api_key: str = ""
    extraction_model_name: str = "gpt-4o-mini"
    extraction_base_url: str = ""
    extraction_timeout_seconds: int = 60
    extraction_temperature: float = 0.0
    extraction_delay_seconds: float = 0.8

    pdf_engine: str = "pymupdf"
    pdf_render_dpi: int = 150

    max_file_size_bytes: int = 20 * 1024 * 1024
