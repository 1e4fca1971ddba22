from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"
    worker_asset_location: str = ""

    analysis_provider: str = "openai"
    analysis_api_key: str = ""
    # empty picks the provider preset's default model
    analysis_model_name: str = ""
    analysis_base_url: str = ""
    analysis_timeout_seconds: int = 60
    analysis_temperature: float = 0.2
