from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    app_name: str = "pdftext"
    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"
    validate_pdf_signature: bool = True

    route_path: str = "/parse-pdf"
    cors_allow_origins: list[str] = ["*"]

    host: str = "0.0.0.0"
    port: int = 8000
