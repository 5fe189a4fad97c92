from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    transcription_provider: str = "openai"
    transcription_api_key: str = ""
    transcription_model_name: str = "gpt-4o"
    transcription_base_url: str | None = None
    transcription_timeout_seconds: int = Field(default=30, gt=0)
    transcription_max_tokens: int = Field(default=1000, gt=0)
    transcription_max_attempts: int = Field(default=3, ge=1)
    transcription_backoff_seconds: float = Field(default=1.0, ge=0.0)

    max_upload_bytes: int = Field(default=5 * 1024 * 1024, gt=0)
    max_images_per_batch: int = Field(default=10, ge=1)
    max_requirements_chars: int = Field(default=2000, ge=0)

    identifier_min_length: int = Field(default=6, ge=1)
    identifier_upper_ratio: float = Field(default=0.8, ge=0.0, le=1.0)
