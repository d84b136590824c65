"""Application configuration using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    provider_timeout_seconds: float = 60.0

    mongo_uri: str = "mongodb://mongodb:27017/bmad_agents"
    mongo_timeout_ms: int = 2000

    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
