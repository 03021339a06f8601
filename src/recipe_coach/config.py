"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str | None = None
    openai_model: str = "gpt-4o-mini"
    recipe_temperature: float = 0.8
    coach_temperature: float = 0.7
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 5000
    cors_allow_origins: str = "*"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def ai_enabled(self) -> bool:
        """Return True when an AI provider credential is configured."""
        return bool(self.openai_api_key and self.openai_api_key.strip())


def parse_allowed_origins(raw: str | None) -> list[str]:
    """Parse the comma-separated CORS origin list from env."""
    if raw is None:
        return ["*"]
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return ["*"]
    origins = [chunk.strip() for chunk in cleaned.split(",")]
    return [origin for origin in origins if origin] or ["*"]
