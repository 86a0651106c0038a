"""Pydantic Settings model for application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from release_summarizer.utils.constants import (
    DEFAULT_MAX_AI_QUERY_LENGTH,
    DEFAULT_OPENAI_IMAGE_MODEL,
    DEFAULT_OPENAI_MODEL,
)


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False

    # GitHub API settings
    GITHUB_API_URL: str = "https://api.github.com"
    REPO: str | None = None

    # GitHub PAT settings
    GITHUB_PAT_TOKEN: str | None = None

    # GitHub App settings
    GITHUB_APP_ID: int | None = None
    GITHUB_APP_PRIVATE_KEY_PATH: Path | None = None
    GITHUB_APP_INSTALLATION_ID: int | None = None

    # Inference settings
    OPENAI_API_KEY: str | None = None
    OPENAI_BASE_URL: str | None = None
    OPENAI_MODEL: str = DEFAULT_OPENAI_MODEL
    OPENAI_IMAGE_MODEL: str = DEFAULT_OPENAI_IMAGE_MODEL
    MAX_AI_QUERY_LENGTH: int = DEFAULT_MAX_AI_QUERY_LENGTH


settings = Settings()
