"""Pydantic Settings model for application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


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

    # GitHub settings (populated by GitHub Actions runners)
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_TOKEN: str | None = None
    GITHUB_REPOSITORY: str | None = None
    GITHUB_SHA: str | None = None
    GITHUB_OUTPUT: str | None = None

    # Jira settings
    JIRA_URL: str | None = None
    JIRA_USER: str | None = None
    JIRA_API_KEY: str | None = None
    JIRA_PROJECT_KEY: str | None = None
    JIRA_RELEASE_NOTES_FIELD: str = "customfield_10000"


def get_settings() -> Settings:
    """Load the settings from the environment and the optional .env file."""
    return Settings()
