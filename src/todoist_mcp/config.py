"""Server configuration using environment variables."""

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, AnyHttpUrl, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve the project root once so that `.env` is discovered regardless of CWD
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

DEFAULT_TODOIST_BASE_URL = "https://api.todoist.com/rest/v2"
TODOIST_TOKEN_URL = "https://todoist.com/app/settings/integrations/developer"


class Settings(BaseSettings):
    """Load configuration from environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    todoist_api_token: SecretStr = Field(
        ...,
        validation_alias=AliasChoices("TODOIST_API_TOKEN", "todoist_api_token"),
    )
    todoist_base_url: AnyHttpUrl = Field(
        default_factory=lambda: AnyHttpUrl(DEFAULT_TODOIST_BASE_URL),
        validation_alias=AliasChoices("TODOIST_BASE_URL", "todoist_base_url"),
    )
    request_timeout: float = Field(
        default=30.0,
        validation_alias=AliasChoices("TODOIST_TIMEOUT", "request_timeout"),
        ge=1,
    )
    log_level: str = Field(
        default="error",
        validation_alias=AliasChoices("LOG_LEVEL", "log_level"),
    )

    @property
    def base_url(self) -> str:
        """Return the Todoist API base URL without a trailing slash."""

        return str(self.todoist_base_url).rstrip("/")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached `Settings` instance."""

    return Settings()  # pyright: ignore[reportCallIssue]


__all__ = ["DEFAULT_TODOIST_BASE_URL", "Settings", "TODOIST_TOKEN_URL", "get_settings"]
