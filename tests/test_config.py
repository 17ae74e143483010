import pytest
from pydantic import ValidationError

from todoist_mcp.config import DEFAULT_TODOIST_BASE_URL, Settings


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODOIST_API_TOKEN", "env-token")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)  # pyright: ignore[reportCallIssue]

    assert settings.todoist_api_token.get_secret_value() == "env-token"
    assert settings.log_level == "debug"
    assert settings.request_timeout == 30.0
    assert settings.base_url == DEFAULT_TODOIST_BASE_URL


def test_settings_require_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TODOIST_API_TOKEN", raising=False)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)  # pyright: ignore[reportCallIssue]


def test_settings_reject_tiny_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODOIST_API_TOKEN", "env-token")
    monkeypatch.setenv("TODOIST_TIMEOUT", "0.5")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)  # pyright: ignore[reportCallIssue]
