"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

from portfolio_tracker.infrastructure import settings as settings_module
from portfolio_tracker.infrastructure.settings import TrackerSettings


def _isolate(monkeypatch) -> MagicMock:
    logger = MagicMock()
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    for name in (
        "TRACKER_USER_ID",
        "BRAPI_BASE_URL",
        "BRAPI_TOKEN",
        "QUOTE_REQUEST_DELAY",
        "QUOTE_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    return logger


def test_from_env_uses_defaults(monkeypatch) -> None:
    """Unset variables fall back to the defaults."""
    _isolate(monkeypatch)

    settings = TrackerSettings.from_env()

    assert settings.user_id == "local"
    assert settings.brapi_base_url == "https://brapi.dev/api"
    assert settings.brapi_token is None
    assert settings.quote_request_delay == 0.2
    assert settings.quote_timeout == 10.0


def test_from_env_reads_values(monkeypatch) -> None:
    """Configured values are trimmed and parsed."""
    _isolate(monkeypatch)
    monkeypatch.setenv("TRACKER_USER_ID", " alice ")
    monkeypatch.setenv("BRAPI_BASE_URL", "http://quotes.local/api/")
    monkeypatch.setenv("BRAPI_TOKEN", "secret")
    monkeypatch.setenv("QUOTE_REQUEST_DELAY", "0")
    monkeypatch.setenv("QUOTE_TIMEOUT", "2.5")

    settings = TrackerSettings.from_env()

    assert settings.user_id == "alice"
    assert settings.brapi_base_url == "http://quotes.local/api"
    assert settings.brapi_token == "secret"
    assert settings.quote_request_delay == 0.0
    assert settings.quote_timeout == 2.5


def test_from_env_warns_on_invalid_numbers(monkeypatch) -> None:
    """Invalid numbers are replaced by defaults with a warning."""
    logger = _isolate(monkeypatch)
    monkeypatch.setenv("QUOTE_REQUEST_DELAY", "soon")
    monkeypatch.setenv("QUOTE_TIMEOUT", "-1")

    settings = TrackerSettings.from_env()

    assert settings.quote_request_delay == 0.2
    assert settings.quote_timeout == 10.0
    assert logger.warning.call_count == 2
