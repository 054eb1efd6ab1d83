"""
Settings read from SIZING_* environment variables.
"""

import pytest
from pydantic import ValidationError

from sizing.config import Settings, get_settings
from sizing.service import health_document


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch):
    for name in ("SIZING_API_VERSION", "SIZING_ENVIRONMENT", "SIZING_CORS_ORIGINS", "SIZING_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.api_version == "1.0.0"
    assert settings.environment == "production"
    assert settings.cors_origins == ("*",)
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SIZING_API_VERSION", "2.3.1")
    monkeypatch.setenv("SIZING_ENVIRONMENT", "staging")
    monkeypatch.setenv("SIZING_CORS_ORIGINS", "https://a.example, https://b.example,")
    monkeypatch.setenv("SIZING_LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.api_version == "2.3.1"
    assert settings.environment == "staging"
    assert settings.cors_origins == ("https://a.example", "https://b.example")
    assert settings.log_level == "DEBUG"
    assert health_document()["version"] == "2.3.1"


def test_blank_origins_fall_back_to_wildcard(monkeypatch):
    monkeypatch.setenv("SIZING_CORS_ORIGINS", " , ")
    assert get_settings().cors_origins == ("*",)


def test_settings_are_cached_and_frozen():
    settings = get_settings()

    assert get_settings() is settings
    with pytest.raises(ValidationError):
        settings.api_version = "9.9.9"


def test_direct_construction():
    assert Settings(cors_origins="https://x.example").cors_origins == ("https://x.example",)
