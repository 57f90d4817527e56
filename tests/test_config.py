from __future__ import annotations

from opengym.config import OpenGymSettings, get_settings


def test_nested_settings_from_environment(monkeypatch):
    monkeypatch.setenv("OPENGYM_API__BASE_URL", "https://places.example.org/")
    monkeypatch.setenv("OPENGYM_API__REQUEST_TIMEOUT_SECONDS", "3")
    monkeypatch.setenv("OPENGYM_HISTORY__HINT_LIMIT", "5")

    settings = OpenGymSettings()

    assert str(settings.api.base_url) == "https://places.example.org/"
    assert settings.api.request_timeout_seconds == 3
    assert settings.history.hint_limit == 5


def test_blank_hint_limit_means_unbounded(monkeypatch):
    monkeypatch.setenv("OPENGYM_HISTORY__HINT_LIMIT", "")

    assert OpenGymSettings().history.hint_limit is None


def test_get_settings_is_cached():
    get_settings.cache_clear()
    assert get_settings() is get_settings()
