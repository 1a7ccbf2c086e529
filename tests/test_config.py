"""Тесты конфигурации утилиты."""

import pytest

from jid.config import get_settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("JID_LOG_LEVEL", "JID_OUTPUT_FORMAT", "JID_PROJECTIONS", "JID_FAIL_FAST"):
        monkeypatch.delenv(key, raising=False)

    settings = get_settings()

    assert settings.log_level == "INFO"
    assert settings.output_format == "text"
    assert settings.projections == ("bare", "domain")
    assert settings.fail_fast is False


def test_settings_loaded_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Проверяет, что настройки корректно читаются из окружения."""
    monkeypatch.setenv("JID_LOG_LEVEL", "debug")
    monkeypatch.setenv("JID_OUTPUT_FORMAT", "JSON")
    monkeypatch.setenv("JID_PROJECTIONS", "local; bare\ndomain")
    monkeypatch.setenv("JID_FAIL_FAST", "yes")

    settings = get_settings()

    assert settings.log_level == "DEBUG"
    assert settings.output_format == "json"
    assert settings.projections == ("local", "bare", "domain")
    assert settings.fail_fast is True


def test_settings_are_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    monkeypatch.setenv("JID_OUTPUT_FORMAT", "json")

    assert get_settings() is first


def test_empty_projection_list_is_allowed(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JID_PROJECTIONS", "")

    assert get_settings().projections == ()


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("JID_OUTPUT_FORMAT", "xml"),
        ("JID_PROJECTIONS", "bare,full"),
    ],
)
def test_invalid_settings_rejected(monkeypatch: pytest.MonkeyPatch, key: str, value: str) -> None:
    monkeypatch.setenv(key, value)

    with pytest.raises(ValueError):
        get_settings()


def test_settings_lists_and_flags_tolerate_noise(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JID_PROJECTIONS", " ,bare,, ;\n domain ;")
    monkeypatch.setenv("JID_FAIL_FAST", "  off ")

    settings = get_settings()

    assert settings.projections == ("bare", "domain")
    assert settings.fail_fast is False
