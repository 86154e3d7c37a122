from __future__ import annotations

from settings import get_settings


def test_defaults(monkeypatch) -> None:
    for name in ("TELEMETRY_APP_NAME", "POST_TEMP_URL", "GET_ERRORS_URL", "DELETE_ERRORS_URL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()

    try:
        settings = get_settings()
        assert settings.app_name == "Telemetry Monitor"
        assert settings.post_temp_url == "/temp"
        assert settings.get_errors_url == "/errors"
        assert settings.delete_errors_url == "/errors"
        assert settings.log_level == "INFO"
    finally:
        get_settings.cache_clear()


def test_environment_overrides_apply(monkeypatch) -> None:
    monkeypatch.setenv("TELEMETRY_APP_NAME", "plant-7")
    monkeypatch.setenv("POST_TEMP_URL", "/v1/temp")
    monkeypatch.setenv("GET_ERRORS_URL", " /v1/errors ")
    monkeypatch.setenv("DELETE_ERRORS_URL", "no-leading-slash")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    get_settings.cache_clear()

    try:
        settings = get_settings()
        assert settings.app_name == "plant-7"
        assert settings.post_temp_url == "/v1/temp"
        assert settings.get_errors_url == "/v1/errors"
        assert settings.delete_errors_url == "/errors"
        assert settings.log_level == "DEBUG"
    finally:
        get_settings.cache_clear()
