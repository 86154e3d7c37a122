from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


_APP_NAME_ENV = "TELEMETRY_APP_NAME"
_POST_TEMP_URL_ENV = "POST_TEMP_URL"
_GET_ERRORS_URL_ENV = "GET_ERRORS_URL"
_DELETE_ERRORS_URL_ENV = "DELETE_ERRORS_URL"
_LOG_LEVEL_ENV = "LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    app_name: str
    post_temp_url: str
    get_errors_url: str
    delete_errors_url: str
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_route_env(name: str, default: str) -> str:
    candidate = _read_str_env(name, default)
    if not candidate.startswith("/"):
        return default
    return candidate


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        app_name=_read_str_env(_APP_NAME_ENV, "Telemetry Monitor"),
        post_temp_url=_read_route_env(_POST_TEMP_URL_ENV, "/temp"),
        get_errors_url=_read_route_env(_GET_ERRORS_URL_ENV, "/errors"),
        delete_errors_url=_read_route_env(_DELETE_ERRORS_URL_ENV, "/errors"),
        log_level=_read_log_level("INFO"),
    )
