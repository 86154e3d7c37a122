from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_TIMEOUT = 30.0
DEFAULT_POST_TEMP_PATH = "/temp"
DEFAULT_ERRORS_PATH = "/errors"
DEFAULT_DELETE_ERRORS_PATH = "/errors"

_BASE_URL_ENV = "API_BASE_URL"
_TIMEOUT_ENV = "CLI_TIMEOUT"
_POST_TEMP_PATH_ENV = "POST_TEMP_URL"
_ERRORS_PATH_ENV = "GET_ERRORS_URL"
_DELETE_ERRORS_PATH_ENV = "DELETE_ERRORS_URL"


@dataclass(frozen=True)
class CLIConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    post_temp_path: str = DEFAULT_POST_TEMP_PATH
    errors_path: str = DEFAULT_ERRORS_PATH
    delete_errors_path: str = DEFAULT_DELETE_ERRORS_PATH


def _read_float(value: Optional[str], default: float) -> float:
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = float(candidate)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _read_path(value: Optional[str], default: str) -> str:
    candidate = (value or "").strip()
    return candidate if candidate.startswith("/") else default


def load_config(
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
) -> CLIConfig:
    url = base_url or os.getenv(_BASE_URL_ENV) or DEFAULT_BASE_URL
    if timeout is None:
        timeout = _read_float(os.getenv(_TIMEOUT_ENV), DEFAULT_TIMEOUT)
    return CLIConfig(
        base_url=url.rstrip("/"),
        timeout=timeout,
        post_temp_path=_read_path(os.getenv(_POST_TEMP_PATH_ENV), DEFAULT_POST_TEMP_PATH),
        errors_path=_read_path(os.getenv(_ERRORS_PATH_ENV), DEFAULT_ERRORS_PATH),
        delete_errors_path=_read_path(
            os.getenv(_DELETE_ERRORS_PATH_ENV), DEFAULT_DELETE_ERRORS_PATH
        ),
    )
