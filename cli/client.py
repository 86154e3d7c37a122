from __future__ import annotations

from typing import Any, Dict, List

import httpx
import typer

from cli.config import CLIConfig


class ApiClient:
    """Minimal HTTP client for the telemetry service."""

    def __init__(self, config: CLIConfig) -> None:
        self._config = config
        self._client = httpx.Client(base_url=config.base_url, timeout=config.timeout)

    def close(self) -> None:
        self._client.close()

    def submit_reading(self, data: str) -> Dict[str, Any]:
        response = self._client.post(self._config.post_temp_path, json={"data": data})
        if response.status_code == 400:
            typer.secho(
                f"Reading rejected: {self._error_detail(response)}",
                fg=typer.colors.RED,
                err=True,
            )
            raise typer.Exit(code=1)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._handle_http_error(exc)
        return response.json()

    def get_errors(self) -> List[str]:
        try:
            response = self._client.get(self._config.errors_path)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._handle_http_error(exc)
        errors = response.json().get("errors")
        if not isinstance(errors, list):
            raise typer.BadParameter("Unexpected response payload when listing errors.")
        return errors

    def clear_errors(self) -> int:
        try:
            response = self._client.delete(self._config.delete_errors_path)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._handle_http_error(exc)
        deleted = response.json().get("deleted")
        if not isinstance(deleted, int):
            raise typer.BadParameter("Unexpected response payload when clearing errors.")
        return deleted

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            return response.text.strip()
        if isinstance(data, dict):
            return str(data.get("error") or data.get("detail") or data)
        return str(data)

    @classmethod
    def _handle_http_error(cls, exc: httpx.HTTPStatusError) -> None:
        detail = cls._error_detail(exc.response)
        message = (
            f"Request failed with status {exc.response.status_code}: {detail or 'no detail provided.'}"
        )
        typer.secho(message, fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
