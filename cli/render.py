from __future__ import annotations

from typing import Any, Dict, Iterable, Sequence

import typer


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def render_decision(payload: Dict[str, Any]) -> None:
    echo_heading("Classification")
    if payload.get("overtemp"):
        typer.secho("OVER TEMPERATURE", fg=typer.colors.RED)
        echo_key_values(
            [
                ("device_id", payload.get("device_id")),
                ("formatted_time", payload.get("formatted_time")),
            ]
        )
    else:
        typer.secho("normal", fg=typer.colors.GREEN)


def render_errors(errors: Sequence[str]) -> None:
    echo_heading(f"Rejected submissions ({len(errors)})")
    if not errors:
        typer.echo("No errors recorded.")
        return
    for raw in errors:
        typer.echo(f"  - {raw}")
