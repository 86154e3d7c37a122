from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import typer

from cli.client import ApiClient
from cli.config import CLIConfig, load_config
from cli.render import render_decision, render_errors


@dataclass
class CLIState:
    config: CLIConfig
    client: ApiClient


app = typer.Typer(
    help="Utilities for interacting with the telemetry monitor service.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=1)
    return state


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-b",
        help="Telemetry API base URL (defaults to API_BASE_URL env or http://localhost:8000).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Seconds to wait for each HTTP request.",
    ),
) -> None:
    """Entry point for the CLI."""
    config = load_config(base_url=base_url, timeout=timeout)
    client = ApiClient(config)
    ctx.obj = CLIState(config=config, client=client)
    ctx.call_on_close(client.close)


@app.command("submit")
def submit_command(
    ctx: typer.Context,
    data: str = typer.Argument(
        ..., help="Raw reading, e.g. 365951380:1640995229697:'Temperature':58.4"
    ),
) -> None:
    """Submit one raw telemetry reading for classification."""
    state = _get_state(ctx)
    payload = state.client.submit_reading(data)
    render_decision(payload)


@app.command("errors")
def errors_command(ctx: typer.Context) -> None:
    """List raw submissions the service rejected."""
    state = _get_state(ctx)
    render_errors(state.client.get_errors())


@app.command("clear")
def clear_command(ctx: typer.Context) -> None:
    """Purge the service's rejected submission log."""
    state = _get_state(ctx)
    deleted = state.client.clear_errors()
    typer.secho(f"Success: Deleted {deleted} errors", fg=typer.colors.GREEN)
