"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
import json

import typer
from rich.console import Console
from rich.table import Table

from pokeview.adapters.http_client import build_async_client
from pokeview.core.config import AppSettings

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
    except Exception as exc:
        return False, str(exc) or type(exc).__name__
    return response.status_code == 200, f"HTTP {response.status_code}"


@app.command()
def run() -> None:
    """Run baseline diagnostics against the configured API."""

    settings = AppSettings()

    table = Table(title="pokeview Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("API base_url", "OK", settings.api_base_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Id range", "OK", f"{settings.min_id}..{settings.max_id}")

    # Connectivity (best-effort)
    check_url = settings.record_url(settings.min_id)
    ok_http, detail_http = asyncio.run(_check_http(check_url, settings))
    table.add_row("API connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] Check network access or set POKEVIEW_API_BASE_URL to a reachable mirror."
        )
        raise typer.Exit(code=1)


@app.command(name="config")
def show_config() -> None:
    """Print the effective settings (env vars and .env applied) as JSON."""

    settings = AppSettings()
    typer.echo(json.dumps(settings.model_dump(mode="json"), indent=2, sort_keys=True))
