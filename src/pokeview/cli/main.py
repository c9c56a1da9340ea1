"""CLI de pokeview (Typer + Rich).

La CLI solo arma dependencias (settings, fetcher, sesión) y delega: la
navegación vive en `core.services.session` y el render en `cli.ui_components`.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from pokeview.adapters.json_exporter import export_record_json, record_to_json
from pokeview.adapters.pokeapi import PokeApiFetcher
from pokeview.cli import doctor
from pokeview.cli.browse import run_browser
from pokeview.cli.ui_components import build_error_panel, build_record_panel, print_banner
from pokeview.core.config import AppSettings
from pokeview.core.services.session import SessionState

app = typer.Typer(
    no_args_is_help=True,
    help="pokeview: browse PokeAPI records from the terminal.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def configure_logging(level: str) -> None:
    """Configura el logger raíz una sola vez, hacia stderr."""

    root = logging.getLogger()
    if any(isinstance(handler, RichHandler) for handler in root.handlers):
        root.setLevel(level.upper())
        return
    logging.basicConfig(
        level=level.upper(),
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False)],
    )


def build_session(settings: AppSettings) -> SessionState:
    return SessionState(PokeApiFetcher(settings), settings=settings)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)


@app.command()
def browse(
    start: int | None = typer.Option(None, "--start", "-s", help="Id to open first (clamped to the valid range)."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Skip the welcome banner."),
) -> None:
    """Interactive session: next/prev, jump, favorites, retry."""

    settings = AppSettings()
    session = build_session(settings)
    if not no_banner:
        print_banner(_console)
    _console.print("[dim]Type h for help, q to quit.[/dim]")
    asyncio.run(run_browser(session, _console, start_id=start))


@app.command()
def show(
    record_id: int = typer.Argument(..., help="Pokémon id (clamped to the valid range)."),
    as_json: bool = typer.Option(False, "--json", help="Print the record as JSON."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the record as JSON to this file."),
) -> None:
    """Fetch a single record and print it."""

    settings = AppSettings()
    session = build_session(settings)

    async def _load() -> None:
        session.load_id(record_id)
        await session.settle()

    asyncio.run(_load())

    if session.error is not None or session.record is None:
        if session.error is not None:
            _err_console.print(build_error_panel(session.error))
        raise typer.Exit(code=1)

    if output is not None:
        path = export_record_json(record=session.record, output_path=output)
        _console.print(f"[green]Saved record to:[/green] {path}")
    elif as_json:
        typer.echo(record_to_json(session.record), nl=False)
    else:
        _console.print(build_record_panel(session.record))


def run() -> None:
    app()
