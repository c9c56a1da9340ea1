"""Sesión interactiva de navegación (`pokeview browse`).

Traduce cada línea escrita por el usuario a una intención sobre
`SessionState` y re-renderiza cuando la carga termina.
"""

from __future__ import annotations

import asyncio
import threading

from rich.console import Console

from pokeview.cli.ui_components import (
    build_error_panel,
    build_favorites_table,
    build_help_table,
    build_record_panel,
)
from pokeview.core.services.session import SessionState

PROMPT = "[bold magenta]pokeview>[/bold magenta] "

_NEXT = {"n", "next"}
_PREVIOUS = {"p", "prev", "previous"}
_JUMP = {"g", "go", "jump"}
_TOGGLE_FAVORITE = {"f", "fav"}
_FAVORITES = {"favs", "favorites"}
_RETRY = {"r", "retry"}
_HELP = {"h", "help", "?"}
_QUIT = {"q", "quit", "exit"}


def render_session(session: SessionState, console: Console) -> None:
    """Muestra el último resultado observado (registro o error)."""

    if session.error is not None:
        console.print(build_error_panel(session.error))
    elif session.record is not None:
        console.print(
            build_record_panel(session.record, is_favorite=session.is_favorite(session.record.id))
        )


async def settle_and_render(session: SessionState, console: Console) -> None:
    with console.status(f"Loading #{session.current_id}..."):
        await session.settle()
    render_session(session, console)


async def dispatch(session: SessionState, console: Console, line: str) -> bool:
    """Ejecuta un comando. Devuelve False cuando el usuario pide salir."""

    command, _, arg = line.strip().partition(" ")
    command = command.lower()
    arg = arg.strip()

    if not command:
        return True
    if command in _QUIT:
        return False
    if command in _HELP:
        console.print(build_help_table())
        return True

    if command in _FAVORITES:
        favorites = sorted(session.list_favorites())
        if not arg:
            console.print(build_favorites_table(favorites))
            return True
        if not arg.isdigit() or not 1 <= int(arg) <= len(favorites):
            console.print(f"[yellow]No favorite at position {arg}.[/yellow]")
            return True
        session.load_id(favorites[int(arg) - 1])
        await settle_and_render(session, console)
        return True

    if command in _TOGGLE_FAVORITE:
        if session.record is None:
            console.print("[yellow]Nothing to favorite yet.[/yellow]")
            return True
        session.toggle_favorite(session.record.id)
        render_session(session, console)
        return True

    if not session.can_navigate:
        console.print("[yellow]Still loading, try again in a moment.[/yellow]")
        return True

    if command in _NEXT:
        session.next()
    elif command in _PREVIOUS:
        session.previous()
    elif command in _JUMP:
        if session.jump(arg) is None:
            return True
    elif command in _RETRY:
        session.retry()
    else:
        console.print(f"[yellow]Unknown command {command!r}. Type h for help.[/yellow]")
        return True

    await settle_and_render(session, console)
    return True


async def read_line(console: Console, prompt: str = PROMPT) -> str:
    """Lee una línea de la terminal sin bloquear el event loop.

    Por qué un hilo daemon y no `asyncio.to_thread`:
    - Con Ctrl-C, `asyncio.run` cancela la tarea y luego espera al executor por
      defecto, que sigue bloqueado en `input()` hasta que llegue un Enter.
    - Un hilo daemon no se espera al salir; su resultado tardío se descarta.
    """

    loop = asyncio.get_running_loop()
    future: asyncio.Future[str] = loop.create_future()

    def _resolve(line: str | None, error: BaseException | None) -> None:
        if future.done():
            return
        if error is not None:
            future.set_exception(error)
        else:
            future.set_result(line or "")

    def _worker() -> None:
        try:
            line = console.input(prompt)
        except BaseException as exc:
            outcome: tuple[str | None, BaseException | None] = (None, exc)
        else:
            outcome = (line, None)
        if not loop.is_closed():
            loop.call_soon_threadsafe(_resolve, *outcome)

    threading.Thread(target=_worker, name="pokeview-input", daemon=True).start()
    return await future


async def run_browser(session: SessionState, console: Console, *, start_id: int | None = None) -> None:
    """Bucle principal: carga inicial y lectura de comandos hasta `q` o EOF."""

    if start_id is None:
        session.initialize()
    else:
        session.load_id(start_id)
    await settle_and_render(session, console)

    while True:
        try:
            line = await read_line(console)
        except (EOFError, KeyboardInterrupt, asyncio.CancelledError):
            # Ctrl-C: en 3.11+ asyncio.run cancela la tarea principal.
            console.print()
            break
        if not await dispatch(session, console, line):
            break
