"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar paneles entre `show` y `browse`.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pokeview.core.domain.errors import RecordFetchError, RemoteStatusError
from pokeview.core.domain.models import PokemonRecord


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("pokeview", style="bold magenta")
    subtitle = Text("PokeAPI • Navegación • Favoritos", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="magenta", padding=(1, 4)))


def build_record_panel(record: PokemonRecord, *, is_favorite: bool = False) -> Panel:
    """Tarjeta de un registro: nombre, id, medidas y sprite."""

    star = Text("★", style="bold yellow") if is_favorite else Text("☆", style="dim")
    title = Text.assemble(star, " ", Text(record.name, style="bold"))

    table = Table.grid(padding=(0, 2))
    table.add_column(style="cyan", no_wrap=True)
    table.add_column(style="white")
    table.add_row("id", str(record.id))
    table.add_row("height", str(record.height))
    table.add_row("weight", str(record.weight))
    table.add_row("sprite", record.sprite or Text("(none)", style="dim"))

    return Panel(table, title=title, border_style="magenta", expand=False)


def build_error_panel(error: RecordFetchError) -> Panel:
    """Panel de error con el mensaje tal cual y la pista de reintento."""

    body = Text()
    body.append(f"Error: {error}\n\n")
    if isinstance(error, RemoteStatusError) and error.is_not_found:
        body.append("No Pokémon with that id. Use g <id> to jump elsewhere, or ", style="dim")
        body.append("r", style="bold")
        body.append(" to retry.", style="dim")
        return Panel(body, title=Text("Not found", style="bold red"), border_style="red", expand=False)

    body.append("Type ", style="dim")
    body.append("r", style="bold")
    body.append(" to retry.", style="dim")
    return Panel(body, title=Text("Fetch failed", style="bold red"), border_style="red", expand=False)


def build_favorites_table(favorites: Iterable[int]) -> Table:
    """Tabla numerada de favoritos (orden ascendente para poder elegir por posición)."""

    table = Table(title="Favorites")
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Pokémon", style="yellow")
    for index, record_id in enumerate(sorted(favorites), start=1):
        table.add_row(str(index), f"★ Pokémon ID {record_id}")
    if table.row_count == 0:
        table.add_row("-", "No favorites yet.")
    return table


def build_help_table() -> Table:
    """Comandos disponibles en `browse`."""

    table = Table(title="Commands", show_header=False)
    table.add_column("Command", style="bright_green", no_wrap=True)
    table.add_column("Action", style="white")
    table.add_row("n, next", "Next id (wraps to the first)")
    table.add_row("p, prev", "Previous id (wraps to the last)")
    table.add_row("g <id>, go <id>", "Jump to an id (clamped to the valid range)")
    table.add_row("f, fav", "Toggle favorite on the shown record")
    table.add_row("favs [n]", "List favorites, or jump to the n-th one")
    table.add_row("r, retry", "Reload the current id")
    table.add_row("h, help", "Show this help")
    table.add_row("q, quit", "Exit")
    return table
