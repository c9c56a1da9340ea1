"""Estado de sesión: id actual, carga en curso, último resultado y favoritos.

Este módulo concentra toda la lógica de navegación para que la UI solo
despache intenciones (siguiente, anterior, saltar, favorito, reintentar) y
observe el estado. Cada carga es una actualización síncrona seguida de una
única tarea asyncio; la sesión no usa locks porque todo ocurre en el mismo
event loop.

Peticiones solapadas:
- Una carga nueva no cancela la anterior.
- Cada tarea lleva el número de generación con el que se lanzó; solo la de la
  generación vigente aplica su resultado y baja `is_loading`. Las demás se
  descartan (gana la última *despachada*, no la última en terminar).
"""

from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import dataclass
from typing import Callable

from pokeview.core.config import AppSettings
from pokeview.core.domain.errors import RecordFetchError
from pokeview.core.domain.models import FetchState, PokemonRecord
from pokeview.core.interfaces.fetcher import RecordFetcher

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"([+-]?)(?:0[xX]([0-9a-fA-F]+)|(\d+))")


@dataclass
class SessionHooks:
    """Callbacks opcionales para la capa de UI."""

    changed: Callable[["SessionState"], None] | None = None


class SessionState:
    """Contenedor explícito del estado de una sesión de navegación.

    No es un singleton: la UI crea uno al arrancar y lo pasa a quien lo necesite.
    """

    def __init__(
        self,
        fetcher: RecordFetcher,
        *,
        settings: AppSettings | None = None,
        hooks: SessionHooks | None = None,
    ) -> None:
        settings = settings or AppSettings()
        self._fetcher = fetcher
        self._hooks = hooks or SessionHooks()

        self.min_id = settings.min_id
        self.max_id = settings.max_id

        self.current_id: int = self.min_id
        self.is_loading: bool = False
        self.favorites: set[int] = set()

        self.state: FetchState = FetchState.IDLE
        self.record: PokemonRecord | None = None
        self.error: RecordFetchError | None = None

        self.pending: asyncio.Task[PokemonRecord | None] | None = None
        self.generation: int = 0

    # ------------------------------------------------------------------
    # Navegación
    # ------------------------------------------------------------------

    def clamp(self, record_id: int) -> int:
        return max(self.min_id, min(self.max_id, record_id))

    @property
    def can_navigate(self) -> bool:
        """La UI deshabilita anterior/siguiente/saltar mientras hay una carga."""

        return not self.is_loading

    def initialize(self) -> asyncio.Task[PokemonRecord | None]:
        """Posiciona la sesión en `min_id` y lanza la primera carga."""

        self.current_id = self.min_id
        return self.load_id(self.min_id)

    def load_id(self, record_id: int) -> asyncio.Task[PokemonRecord | None]:
        """Acota `record_id` al rango y lanza su carga.

        Debe llamarse desde un event loop en marcha. Devuelve la tarea lanzada;
        la UI no necesita esperarla porque el resultado queda en la sesión.
        """

        self.current_id = self.clamp(record_id)
        self.generation += 1
        self.is_loading = True
        self.state = FetchState.PENDING

        logger.debug("Dispatching fetch for id=%s (generation %s)", self.current_id, self.generation)
        task = asyncio.get_running_loop().create_task(
            self._run_fetch(self.current_id, self.generation),
            name=f"pokeview-fetch-{self.current_id}",
        )
        self.pending = task
        self._notify()
        return task

    def next(self) -> asyncio.Task[PokemonRecord | None]:
        target = self.current_id + 1
        return self.load_id(self.min_id if target > self.max_id else target)

    def previous(self) -> asyncio.Task[PokemonRecord | None]:
        target = self.current_id - 1
        return self.load_id(self.max_id if target < self.min_id else target)

    def retry(self) -> asyncio.Task[PokemonRecord | None]:
        return self.load_id(self.current_id)

    def jump(self, text: str) -> asyncio.Task[PokemonRecord | None] | None:
        """Salta al id escrito por el usuario.

        Acepta decimal (`25`, `+25`, `007`) y hexadecimal con prefijo `0x` (`0x19`).
        Texto no numérico se ignora en silencio: no cambia el estado ni muestra error.
        """

        match = _INTEGER_RE.fullmatch((text or "").strip())
        if match is None:
            logger.debug("Ignoring non-numeric jump input %r", text)
            return None
        sign, hex_digits, decimal_digits = match.groups()
        value = int(hex_digits, 16) if hex_digits else int(decimal_digits)
        return self.load_id(-value if sign == "-" else value)

    async def settle(self) -> None:
        """Espera a que termine la carga más reciente (incluida una lanzada mientras tanto)."""

        while self.pending is not None and not self.pending.done():
            await asyncio.wait({self.pending})

    # ------------------------------------------------------------------
    # Favoritos
    # ------------------------------------------------------------------

    def toggle_favorite(self, record_id: int) -> bool:
        """Alterna la pertenencia de `record_id`. Devuelve si quedó como favorito."""

        if record_id in self.favorites:
            self.favorites.remove(record_id)
            added = False
        else:
            self.favorites.add(record_id)
            added = True
        self._notify()
        return added

    def is_favorite(self, record_id: int) -> bool:
        return record_id in self.favorites

    def list_favorites(self) -> frozenset[int]:
        return frozenset(self.favorites)

    # ------------------------------------------------------------------
    # Internos
    # ------------------------------------------------------------------

    async def _run_fetch(self, record_id: int, generation: int) -> PokemonRecord | None:
        try:
            record = await self._fetcher.fetch(record_id)
        except RecordFetchError as exc:
            logger.warning("Fetch for id=%s failed: %s", record_id, exc)
            self._apply(generation, record=None, error=exc)
            return None
        except BaseException:
            # Error no clasificado o cancelación: la UI no debe quedar bloqueada.
            if generation == self.generation:
                self.is_loading = False
                self.state = FetchState.FAILURE
                self._notify()
            raise

        self._apply(generation, record=record, error=None)
        return record

    def _apply(
        self,
        generation: int,
        *,
        record: PokemonRecord | None,
        error: RecordFetchError | None,
    ) -> None:
        if generation != self.generation:
            logger.info(
                "Dropping stale result for generation %s (current is %s)",
                generation,
                self.generation,
            )
            return

        self.record = record
        self.error = error
        self.state = FetchState.FAILURE if error is not None else FetchState.SUCCESS
        self.is_loading = False
        self._notify()

    def _notify(self) -> None:
        if self._hooks.changed is not None:
            self._hooks.changed(self)
