"""Contrato del fetcher de registros.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- La sesión depende de esta abstracción; en tests se sustituye por un fake.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pokeview.core.domain.models import PokemonRecord


@runtime_checkable
class RecordFetcher(Protocol):
    """Contrato mínimo para obtener un registro.

    Reglas de diseño:
    - `fetch` es asíncrono porque hace I/O (HTTP).
    - No valida el rango del id; eso lo hace quien llama.
    - Falla siempre con una subclase de `RecordFetchError`.
    """

    async def fetch(self, record_id: int) -> PokemonRecord:
        """Obtiene y normaliza el registro `record_id`."""

        ...
