"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce HTTP ni la CLI: solo registros, estados y errores.
"""

from pokeview.core.domain.errors import (
    FetchTimeoutError,
    RecordDecodeError,
    RecordFetchError,
    RemoteStatusError,
    TransportFailureError,
)
from pokeview.core.domain.models import FetchState, PokemonRecord

__all__ = [
    "FetchState",
    "FetchTimeoutError",
    "PokemonRecord",
    "RecordDecodeError",
    "RecordFetchError",
    "RemoteStatusError",
    "TransportFailureError",
]
