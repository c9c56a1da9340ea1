"""Adaptadores de I/O (HTTP, exportación).

Por qué un paquete:
- Agrupa todo lo que toca red o disco.
- El fetcher implementa `pokeview.core.interfaces.RecordFetcher`.
"""

from pokeview.adapters.pokeapi import PokeApiFetcher

__all__ = ["PokeApiFetcher"]
