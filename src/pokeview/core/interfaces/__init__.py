"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: la sesión depende de abstracciones.
"""

from pokeview.core.interfaces.fetcher import RecordFetcher

__all__ = ["RecordFetcher"]
