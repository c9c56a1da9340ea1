"""Fetcher de PokeAPI (`GET /api/v2/pokemon/{id}`).

Implementación:
- Una sola petición por llamada; sin reintentos ni caché.
- Plazo total `http_timeout_seconds` sobre toda la petición (`asyncio.wait_for`),
  además del timeout por operación de httpx.
- 200 => `PokemonRecord`; cualquier otro status => `RemoteStatusError`.
- Cualquier `httpx.RequestError` se traduce a un `RecordFetchError` clasificado.
"""

from __future__ import annotations

import asyncio
import logging

import httpx

from pokeview.adapters.http_client import build_async_client
from pokeview.core.config import AppSettings
from pokeview.core.domain.errors import (
    FetchTimeoutError,
    RecordDecodeError,
    RemoteStatusError,
    TransportFailureError,
)
from pokeview.core.domain.models import PokemonRecord
from pokeview.core.interfaces.fetcher import RecordFetcher

logger = logging.getLogger(__name__)


class PokeApiFetcher(RecordFetcher):
    """Obtiene un Pokémon por id desde PokeAPI."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    async def fetch(self, record_id: int) -> PokemonRecord:
        timeout = self._settings.http_timeout_seconds
        try:
            response = await asyncio.wait_for(self._get(record_id), timeout=timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            raise FetchTimeoutError(timeout_seconds=timeout, record_id=record_id) from exc
        except httpx.DecodingError as exc:
            raise RecordDecodeError(
                f"Response body for pokemon id {record_id} could not be decoded ({exc})",
                record_id=record_id,
            ) from exc
        except httpx.RequestError as exc:
            # TransportError, TooManyRedirects y cualquier otro fallo de la petición.
            raise TransportFailureError(
                f"Network error loading pokemon with id: {record_id} ({exc})",
                record_id=record_id,
            ) from exc

        logger.debug("GET %s -> HTTP %s", response.request.url, response.status_code)
        if response.status_code != 200:
            raise RemoteStatusError(status_code=response.status_code, record_id=record_id)

        try:
            payload = response.json()
        except ValueError as exc:
            raise RecordDecodeError(
                f"Response for pokemon id {record_id} is not valid JSON",
                record_id=record_id,
            ) from exc

        return PokemonRecord.from_api_payload(payload, record_id=record_id)

    async def _get(self, record_id: int) -> httpx.Response:
        url = self._settings.record_url(record_id)
        if self._client is not None:
            return await self._client.get(url)

        async with build_async_client(self._settings) as client:
            return await client.get(url)
