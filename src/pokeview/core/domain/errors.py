"""Taxonomía de errores al obtener un registro.

Todos heredan de `RecordFetchError` para que la capa de sesión pueda
capturarlos juntos y la UI muestre `str(error)` sin distinguir casos.
"""

from __future__ import annotations


class RecordFetchError(Exception):
    """Fallo clasificado al obtener un registro remoto."""

    def __init__(self, message: str, *, record_id: int | None = None) -> None:
        super().__init__(message)
        self.record_id = record_id


class RemoteStatusError(RecordFetchError):
    """La API respondió con un status distinto de 200."""

    def __init__(self, *, status_code: int, record_id: int) -> None:
        super().__init__(
            f"Failed to load pokemon (HTTP {status_code}) with id: {record_id}",
            record_id=record_id,
        )
        self.status_code = status_code

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


class FetchTimeoutError(RecordFetchError):
    """La respuesta no llegó dentro del plazo configurado."""

    def __init__(self, *, timeout_seconds: float, record_id: int) -> None:
        super().__init__(
            f"Timed out after {timeout_seconds:g}s loading pokemon with id: {record_id}",
            record_id=record_id,
        )
        self.timeout_seconds = timeout_seconds


class RecordDecodeError(RecordFetchError):
    """El cuerpo no es JSON o no tiene la forma esperada."""


class TransportFailureError(RecordFetchError):
    """Fallo de red antes de obtener respuesta (DNS, conexión, TLS)."""
