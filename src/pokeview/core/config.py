"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP) y la sesión lean los mismos límites.
"""

from __future__ import annotations

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="POKEVIEW_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="https://pokeapi.co",
        min_length=8,
        description="Base URL de la API (sin `/api/v2`).",
    )
    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Plazo total por petición (segundos).",
    )
    user_agent: str = Field(
        default="pokeview/0.1",
        min_length=1,
        description="User-Agent para las peticiones.",
    )

    min_id: int = Field(
        default=1,
        ge=1,
        description="Identificador más bajo navegable.",
    )
    max_id: int = Field(
        default=1025,
        ge=1,
        description="Identificador más alto navegable.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel del logger raíz (DEBUG, INFO, WARNING, ...).",
    )

    @model_validator(mode="after")
    def _check_id_range(self) -> "AppSettings":
        if self.max_id < self.min_id:
            raise ValueError(f"max_id ({self.max_id}) must be >= min_id ({self.min_id})")
        return self

    def record_url(self, record_id: int) -> str:
        """URL del recurso `pokemon/{id}` para esta configuración."""

        return f"{self.api_base_url.rstrip('/')}/api/v2/pokemon/{record_id}"
