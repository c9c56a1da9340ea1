"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta en el borde: el JSON remoto se convierte en un tipo
  cerrado o falla con un error clasificado.
- Serialización gratuita (`model_dump`) para exportar a JSON.

Nota:
- Estos modelos describen *qué* es un Pokémon para la app, no *cómo* se obtiene.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from pydantic.config import ConfigDict

from pokeview.core.domain.errors import RecordDecodeError


class FetchState(str, Enum):
    """Ciclo de vida de una única petición: IDLE -> PENDING -> SUCCESS | FAILURE."""

    IDLE = "idle"
    PENDING = "pending"
    SUCCESS = "success"
    FAILURE = "failure"


class PokemonRecord(BaseModel):
    """Registro obtenido de la API para un identificador.

    Es inmutable: cada petición exitosa crea uno nuevo y reemplaza al anterior.
    """

    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")

    id: int = Field(
        ...,
        description="Identificador externo estable (1..1025 por convención).",
    )
    name: str = Field(
        ...,
        min_length=1,
        description="Nombre del Pokémon (p.ej. 'bulbasaur').",
    )
    height: int = Field(
        ...,
        description="Altura en decímetros, tal cual la devuelve la API.",
    )
    weight: int = Field(
        ...,
        description="Peso en hectogramos, tal cual lo devuelve la API.",
    )
    sprite: str | None = Field(
        default=None,
        description="URL del sprite frontal por defecto, si existe.",
    )

    @classmethod
    def from_api_payload(cls, payload: Any, *, record_id: int | None = None) -> "PokemonRecord":
        """Construye el registro desde el JSON de `/api/v2/pokemon/{id}`.

        El sprite se lee de `sprites.front_default` tolerando que falte
        cualquier nivel intermedio; en ese caso queda en `None`.
        """

        if not isinstance(payload, dict):
            raise RecordDecodeError(
                f"Expected a JSON object, got {type(payload).__name__}",
                record_id=record_id,
            )

        sprites = payload.get("sprites")
        sprite = sprites.get("front_default") if isinstance(sprites, dict) else None

        data = {key: payload[key] for key in ("id", "name", "height", "weight") if key in payload}
        data["sprite"] = sprite
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
            raise RecordDecodeError(
                f"Malformed pokemon payload (invalid fields: {fields})",
                record_id=record_id,
            ) from exc
