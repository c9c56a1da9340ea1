"""Exportación JSON de un registro.

Por qué JSON:
- Interoperabilidad con otras herramientas (jq, scripts).
- Mismo formato estable en stdout y en archivo.
"""

from __future__ import annotations

import json
from pathlib import Path

from pokeview.core.domain.models import PokemonRecord


def record_to_json(record: PokemonRecord) -> str:
    """Serializa `PokemonRecord` a JSON con formato estable."""

    payload = record.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_record_json(*, record: PokemonRecord, output_path: Path) -> Path:
    """Escribe `record` como JSON UTF-8 en `output_path`."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(record_to_json(record), encoding="utf-8")
    return output_path
