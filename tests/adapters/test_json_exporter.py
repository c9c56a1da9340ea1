import json

from pokeview.adapters.json_exporter import export_record_json, record_to_json
from pokeview.core.domain.models import PokemonRecord


def test_record_to_json_is_stable(payload):
    record = PokemonRecord.from_api_payload(payload())
    text = record_to_json(record)
    assert text.endswith("\n")
    assert json.loads(text) == {
        "height": 7,
        "id": 1,
        "name": "bulbasaur",
        "sprite": "http://x/1.png",
        "weight": 69,
    }
    assert text.index('"height"') < text.index('"weight"')


def test_export_creates_parent_dirs(tmp_path, payload):
    record = PokemonRecord.from_api_payload(payload(sprite=None))
    out = export_record_json(record=record, output_path=tmp_path / "exports" / "1.json")
    assert out.exists()
    assert json.loads(out.read_text(encoding="utf-8"))["sprite"] is None
