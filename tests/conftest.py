import asyncio
import os

import pytest

from pokeview.core.config import AppSettings
from pokeview.core.domain.models import PokemonRecord


def make_payload(record_id=1, name="bulbasaur", sprite="http://x/1.png"):
    return {
        "id": record_id,
        "name": name,
        "height": 7,
        "weight": 69,
        "sprites": {"front_default": sprite},
    }


class FakeFetcher:
    """In-memory fetcher: records calls, optional per-id delays and failures."""

    def __init__(self, delays=None, failures=None):
        self.calls = []
        self.delays = delays or {}
        self.failures = failures or {}

    async def fetch(self, record_id):
        self.calls.append(record_id)
        delay = self.delays.get(record_id)
        if delay:
            await asyncio.sleep(delay)
        if record_id in self.failures:
            raise self.failures[record_id]
        return PokemonRecord.from_api_payload(make_payload(record_id, name=f"mon-{record_id}"))


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep POKEVIEW_* env vars and a stray .env out of the tests."""
    for key in list(os.environ):
        if key.upper().startswith("POKEVIEW_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings():
    return AppSettings()


@pytest.fixture
def payload():
    return make_payload


@pytest.fixture
def fake_fetcher_cls():
    return FakeFetcher


@pytest.fixture
def fetcher():
    return FakeFetcher()
