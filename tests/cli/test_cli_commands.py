"""Tests for CLI commands: show, browse, doctor."""

import json
import runpy
import sys
from unittest.mock import AsyncMock, patch

import pytest
from typer.testing import CliRunner

from pokeview.cli.main import app
from pokeview.core.domain.errors import FetchTimeoutError, RemoteStatusError

runner = CliRunner()


@pytest.fixture
def use_fetcher(monkeypatch):
    def _use(fetcher):
        monkeypatch.setattr("pokeview.cli.main.PokeApiFetcher", lambda settings: fetcher)
        return fetcher

    return _use


def test_cli_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "browse" in result.output
    assert "show" in result.output
    assert "doctor" in result.output


def test_module_entry_point_runs_cli(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["pokeview", "--help"])
    with pytest.raises(SystemExit) as exc_info:
        runpy.run_module("pokeview", run_name="__main__")
    assert exc_info.value.code == 0
    assert "browse" in capsys.readouterr().out


def test_show_renders_panel(use_fetcher, fetcher):
    use_fetcher(fetcher)
    result = runner.invoke(app, ["show", "25"])
    assert result.exit_code == 0
    assert "mon-25" in result.output
    assert "weight" in result.output
    assert fetcher.calls == [25]


def test_show_clamps_id(use_fetcher, fetcher):
    use_fetcher(fetcher)
    result = runner.invoke(app, ["show", "5000"])
    assert result.exit_code == 0
    assert fetcher.calls == [1025]


def test_show_json(use_fetcher, fetcher):
    use_fetcher(fetcher)
    result = runner.invoke(app, ["show", "4", "--json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["id"] == 4
    assert data["name"] == "mon-4"
    assert data["sprite"] == "http://x/1.png"


def test_show_output_file(use_fetcher, fetcher, tmp_path):
    use_fetcher(fetcher)
    target = tmp_path / "out" / "record.json"
    result = runner.invoke(app, ["show", "9", "--output", str(target)])
    assert result.exit_code == 0
    assert json.loads(target.read_text(encoding="utf-8"))["id"] == 9


@pytest.mark.parametrize(
    "error,needle",
    [
        (RemoteStatusError(status_code=404, record_id=1025), "404"),
        (FetchTimeoutError(timeout_seconds=10, record_id=1025), "Timed out"),
    ],
)
def test_show_failure_exits_1(use_fetcher, fake_fetcher_cls, error, needle):
    use_fetcher(fake_fetcher_cls(failures={1025: error}))
    result = runner.invoke(app, ["show", "999999"])
    assert result.exit_code == 1
    assert needle in result.output
    assert "1025" in result.output


def test_browse_quits(use_fetcher, fetcher):
    use_fetcher(fetcher)
    result = runner.invoke(app, ["browse", "--start", "7", "--no-banner"], input="n\nq\n")
    assert result.exit_code == 0
    assert "mon-7" in result.output
    assert "mon-8" in result.output
    assert fetcher.calls == [7, 8]


def test_browse_shows_banner(use_fetcher, fetcher):
    use_fetcher(fetcher)
    result = runner.invoke(app, ["browse"], input="q\n")
    assert result.exit_code == 0
    assert "pokeview" in result.output
    assert fetcher.calls == [1]


@patch("pokeview.cli.doctor._check_http", new_callable=AsyncMock)
def test_doctor_ok(mock_check):
    mock_check.return_value = (True, "HTTP 200")
    result = runner.invoke(app, ["doctor", "run"])
    assert result.exit_code == 0
    assert "HTTP 200" in result.output
    assert mock_check.call_args.args[0] == "https://pokeapi.co/api/v2/pokemon/1"


@patch("pokeview.cli.doctor._check_http", new_callable=AsyncMock)
def test_doctor_fail(mock_check):
    mock_check.return_value = (False, "ConnectError")
    result = runner.invoke(app, ["doctor", "run"])
    assert result.exit_code == 1
    assert "FAIL" in result.output


def test_doctor_config(monkeypatch):
    monkeypatch.setenv("POKEVIEW_MAX_ID", "151")
    result = runner.invoke(app, ["doctor", "config"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["max_id"] == 151
    assert data["api_base_url"] == "https://pokeapi.co"
