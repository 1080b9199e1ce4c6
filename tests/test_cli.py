"""Tests for the command-line entry point."""

import json
import logging

import httpx
import pytest
from typer.testing import CliRunner

from hawksoft_sync import cli
from hawksoft_sync.config import REQUIRED_VARS
from hawksoft_sync.export.writer import CSV_HEADER
from hawksoft_sync.hawksoft.client import HawksoftClient

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


CLIENTS = {
    1: {
        "clientNumber": 1,
        "people": [{"id": "p1", "firstName": "Larry", "lastName": "Lastname"}],
        "contacts": [
            {"type": "CellPhone", "data": "5037777777", "personId": "p1", "priority": 100},
        ],
    },
    2: {
        "clientNumber": 2,
        "contacts": [{"type": "WorkPhone", "data": "15031112222", "priority": 1}],
    },
}


@pytest.fixture
def api(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("BASE_URL", "https://api.example.com")
    monkeypatch.setenv("AGENCY_ID", "42")
    monkeypatch.setenv("API_USER", "u")
    monkeypatch.setenv("API_PASS", "p")
    monkeypatch.setenv("BATCH_DELAY", "0")

    requests = []

    def handler(request):
        requests.append(request)
        path = request.url.path
        if path.endswith("/clients"):
            return httpx.Response(200, json=sorted(CLIENTS))
        number = int(path.rsplit("/", 1)[1])
        if number not in CLIENTS:
            return httpx.Response(404)
        return httpx.Response(200, json=CLIENTS[number])

    def build_client(settings):
        return HawksoftClient.from_settings(settings, transport=httpx.MockTransport(handler))

    monkeypatch.setattr(cli, "build_client", build_client)
    return requests


def test_help():
    result = runner.invoke(cli.app, ["--help"])
    assert result.exit_code == 0
    assert "--mode" in result.output
    assert "--output" in result.output


def test_full_sync_to_json(api, tmp_path):
    result = runner.invoke(cli.app, ["--output", "phones"])

    assert result.exit_code == 0, result.output
    data = json.loads((tmp_path / "phones.json").read_text())
    assert [d["phoneNumber"] for d in data] == ["(503) 777-7777", "(503) 111-2222"]
    assert data[0]["personName"] == "Larry Lastname"
    assert "Total Phone Number Entries: 2" in result.output


def test_incremental_sync_to_csv(api, tmp_path):
    result = runner.invoke(
        cli.app,
        ["--mode", "incremental", "--since", "2025-01-01T00:00:00Z", "-o", "changes.csv"],
    )

    assert result.exit_code == 0, result.output
    assert api[0].url.params["asOf"] == "2025-01-01T00:00:00Z"
    lines = (tmp_path / "changes.csv").read_text().splitlines()
    assert lines[0] == CSV_HEADER
    assert len(lines) == 3


def test_incremental_defaults_to_last_week(api):
    result = runner.invoke(cli.app, ["-m", "Incremental"])
    assert result.exit_code == 0, result.output
    assert "asOf" in api[0].url.params


def test_invalid_since(api):
    result = runner.invoke(cli.app, ["-m", "Incremental", "--since", "not a date"])
    assert result.exit_code != 0
    assert api == []


def test_single_client(api, tmp_path):
    result = runner.invoke(cli.app, ["-m", "SingleClient", "-c", "2", "-o", "one.json"])

    assert result.exit_code == 0, result.output
    data = json.loads((tmp_path / "one.json").read_text())
    assert data == [{
        "clientNumber": 2,
        "phoneNumber": "(503) 111-2222",
        "phoneType": "WorkPhone",
        "personId": None,
        "personName": None,
        "priority": 1,
        "lastModified": None,
    }]


def test_single_client_requires_client_number(api):
    result = runner.invoke(cli.app, ["-m", "SingleClient"])
    assert result.exit_code == 0
    assert "--client" in result.output
    assert api == []


def test_missing_config_exits_before_network(api, monkeypatch):
    for name in REQUIRED_VARS:
        monkeypatch.delenv(name)
    result = runner.invoke(cli.app, [])
    assert result.exit_code == 1
    assert api == []


def test_export_failure_exits_nonzero(api, tmp_path):
    result = runner.invoke(cli.app, ["-o", str(tmp_path / "missing" / "out.csv")])
    assert result.exit_code == 1
