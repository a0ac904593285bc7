"""Shared fixtures for notion CLI tests.

Config is pointed at a temporary file and ``urlopen`` is replaced by a fake
server, so no test reads the real ``~/.notion-cli.json`` or touches the network.
"""

import json
import pathlib
import sys
from http.client import HTTPMessage
from io import BytesIO
from urllib.error import HTTPError

import pytest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))

from notion_cli.core import config as config_mod  # noqa: E402
from notion_cli.core import http as http_mod  # noqa: E402

BASE = "https://api.test"


class FakeResponse:
    def __init__(self, status, body):
        self.status = status
        self._body = body

    def read(self):
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class FakeServer:
    """Stand-in for ``urlopen`` that records requests and replays responses."""

    def __init__(self):
        self.requests = []
        self.timeouts = []
        self._responses = []
        self.error_bodies = []

    def queue(self, status=200, body=None, headers=None):
        if body is None:
            body = {}
        raw = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
        self._responses.append((status, raw, headers or {}))
        return self

    def __call__(self, req, timeout=None):
        self.requests.append(req)
        self.timeouts.append(timeout)
        if not self._responses:
            raise AssertionError(f"unexpected request: {req.get_method()} {req.full_url}")
        status, raw, headers = self._responses.pop(0)
        if 200 <= status < 300:
            return FakeResponse(status, raw)
        msg = HTTPMessage()
        for key, value in headers.items():
            msg[key] = value
        body = BytesIO(raw)
        self.error_bodies.append(body)
        raise HTTPError(req.full_url, status, "error", msg, body)

    # helpers for assertions
    @property
    def calls(self):
        return [(r.get_method(), r.full_url) for r in self.requests]

    def json_body(self, index=-1):
        return json.loads(self.requests[index].data.decode("utf-8"))


@pytest.fixture(autouse=True)
def _isolate_config(tmp_path, monkeypatch):
    """Every test gets an empty config file location and a known token."""
    monkeypatch.setattr(config_mod, "CONFIG_PATH", tmp_path / ".notion-cli.json")
    monkeypatch.setenv("NOTION_API_TOKEN", "secret_test")
    monkeypatch.setenv("NOTION_BASE_URL", BASE)


@pytest.fixture
def server(monkeypatch):
    fake = FakeServer()
    monkeypatch.setattr(http_mod, "urlopen", fake)
    return fake


@pytest.fixture
def sleeps(monkeypatch):
    """Record backoff waits instead of sleeping."""
    waited = []
    monkeypatch.setattr(http_mod.time, "sleep", waited.append)
    return waited
