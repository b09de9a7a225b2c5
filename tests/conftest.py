import copy
import json
from pathlib import Path

import pytest
import requests

from scoreboard.config.settings import ScoreboardConfig, TestingConfig
from scoreboard.scoreboard_app import create_app

FIXTURES_DIR = Path(__file__).parent / "fixtures"

ENDPOINTS = ScoreboardConfig.ESPN_ENDPOINTS
SCHEDULE_URL = ENDPOINTS["schedule"]["url"]
TEAMS_URL = ENDPOINTS["teams"]["url"]
SCOREBOARD_URL = ENDPOINTS["scoreboard"]["url"]
STANDINGS_URL = ENDPOINTS["standings"]["url"]


def load_fixture(name):
    return json.loads((FIXTURES_DIR / name).read_text())


def schedule_url(team_id):
    return SCHEDULE_URL.format(team_id=team_id)


class FakeResponse:
    def __init__(self, payload=None, status_code=200, reason="OK", text=None):
        self._payload = payload
        self.status_code = status_code
        self.reason = reason
        self.text = text

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self.text is not None:
            raise ValueError("No JSON object could be decoded")
        return copy.deepcopy(self._payload)


class FakeEspn:
    """Stand-in for requests.get that answers by URL (no live API calls)."""

    def __init__(self):
        self.routes = {}
        self.calls = []

    def add(self, url, payload=None, status_code=200, reason="OK", exc=None, text=None):
        self.routes[url] = {
            "payload": payload,
            "status_code": status_code,
            "reason": reason,
            "exc": exc,
            "text": text,
        }

    def fail(self, url, status_code=500, reason="Internal Server Error"):
        self.add(url, status_code=status_code, reason=reason)

    def count(self, url):
        return self.calls.count(url)

    def __call__(self, url, headers=None, timeout=None, **kwargs):
        self.calls.append(url)
        route = self.routes.get(url)
        if route is None:
            return FakeResponse(status_code=404, reason="Not Found")
        if route["exc"] is not None:
            raise route["exc"]
        return FakeResponse(
            payload=route["payload"],
            status_code=route["status_code"],
            reason=route["reason"],
            text=route["text"],
        )


@pytest.fixture
def fake_espn(monkeypatch) -> FakeEspn:
    fake = FakeEspn()
    monkeypatch.setattr(requests, "get", fake)
    return fake


@pytest.fixture
def espn_ok(fake_espn) -> FakeEspn:
    """All four endpoints answering with the recorded fixtures."""
    fake_espn.add(schedule_url("16"), load_fixture("schedule_16.json"))
    fake_espn.add(TEAMS_URL, load_fixture("teams.json"))
    fake_espn.add(SCOREBOARD_URL, load_fixture("scoreboard.json"))
    fake_espn.add(STANDINGS_URL, load_fixture("standings.json"))
    return fake_espn


@pytest.fixture
def app():
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()
