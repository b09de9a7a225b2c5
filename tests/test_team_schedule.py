import logging

import pytest

from scoreboard.components.team_schedule import (
    TeamScheduleService,
    build_team_data,
    normalize_team_id,
)
from scoreboard.core.espn import EspnClient
from scoreboard.core.models import DEFAULT_LOGO, TeamData

from conftest import load_fixture, schedule_url


@pytest.fixture
def service():
    return TeamScheduleService(client=EspnClient(), fallback_team_id="12")


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, "12"),
        ("", "12"),
        ("undefined", "12"),
        ("[teamId]", "12"),
        ("teamId", "12"),
        (" 16 ", "16"),
        (16, "16"),
    ],
)
def test_normalize_team_id(raw, expected):
    assert normalize_team_id(raw, "12") == expected


def test_build_team_data_header():
    team = build_team_data(load_fixture("schedule_16.json"), "16")

    assert team.id == "16"
    assert team.name == "Minnesota Vikings"
    assert team.logo == "https://a.espncdn.com/i/teamlogos/nfl/500/min.png"
    assert team.color == "4f2683"
    assert team.record == "1-0"
    assert team.standing == "1st in NFC North"


def test_build_team_data_rows_are_from_the_teams_side():
    team = build_team_data(load_fixture("schedule_16.json"), "16")

    # The third event does not involve team 16 and is dropped
    assert [g.id for g in team.games] == ["401671001", "401671002"]

    played, upcoming = team.games
    assert played.name == "Chicago Bears"
    assert played.team_id == "3"
    assert played.date == "Final"
    assert played.rank == 99
    assert played.logo == "https://a.espncdn.com/i/teamlogos/nfl/500/chi.png"
    assert played.color == "N/A"
    assert played.home_score == 28.0
    assert played.away_score == 20.0
    assert played.winner is True

    assert upcoming.name == "Green Bay Packers"
    assert upcoming.date == "Sun, 9/14 - 1:00 PM EDT"
    assert upcoming.logo == DEFAULT_LOGO
    assert upcoming.home_score is None
    assert upcoming.away_score is None
    assert upcoming.winner is None


def test_missing_header_fields_default_to_empty_strings():
    team = build_team_data({"events": []}, "16")

    assert team == TeamData(id="16")
    assert team.is_placeholder


def test_get_team_data_fetches_schedule(fake_espn, service):
    fake_espn.add(schedule_url("16"), load_fixture("schedule_16.json"))

    team = service.get_team_data("16")

    assert team.name == "Minnesota Vikings"
    assert len(team.games) == 2


def test_get_team_data_uses_fallback_team(fake_espn, service):
    fake_espn.add(schedule_url("12"), {"team": {"displayName": "Kansas City Chiefs"}})

    team = service.get_team_data("undefined")

    assert team.id == "12"
    assert team.name == "Kansas City Chiefs"
    assert fake_espn.calls == [schedule_url("12")]


def test_get_team_data_returns_placeholder_on_http_error(fake_espn, service, caplog):
    fake_espn.fail(schedule_url("16"))

    with caplog.at_level(logging.ERROR):
        team = service.get_team_data("16")

    assert team == TeamData(id="16")
    assert "Error fetching team data" in caplog.text


def test_get_team_data_returns_placeholder_on_malformed_payload(fake_espn, service):
    fake_espn.add(schedule_url("16"), ["not", "an", "object"])

    assert service.get_team_data("16") == TeamData(id="16")
