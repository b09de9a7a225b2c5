import pytest

from scoreboard.components.team_directory import TeamDirectoryService, build_team_directory
from scoreboard.core.errors import UpstreamHTTPError, UpstreamResponseError
from scoreboard.core.espn import EspnClient

from conftest import TEAMS_URL, load_fixture


def test_teams_sorted_by_display_name():
    teams = build_team_directory(load_fixture("teams.json"))

    assert [t.display_name for t in teams] == [
        "Arizona Cardinals",
        "Chicago Bears",
        "Green Bay Packers",
        "Minnesota Vikings",
    ]


def test_sort_ignores_case():
    data = {"sports": [{"leagues": [{"teams": [
        {"team": {"id": "1", "displayName": "bravo"}},
        {"team": {"id": "2", "displayName": "Alpha"}},
        {"team": {"id": "3", "displayName": "Charlie"}},
    ]}]}]}

    assert [t.id for t in build_team_directory(data)] == ["2", "1", "3"]


def test_team_fields():
    teams = {t.id: t for t in build_team_directory(load_fixture("teams.json"))}

    vikings = teams["16"]
    assert vikings.abbreviation == "MIN"
    assert vikings.name == "Vikings"
    assert vikings.location == "Minnesota"
    assert vikings.color == "4f2683"
    assert vikings.alternate_color == "ffc62f"
    assert vikings.logo == "https://a.espncdn.com/i/teamlogos/nfl/500/min.png"

    assert teams["9"].logo == ""


@pytest.mark.parametrize(
    "payload",
    [{}, {"sports": []}, {"sports": [{"leagues": []}]}, {"sports": [{"leagues": [{}]}]}, []],
)
def test_unexpected_structure_raises(payload):
    with pytest.raises(UpstreamResponseError, match="Unexpected API response structure"):
        build_team_directory(payload)


def test_upstream_failure_propagates(fake_espn):
    fake_espn.fail(TEAMS_URL, status_code=502, reason="Bad Gateway")
    service = TeamDirectoryService(client=EspnClient())

    with pytest.raises(UpstreamHTTPError):
        service.get_all_teams()


def test_null_fields_become_empty_strings():
    data = {"sports": [{"leagues": [{"teams": [
        {"team": {"id": "1", "displayName": None, "abbreviation": None, "color": None}},
        {"team": {"id": "2", "displayName": "Alpha"}},
    ]}]}]}

    teams = build_team_directory(data)

    assert [t.id for t in teams] == ["1", "2"]
    assert teams[0].display_name == ""
    assert teams[0].abbreviation == ""
    assert teams[0].color == ""


@pytest.mark.parametrize(
    "teams",
    [["not a team"], 42, [{"team": {"id": "1", "displayName": 7}}]],
)
def test_malformed_teams_raise_response_error(fake_espn, teams):
    fake_espn.add(TEAMS_URL, {"sports": [{"leagues": [{"teams": teams}]}]})
    service = TeamDirectoryService(client=EspnClient())

    with pytest.raises(UpstreamResponseError):
        service.get_all_teams()
