"""
Team Directory Service
Lists every NFL team for the team picker
"""
import logging

from ...core import espn_client
from ...core.errors import UpstreamResponseError
from ...core.models import TeamBasicInfo, first_logo

logger = logging.getLogger(__name__)


def _league_teams(data):
    try:
        teams = data['sports'][0]['leagues'][0]['teams']
    except (KeyError, IndexError, TypeError):
        teams = None
    if teams is None:
        raise UpstreamResponseError('Unexpected API response structure')
    return teams


def build_team_directory(data):
    """Reshape the teams payload into TeamBasicInfo sorted by display name"""
    teams = []
    for item in _league_teams(data):
        team = item.get('team') or {}
        teams.append(TeamBasicInfo(
            id=team.get('id') or '',
            display_name=team.get('displayName') or '',
            abbreviation=team.get('abbreviation') or '',
            name=team.get('name') or '',
            location=team.get('location') or '',
            color=team.get('color') or '',
            alternate_color=team.get('alternateColor') or '',
            logo=first_logo(team) or '',
        ))
    teams.sort(key=lambda t: t.display_name.casefold())
    return teams


class TeamDirectoryService:
    """Service for the Team Directory component

    Upstream failures propagate to the caller.
    """

    def __init__(self, client=None):
        self.client = client

    def get_all_teams(self):
        client = self.client or espn_client
        data = client.teams()
        try:
            teams = build_team_directory(data)
        except (AttributeError, KeyError, TypeError) as e:
            raise UpstreamResponseError(f'Unexpected teams payload: {e}') from e
        logger.debug(f'Loaded {len(teams)} teams')
        return teams
