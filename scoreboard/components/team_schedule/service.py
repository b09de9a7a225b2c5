"""
Team Schedule Service
Fetches a team's season schedule and flattens it into schedule rows
"""
import logging

from ...core import espn_client
from ...core.errors import UpstreamError
from ...core.models import (
    DEFAULT_LOGO,
    UNRANKED,
    GameData,
    TeamData,
    first_logo,
    get_team_color,
)

logger = logging.getLogger(__name__)

INVALID_TEAM_IDS = ('', 'undefined')


def normalize_team_id(team_id, fallback_team_id):
    """Map missing or template-placeholder team ids to the fallback team"""
    team_id = '' if team_id is None else str(team_id).strip()
    if team_id in INVALID_TEAM_IDS or 'teamId' in team_id:
        return fallback_team_id
    return team_id


def _score_value(competitor):
    score = competitor.get('score')
    if isinstance(score, dict):
        return score.get('value')
    return None


def build_game(event, team_id):
    """Build a schedule row for one event, or None if the team is not in it"""
    competitions = event.get('competitions') or []
    if not competitions:
        return None
    competition = competitions[0]
    competitors = competition.get('competitors') or []

    favorite_team = next((c for c in competitors if c.get('id') == team_id), None)
    other_team = next((c for c in competitors if c.get('id') != team_id), None)
    if favorite_team is None or other_team is None:
        return None

    opponent = other_team.get('team') or {}
    opponent_name = opponent.get('displayName', '')
    status_type = (competition.get('status') or {}).get('type') or {}

    return GameData(
        id=competition.get('id', ''),
        date=status_type.get('shortDetail', ''),
        name=opponent_name,
        team_id=opponent.get('id', ''),
        rank=UNRANKED,
        logo=first_logo(opponent) or DEFAULT_LOGO,
        color=get_team_color(opponent_name),
        home_score=_score_value(favorite_team),
        away_score=_score_value(other_team),
        winner=favorite_team.get('winner'),
    )


def build_team_data(data, team_id):
    """Reshape a schedule payload into TeamData"""
    games = []
    for event in data.get('events') or []:
        game = build_game(event, team_id)
        if game is not None:
            games.append(game)

    team = data.get('team') or {}
    return TeamData(
        id=team_id,
        name=team.get('displayName') or '',
        logo=first_logo(team) or '',
        color=team.get('color') or '',
        record=team.get('recordSummary') or '',
        standing=team.get('standingSummary') or '',
        games=games,
    )


class TeamScheduleService:
    """Service for the Team Schedule component

    Never raises: any failure yields an empty TeamData so the page can still
    render the other columns.
    """

    def __init__(self, client=None, fallback_team_id='12'):
        self.client = client
        self.fallback_team_id = fallback_team_id

    def configure(self, config):
        self.fallback_team_id = config['FALLBACK_TEAM_ID']

    def get_team_data(self, team_id):
        team_id = normalize_team_id(team_id, self.fallback_team_id)
        logger.info(f'Fetching team data for: {team_id}')

        client = self.client or espn_client
        try:
            data = client.team_schedule(team_id)
            return build_team_data(data, team_id)
        except UpstreamError as e:
            logger.error(f'Error fetching team data for {team_id}: {e}')
        except (AttributeError, LookupError, TypeError) as e:
            logger.error(f'Unexpected schedule payload for {team_id}: {e}')
        return TeamData(id=team_id)
