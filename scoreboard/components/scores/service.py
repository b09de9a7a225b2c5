"""
Scores Service
Today's scoreboard: one entry per game with both sides formatted for display
"""
import logging
from datetime import datetime, timezone

from ...core import espn_client
from ...core.errors import UpstreamResponseError
from ...core.models import Scoreboard, ScoreboardGame, ScoreboardTeam, get_team_color

logger = logging.getLogger(__name__)

FINAL_STATUS = 'Final'


def score_text(score):
    """Reduce an upstream score (object or scalar) to display text"""
    if score is None:
        return None
    if isinstance(score, dict):
        display = score.get('displayValue')
        if display is not None:
            return str(display)
        value = score.get('value')
        return None if value is None else str(value)
    return str(score)


def format_team_data(competitor):
    """Format one competitor of a scoreboard game"""
    team = competitor.get('team') or {}
    name = team.get('displayName', '')
    records = competitor.get('records') or []
    record = records[0].get('summary') if records else None

    return ScoreboardTeam(
        name=name,
        team_id=team.get('id', ''),
        logo=team.get('logo') or None,
        color=get_team_color(name),
        score=score_text(competitor.get('score')),
        winner=competitor.get('winner'),
        record='N/A' if record is None else record,
    )


def build_scoreboard(data, now=None):
    """Reshape the scoreboard payload into a Scoreboard"""
    now = now or datetime.now(timezone.utc)
    games = []
    for event in data.get('events') or []:
        competition = event['competitions'][0]
        competitors = competition.get('competitors') or []
        if len(competitors) < 2:
            raise UpstreamResponseError(
                'Expected to find both home and away teams in the event competitors'
            )
        home_team, away_team = competitors[0], competitors[1]
        status_type = (competition.get('status') or {}).get('type') or {}

        games.append(ScoreboardGame(
            status=status_type.get('shortDetail', ''),
            home_team=format_team_data(home_team),
            away_team=format_team_data(away_team),
        ))

    return Scoreboard(date=now.isoformat(), games=games)


def is_faded(team, status):
    """Losing side of a finished game is shown greyed out"""
    return team.winner is False and status == FINAL_STATUS


class ScoresService:
    """Service for the Scores component

    Upstream failures propagate to the caller.
    """

    def __init__(self, client=None):
        self.client = client

    def get_today_schedule(self):
        client = self.client or espn_client
        try:
            scoreboard = build_scoreboard(client.scoreboard())
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            raise UpstreamResponseError(f'Unexpected scoreboard payload: {e}') from e
        logger.debug(f'Scoreboard has {len(scoreboard.games)} games')
        return scoreboard
