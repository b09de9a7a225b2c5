"""
Conference Service
Standings groups (conferences or divisions) with a W-L line per team
"""
import logging
from itertools import islice

from ...core import espn_client
from ...core.errors import UpstreamResponseError
from ...core.models import (
    DEFAULT_LOGO,
    NO_COLOR,
    ConferenceRankingEntry,
    StandingsGroup,
    first_logo,
    format_number,
    get_stat,
    get_stat_value,
)

logger = logging.getLogger(__name__)

CONFERENCE_RECORD_STAT = 'vs. Conf.'
GAMES_BACK_STAT = 'gamesBehind'


def iter_standings_groups(node):
    """Yield groups that carry standings, depth first

    A child without its own standings is searched through its children.
    """
    for child in node.get('children') or []:
        if (child.get('standings') or {}).get('entries') is not None:
            yield child
        else:
            yield from iter_standings_groups(child)


def build_ranking_entry(entry):
    team = entry.get('team') or {}
    stats = entry.get('stats') or []
    wins = format_number(get_stat_value(stats, 'wins'))
    losses = format_number(get_stat_value(stats, 'losses'))

    return ConferenceRankingEntry(
        name=team.get('displayName', ''),
        team_id=team.get('id', ''),
        logo=first_logo(team) or DEFAULT_LOGO,
        color=team.get('color') or NO_COLOR,
        conference_win_loss=get_stat(stats, CONFERENCE_RECORD_STAT),
        games_back=get_stat(stats, GAMES_BACK_STAT),
        overall_win_loss=f'{wins}-{losses}',
    )


def build_standings_groups(data, limit=4):
    """Reshape the standings payload into at most `limit` groups"""
    groups = []
    for group in islice(iter_standings_groups(data), limit):
        groups.append(StandingsGroup(
            id=str(group.get('id', '')),
            name=group.get('name', ''),
            entries=[build_ranking_entry(e) for e in group['standings']['entries']],
        ))
    return groups


class ConferenceService:
    """Service for the Conference component

    Upstream failures propagate to the caller.
    """

    def __init__(self, client=None, group_limit=4):
        self.client = client
        self.group_limit = group_limit

    def configure(self, config):
        self.group_limit = config['STANDINGS_GROUP_LIMIT']

    def get_conference_rankings(self):
        """Raw standings payload"""
        client = self.client or espn_client
        data = client.standings()
        if not isinstance(data, dict):
            raise UpstreamResponseError('Unexpected API response structure')
        logger.debug(f"Conference data: {len(data.get('children') or [])} top-level groups")
        return data

    def get_standings_groups(self, limit=None):
        limit = self.group_limit if limit is None else limit
        data = self.get_conference_rankings()
        try:
            return build_standings_groups(data, limit=limit)
        except (AttributeError, KeyError, TypeError) as e:
            raise UpstreamResponseError(f'Unexpected standings payload: {e}') from e
