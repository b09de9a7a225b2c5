"""
View models built from ESPN JSON

These are request-scoped shapes with no identity of their own. Optional
upstream fields default to an empty string or None when absent.
"""
from dataclasses import asdict, dataclass, field
from typing import List, Optional

DEFAULT_LOGO = 'https://a.espncdn.com/i/teamlogos/default-team-logo-500.png'

# Teams whose logo is mostly black and must be inverted on dark backgrounds
DARK_LOGO_TEAMS = []

DARK_COLOR = '000000'
NO_COLOR = 'N/A'

UNRANKED = 99


def get_team_color(team_name):
    """Return the logo color hint for a team"""
    return DARK_COLOR if team_name in DARK_LOGO_TEAMS else NO_COLOR


def get_stat(stats, name):
    """Return the displayValue of the named stat, or '' when missing"""
    for stat in stats or []:
        if stat.get('name') == name:
            value = stat.get('displayValue')
            return '' if value is None else value
    return ''


def get_stat_value(stats, name):
    """Return the raw value of the named stat, or None when missing"""
    for stat in stats or []:
        if stat.get('name') == name:
            return stat.get('value')
    return None


def first_logo(team):
    """Return the href of a team's first logo, or None"""
    logos = team.get('logos') or []
    if not logos:
        return None
    return logos[0].get('href')


def format_number(value):
    """Render a numeric stat without a trailing '.0'"""
    if value is None:
        return ''
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class ViewModel:
    """Mixin giving dataclass view models a JSON-ready dict form"""

    def to_dict(self):
        return asdict(self)


@dataclass
class TeamBasicInfo(ViewModel):
    id: str
    display_name: str
    abbreviation: str = ''
    name: str = ''
    location: str = ''
    color: str = ''
    alternate_color: str = ''
    logo: str = ''


@dataclass
class GameData(ViewModel):
    """One row of a team's schedule, seen from that team's side"""
    id: str
    date: str
    name: str
    team_id: str
    rank: int = UNRANKED
    logo: str = DEFAULT_LOGO
    color: str = NO_COLOR
    home_score: Optional[float] = None
    away_score: Optional[float] = None
    winner: Optional[bool] = None


@dataclass
class TeamData(ViewModel):
    id: str
    name: str = ''
    logo: str = ''
    color: str = ''
    record: str = ''
    standing: str = ''
    games: List[GameData] = field(default_factory=list)

    @property
    def is_placeholder(self):
        return not self.name and not self.games


@dataclass
class ScoreboardTeam(ViewModel):
    name: str
    team_id: str
    logo: Optional[str] = None
    color: str = NO_COLOR
    score: Optional[str] = None
    winner: Optional[bool] = None
    record: str = 'N/A'


@dataclass
class ScoreboardGame(ViewModel):
    status: str
    home_team: ScoreboardTeam
    away_team: ScoreboardTeam


@dataclass
class Scoreboard(ViewModel):
    date: str
    games: List[ScoreboardGame] = field(default_factory=list)


@dataclass
class ConferenceRankingEntry(ViewModel):
    name: str
    team_id: str
    logo: str = DEFAULT_LOGO
    color: str = NO_COLOR
    conference_win_loss: str = ''
    games_back: str = ''
    overall_win_loss: str = ''


@dataclass
class StandingsGroup(ViewModel):
    id: str
    name: str
    entries: List[ConferenceRankingEntry] = field(default_factory=list)

