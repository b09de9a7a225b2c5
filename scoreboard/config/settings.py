"""
Scoreboard configuration settings
"""
import os

HOUR = 60 * 60
DAY = 24 * HOUR
WEEK = 7 * DAY


class ScoreboardConfig:
    """Centralized configuration for the scoreboard"""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'your-secret-key-here-change-in-production')
    HOST = os.environ.get('SCOREBOARD_HOST', '0.0.0.0')
    PORT = int(os.environ.get('SCOREBOARD_PORT', 8081))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Rate limiting
    RATELIMIT_STORAGE_URI = "memory://"
    RATELIMIT_DEFAULT = os.environ.get('RATELIMIT_DEFAULT', "100 per minute")

    # Teams
    DEFAULT_TEAM_ID = os.environ.get('DEFAULT_TEAM_ID', '16')
    FALLBACK_TEAM_ID = os.environ.get('FALLBACK_TEAM_ID', '12')
    STANDINGS_GROUP_LIMIT = int(os.environ.get('STANDINGS_GROUP_LIMIT', 4))

    # ESPN endpoints
    ESPN_ENDPOINTS = {
        'schedule': {
            'url': 'https://site.web.api.espn.com/apis/site/v2/sports/football/nfl/teams/{team_id}/schedule',
            'profile': 'weeks',
        },
        'teams': {
            'url': 'https://site.api.espn.com/apis/site/v2/sports/football/nfl/teams',
            'profile': 'weeks',
        },
        'scoreboard': {
            'url': 'https://site.web.api.espn.com/apis/site/v2/sports/football/nfl/scoreboard',
            'profile': 'days',
        },
        'standings': {
            'url': 'https://site.web.api.espn.com/apis/v2/sports/football/nfl/standings',
            'profile': 'hours',
        },
    }
    ESPN_TIMEOUT = float(os.environ.get('ESPN_TIMEOUT', 10))
    ESPN_USER_AGENT = os.environ.get('ESPN_USER_AGENT', 'NFLScoreboard/1.0')

    # Response cache, seconds per profile
    CACHE_TTL = {
        'hours': int(os.environ.get('CACHE_TTL_HOURS', HOUR)),
        'days': int(os.environ.get('CACHE_TTL_DAYS', DAY)),
        'weeks': int(os.environ.get('CACHE_TTL_WEEKS', WEEK)),
    }
    CACHE_MAXSIZE = int(os.environ.get('CACHE_MAXSIZE', 128))

    # UI settings
    EAGER_LOGO_ROWS = 10


class TestingConfig(ScoreboardConfig):
    """Configuration used by the test suite"""

    TESTING = True
    RATELIMIT_ENABLED = False
    SECRET_KEY = 'testing'
