"""
Core services for scoreboard components
"""
from .errors import UpstreamError, UpstreamHTTPError, UpstreamResponseError, UpstreamUnavailable
from .espn import EspnClient

# Shared client - configured from the app config in ScoreboardApp.create_app
espn_client = EspnClient()

__all__ = [
    'EspnClient',
    'espn_client',
    'UpstreamError',
    'UpstreamHTTPError',
    'UpstreamResponseError',
    'UpstreamUnavailable',
]
