"""
Conference Component
Displays conference standings
"""

from .routes import conference_bp, init_conference, service as conference_service
from .service import ConferenceService, build_standings_groups

__all__ = [
    'conference_bp',
    'init_conference',
    'conference_service',
    'ConferenceService',
    'build_standings_groups',
]
