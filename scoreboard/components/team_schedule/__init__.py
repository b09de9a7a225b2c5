"""
Team Schedule Component
Shows the selected team's header and season schedule
"""

from .routes import init_team_schedule, service as team_schedule_service, team_schedule_bp
from .service import TeamScheduleService, build_team_data, normalize_team_id

__all__ = [
    'team_schedule_bp',
    'init_team_schedule',
    'team_schedule_service',
    'TeamScheduleService',
    'build_team_data',
    'normalize_team_id',
]
