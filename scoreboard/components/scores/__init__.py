"""
Scores Component
Displays today's games and live scores
"""

from .routes import init_scores, scores_bp, service as scores_service
from .service import ScoresService, build_scoreboard, format_team_data

__all__ = [
    'scores_bp',
    'init_scores',
    'scores_service',
    'ScoresService',
    'build_scoreboard',
    'format_team_data',
]
