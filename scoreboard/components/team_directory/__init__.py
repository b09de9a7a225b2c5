"""
Team Directory Component
"""
from .routes import init_team_directory, service as team_directory_service, team_directory_bp
from .service import TeamDirectoryService, build_team_directory

__all__ = [
    'team_directory_bp',
    'init_team_directory',
    'team_directory_service',
    'TeamDirectoryService',
    'build_team_directory',
]
