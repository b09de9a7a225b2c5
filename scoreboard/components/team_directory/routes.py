"""
Team Directory Routes
"""
from flask import Blueprint, jsonify, redirect, request, url_for

from .. import register_component
from .service import TeamDirectoryService

team_directory_bp = Blueprint(
    'team_directory',
    __name__,
    template_folder='templates',
)

# Initialize service
service = TeamDirectoryService()


@team_directory_bp.route('/api/teams')
def api_teams():
    """Get all teams sorted by display name"""
    return jsonify([team.to_dict() for team in service.get_all_teams()])


@team_directory_bp.route('/select')
def select_team():
    """Team picker form target"""
    team_id = request.args.get('teamId', '').strip()
    if not team_id.isdigit():
        return redirect(url_for('main.home'))
    return redirect(url_for('main.team_page', team_id=team_id))


@register_component('team_directory', service)
def init_team_directory(app):
    """Initialize team directory component with Flask app"""
    app.register_blueprint(team_directory_bp)
    return team_directory_bp
