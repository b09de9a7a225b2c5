"""
Team Schedule Routes
"""
from flask import Blueprint, current_app, jsonify, render_template

from .. import register_component
from .service import TeamScheduleService

team_schedule_bp = Blueprint(
    'team_schedule',
    __name__,
    template_folder='templates',
)

# Initialize service
service = TeamScheduleService()


@team_schedule_bp.route('/components/team_schedule/<team_id>')
def render_component(team_id):
    """Render the schedule rows for one team"""
    team = service.get_team_data(team_id)
    return render_template(
        'team_schedule.html',
        team=team,
        eager_rows=current_app.config['EAGER_LOGO_ROWS'],
    )


@team_schedule_bp.route('/api/teams/<team_id>/schedule')
def api_team_schedule(team_id):
    """Get a team's schedule as JSON"""
    return jsonify(service.get_team_data(team_id).to_dict())


@register_component('team_schedule', service)
def init_team_schedule(app):
    """Initialize team schedule component with Flask app"""
    service.configure(app.config)
    app.register_blueprint(team_schedule_bp)
    return team_schedule_bp
