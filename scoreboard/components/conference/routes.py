"""
Conference Routes
"""
from flask import Blueprint, current_app, jsonify, render_template

from .. import register_component
from .service import ConferenceService

conference_bp = Blueprint(
    'conference',
    __name__,
    template_folder='templates',
)

# Initialize service
service = ConferenceService()


@conference_bp.route('/components/conference')
def render_component():
    """Render the conference standings column HTML"""
    return render_template(
        'conference.html',
        groups=service.get_standings_groups(),
        eager_rows=current_app.config['EAGER_LOGO_ROWS'],
    )


@conference_bp.route('/api/standings')
def api_standings():
    """Get standings groups as JSON"""
    return jsonify([group.to_dict() for group in service.get_standings_groups()])


@register_component('conference', service)
def init_conference(app):
    """Initialize conference component with Flask app"""
    service.configure(app.config)
    app.register_blueprint(conference_bp)
    return conference_bp
