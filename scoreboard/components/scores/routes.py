"""
Scores Routes
The scores column is loaded separately from the page so a slow scoreboard
never holds up the schedule and standings.
"""
import logging

from flask import Blueprint, current_app, jsonify, render_template

from ...core.errors import UpstreamError
from .. import register_component
from .service import ScoresService, is_faded

logger = logging.getLogger(__name__)

scores_bp = Blueprint(
    'scores',
    __name__,
    template_folder='templates',
)

# Initialize service
service = ScoresService()


@scores_bp.route('/components/scores')
def render_component():
    """Render the scores column HTML"""
    try:
        scoreboard = service.get_today_schedule()
    except UpstreamError as e:
        logger.error(f"Error fetching today's schedule: {e}")
        return render_template('scores_error.html'), 502

    return render_template(
        'scores.html',
        scoreboard=scoreboard,
        is_faded=is_faded,
        eager_rows=current_app.config['EAGER_LOGO_ROWS'],
    )


@scores_bp.route('/api/scores')
def api_scores():
    """Get today's scoreboard as JSON"""
    return jsonify(service.get_today_schedule().to_dict())


@register_component('scores', service)
def init_scores(app):
    """Initialize scores component with Flask app"""
    app.register_blueprint(scores_bp)
    return scores_bp
