"""
Main page routes for the scoreboard
"""
import logging
from concurrent.futures import ThreadPoolExecutor

from flask import Blueprint, abort, current_app, jsonify, render_template

from ..components import registry
from ..core import espn_client

logger = logging.getLogger(__name__)

# Create main blueprint
main_bp = Blueprint('main', __name__)


def load_page_data(team_id):
    """Fetch schedule, team list and standings concurrently

    The schedule never raises. A failure of the team list or standings
    propagates once all three fetches have finished.
    """
    team_schedule = registry.get_service('team_schedule')
    team_directory = registry.get_service('team_directory')
    conference = registry.get_service('conference')

    with ThreadPoolExecutor(max_workers=3) as executor:
        team_future = executor.submit(team_schedule.get_team_data, team_id)
        teams_future = executor.submit(team_directory.get_all_teams)
        groups_future = executor.submit(conference.get_standings_groups)

        return team_future.result(), teams_future.result(), groups_future.result()


def render_home(team_id):
    team, all_teams, groups = load_page_data(team_id)
    return render_template(
        'index.html',
        team=team,
        all_teams=all_teams,
        groups=groups,
        eager_rows=current_app.config['EAGER_LOGO_ROWS'],
    )


@main_bp.route('/')
def home():
    """Default team page"""
    return render_home(current_app.config['DEFAULT_TEAM_ID'])


@main_bp.route('/favicon.ico')
def favicon():
    # Not a team id
    abort(404)


@main_bp.route('/<team_id>')
def team_page(team_id):
    """Page for the team picked in the selector

    Placeholder ids such as "undefined" fall back to the configured team.
    """
    return render_home(team_id)


@main_bp.route('/health')
def health():
    """Health check with upstream request counters"""
    return jsonify({
        'status': 'ok',
        'service': 'scoreboard',
        'components': sorted(registry.get_all_components()),
        'upstream': espn_client.get_stats(),
        'cache': espn_client.cache_info(),
    })
