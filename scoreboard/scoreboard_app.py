"""
NFL Scoreboard
Flask front-end for ESPN schedules, scores and standings
"""
import logging

from flask import Flask, jsonify, render_template, request
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from . import components
from .components import conference, scores, team_directory, team_schedule  # noqa: F401 (registers components)
from .config.settings import ScoreboardConfig
from .core import espn_client
from .core.errors import UpstreamError
from .core.models import DARK_COLOR, DEFAULT_LOGO, format_number
from .routes.main_routes import main_bp

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s [%(levelname)s] %(name)s: %(message)s')
logger = logging.getLogger(__name__)


class ScoreboardApp:
    """Main scoreboard application class"""

    def __init__(self, config_object=ScoreboardConfig):
        self.config_object = config_object
        self.app = None
        self.limiter = None

    def create_app(self):
        """Create and configure Flask application"""
        self.app = Flask(__name__)

        # Load configuration
        self.app.config.from_object(self.config_object)
        logging.getLogger('scoreboard').setLevel(self.app.config['LOG_LEVEL'])

        # Initialize extensions
        self.limiter = Limiter(
            key_func=get_remote_address,
            app=self.app,
            default_limits=[self.app.config['RATELIMIT_DEFAULT']],
            storage_uri=self.app.config['RATELIMIT_STORAGE_URI'],
        )

        # Shared ESPN client
        espn_client.init_app(self.app)

        # Initialize components
        components.registry.init_app(self.app)

        # Register main blueprint
        self.app.register_blueprint(main_bp)

        self._register_template_helpers()
        self._register_error_handlers()

        return self.app

    def _register_template_helpers(self):
        self.app.jinja_env.filters['score'] = format_number
        self.app.jinja_env.globals.update(
            DARK_COLOR=DARK_COLOR,
            DEFAULT_LOGO=DEFAULT_LOGO,
        )

    def _register_error_handlers(self):
        @self.app.errorhandler(UpstreamError)
        def handle_upstream_error(error):
            logger.error(f'Upstream failure on {request.path}: {error}')
            if request.path.startswith('/api/'):
                return jsonify({'error': str(error)}), 502
            return render_template(
                'error.html',
                title='Scores are unavailable',
                message='The statistics service did not answer. Try again in a moment.',
            ), 502

        @self.app.errorhandler(404)
        def handle_not_found(error):
            if request.path.startswith('/api/'):
                return jsonify({'error': 'Not found'}), 404
            return render_template(
                'error.html',
                title='Page not found',
                message='There is nothing at this address.',
            ), 404

    def run(self):
        """Start the scoreboard application"""
        host = self.app.config['HOST']
        port = self.app.config['PORT']

        logger.info('=' * 60)
        logger.info('NFL Scoreboard')
        logger.info(f'Starting on: http://{host}:{port}')
        logger.info('Endpoints:')
        logger.info('   - Page:      /  and  /<team_id>')
        logger.info('   - Scores:    /components/scores')
        logger.info('   - API:       /api/teams, /api/scores, /api/standings')
        logger.info('   - Health:    /health')
        logger.info('=' * 60)

        self.app.run(host=host, port=port, debug=False)


def create_app(config_object=ScoreboardConfig):
    """App factory for `flask --app scoreboard.scoreboard_app run`"""
    return ScoreboardApp(config_object).create_app()


def main():
    """Main entry point"""
    scoreboard = ScoreboardApp()
    scoreboard.create_app()
    scoreboard.run()


if __name__ == '__main__':
    main()
