"""
ESPN site API client

Thin wrapper over requests that knows the fixed NFL endpoints, keeps
successful JSON bodies in per-profile TTL caches and records request and
error counts per endpoint for the health route.
"""
import logging
import threading
import time
from collections import defaultdict
from datetime import datetime

import requests
from cachetools import TTLCache

from ..config.settings import ScoreboardConfig
from .errors import UpstreamHTTPError, UpstreamResponseError, UpstreamUnavailable

logger = logging.getLogger(__name__)


class EspnClient:
    """Cached JSON fetcher for the ESPN NFL endpoints"""

    def __init__(self, endpoints=None, timeout=10, user_agent='NFLScoreboard/1.0',
                 cache_ttl=None, cache_maxsize=128, cache_timer=time.monotonic):
        self._lock = threading.Lock()
        self._timer = cache_timer
        self.metrics = defaultdict(self._new_metrics)
        self.configure(
            endpoints=endpoints or ScoreboardConfig.ESPN_ENDPOINTS,
            timeout=timeout,
            user_agent=user_agent,
            cache_ttl=cache_ttl or ScoreboardConfig.CACHE_TTL,
            cache_maxsize=cache_maxsize,
        )

    @staticmethod
    def _new_metrics():
        return {'requests': 0, 'errors': 0, 'cache_hits': 0, 'last_status': None,
                'last_error': None, 'last_fetch': None}

    def configure(self, endpoints, timeout, user_agent, cache_ttl, cache_maxsize):
        """Apply settings and start with empty caches"""
        with self._lock:
            self.endpoints = dict(endpoints)
            self.timeout = timeout
            self.user_agent = user_agent
            self._caches = {
                profile: TTLCache(maxsize=cache_maxsize, ttl=ttl, timer=self._timer)
                for profile, ttl in cache_ttl.items()
            }
            self.metrics.clear()

    def init_app(self, app):
        """Configure the client from a Flask app's config"""
        self.configure(
            endpoints=app.config['ESPN_ENDPOINTS'],
            timeout=app.config['ESPN_TIMEOUT'],
            user_agent=app.config['ESPN_USER_AGENT'],
            cache_ttl=app.config['CACHE_TTL'],
            cache_maxsize=app.config['CACHE_MAXSIZE'],
        )
        app.extensions['espn_client'] = self

    def clear_cache(self):
        """Drop every cached response body"""
        with self._lock:
            for cache in self._caches.values():
                cache.clear()

    def cache_info(self):
        with self._lock:
            return {
                profile: {'size': len(cache), 'ttl': cache.ttl}
                for profile, cache in self._caches.items()
            }

    def get_stats(self):
        with self._lock:
            return {name: dict(values) for name, values in self.metrics.items()}

    def get_json(self, url, profile='hours', endpoint=None):
        """GET a URL and return its decoded JSON body

        Bodies are cached per URL for the profile's TTL. Failures raise an
        UpstreamError subclass and are never cached.
        """
        endpoint = endpoint or 'direct'
        cache = self._caches.get(profile)
        if cache is None:
            raise ValueError(f'Unknown cache profile: {profile}')

        # Single lookup, an entry can expire between a membership test and a read
        with self._lock:
            try:
                data = cache[url]
            except KeyError:
                pass
            else:
                self.metrics[endpoint]['cache_hits'] += 1
                return data

        logger.debug(f'GET {url}')
        try:
            response = requests.get(
                url,
                headers={'User-Agent': self.user_agent, 'Accept': 'application/json'},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            self._record(endpoint, None, str(e))
            raise UpstreamUnavailable(f'Could not reach {url}: {e}', url=url) from e

        if not response.ok:
            reason = response.reason or ''
            self._record(endpoint, response.status_code, f'HTTP {response.status_code} {reason}'.strip())
            raise UpstreamHTTPError(
                f'HTTP {response.status_code} {reason} from {url}'.strip(),
                url=url,
                status_code=response.status_code,
                reason=reason,
            )

        try:
            data = response.json()
        except ValueError as e:
            self._record(endpoint, response.status_code, 'Invalid JSON body')
            raise UpstreamResponseError(f'Invalid JSON from {url}', url=url) from e

        self._record(endpoint, response.status_code, None)
        with self._lock:
            cache[url] = data
        return data

    def _record(self, endpoint, status, error):
        with self._lock:
            metrics = self.metrics[endpoint]
            metrics['requests'] += 1
            metrics['last_status'] = status
            metrics['last_fetch'] = datetime.now().isoformat()
            if error:
                metrics['errors'] += 1
                metrics['last_error'] = error

    def _endpoint(self, name):
        config = self.endpoints.get(name)
        if not config:
            raise ValueError(f'Unknown ESPN endpoint: {name}')
        return config

    def fetch(self, name, **params):
        """Fetch a named endpoint, filling its URL template with params"""
        config = self._endpoint(name)
        url = config['url'].format(**params)
        return self.get_json(url, profile=config.get('profile', 'hours'), endpoint=name)

    def team_schedule(self, team_id):
        return self.fetch('schedule', team_id=team_id)

    def teams(self):
        return self.fetch('teams')

    def scoreboard(self):
        return self.fetch('scoreboard')

    def standings(self):
        return self.fetch('standings')
