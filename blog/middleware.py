"""
Request Interceptors

Runs ahead of the view functions, in this order:

1. MethodOverrideMiddleware (WSGI) lets HTML forms reach PUT/DELETE routes.
2. The request stamp records when the request started.
3. The Auth Gate, registered on the admin blueprint.
"""

import logging
import time
from datetime import datetime, timezone
from urllib.parse import parse_qs

from flask import g, request

logger = logging.getLogger(__name__)

OVERRIDABLE_METHODS = frozenset(['PUT', 'PATCH', 'DELETE'])


class MethodOverrideMiddleware:
    """Dispatch ``POST /path?_method=PUT`` as ``PUT /path``."""

    def __init__(self, wsgi_app, param='_method'):
        self.wsgi_app = wsgi_app
        self.param = param

    def __call__(self, environ, start_response):
        if environ.get('REQUEST_METHOD', '').upper() == 'POST':
            query = parse_qs(environ.get('QUERY_STRING', ''))
            method = query.get(self.param, [''])[0].upper()
            if method in OVERRIDABLE_METHODS:
                environ['REQUEST_METHOD'] = method
        return self.wsgi_app(environ, start_response)


def configure_request_interceptors(app):
    """Install the WSGI override and the request stamp/logger hooks."""
    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)
    log_requests = app.config['REQUEST_LOGGING']

    @app.before_request
    def stamp_request():
        g.request_started = time.perf_counter()
        g.request_time = datetime.now(timezone.utc).isoformat()

    @app.after_request
    def log_request(response):
        if log_requests:
            started = getattr(g, 'request_started', None)
            duration = (time.perf_counter() - started) * 1000 if started else 0.0
            logger.info('%s %s %s %.1f ms', request.method, request.path,
                        response.status_code, duration)
        return response
